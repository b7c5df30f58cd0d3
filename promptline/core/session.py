# promptline/core/session.py

from datetime import datetime, timezone
import uuid

def _now():
    return datetime.now(timezone.utc)

class ReadSession:
    """
    Bookkeeping for one acquisition call. Lives only as long as the call;
    raw lines are never kept here.
    """
    def __init__(self, target: str, retry: bool, call_id: str | None = None):
        self.call_id = call_id or str(uuid.uuid4())
        self.target = target
        self.retry = retry
        self.created_at = _now()
        self.updated_at = _now()
        self.attempts = 0
        self.parse_failures = 0
        self.outcome = None  # "parsed", "parse_error" or "io_error"

    def start_attempt(self):
        self.attempts += 1
        self.touch()

    def record_parse_failure(self):
        self.parse_failures += 1
        self.touch()

    def finish(self, outcome: str):
        self.outcome = outcome
        self.touch()

    def touch(self):
        self.updated_at = _now()

    def to_dict(self):
        return {
            "call_id": self.call_id,
            "target": self.target,
            "retry": self.retry,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "attempts": self.attempts,
            "parse_failures": self.parse_failures,
            "outcome": self.outcome,
        }
