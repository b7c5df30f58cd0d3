# promptline/core/config_schema.py

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from pathlib import Path


class InputSettings(BaseModel):
    default_retry: bool = True
    retry_message: Optional[str] = None  # e.g. "Invalid input, try again."
    log_file: Optional[Path] = None  # NDJSON event log; None disables it
    log_max_bytes: int = Field(5 * 1024 * 1024, gt=0)
    true_tokens: List[str] = Field(default_factory=lambda: ["y", "yes", "true", "1"])
    false_tokens: List[str] = Field(default_factory=lambda: ["n", "no", "false", "0"])

    @field_validator("retry_message")
    def blank_message_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("true_tokens", "false_tokens")
    def tokens_not_empty(cls, v):
        tokens = [t.strip() for t in v if t.strip()]
        if not tokens:
            raise ValueError("at least one token must be defined")
        return tokens

    @property
    def logging_enabled(self) -> bool:
        return self.log_file is not None
