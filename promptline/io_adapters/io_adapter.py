# promptline/io_adapters/io_adapter.py

from abc import ABC, abstractmethod

class IOAdapter(ABC):
    @abstractmethod
    def prompt(self, message: str) -> None:
        ...

    @abstractmethod
    def collect(self, prompt_text: str) -> str:
        """
        Show prompt_text, block for one line of input and return it stripped.
        Raises InputIOError when the streams fail or input is exhausted.
        """
        ...
