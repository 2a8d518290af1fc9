from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .results import ResultCode

DEFAULT_COLLECTION = "default"


@dataclass(frozen=True)
class UnlockRequest:
    """
    Identifies the collection an unlock is requested for.

    Attributes:
        collection_selector (str): "default" or a named collection identifier.
    """
    collection_selector: str = DEFAULT_COLLECTION


@dataclass(frozen=True)
class UnlockOutcome(ABC):
    """
    The result of a single unlock request.

    Use `UnlockOutcome.from_code` to get the matching subclass for a code returned by a backend.

    Attributes:
        code (ResultCode | int | Any): The code the backend returned, kept as received.
    """
    code: Any

    @classmethod
    def from_code(cls, code: Any) -> "UnlockOutcome":
        """
        Builds the outcome for a backend result code. Only `ResultCode.OK` counts as success; every other value, known or not, is a failure.

        Args:
            code (ResultCode | int | Any): The code returned by the backend.

        Returns:
            UnlockOutcome: An `UnlockSucceeded` or `UnlockFailed` instance.
        """
        if isinstance(code, int) and not isinstance(code, bool) and code == ResultCode.OK:
            return UnlockSucceeded(code)
        return UnlockFailed(code)

    @property
    def raw_code(self) -> Any:
        """The code as a plain value, so enum members print as their number."""
        if isinstance(self.code, Enum):
            return self.code.value
        return self.code

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0

    @property
    @abstractmethod
    def exit_status(self) -> int:
        """Process exit status for this outcome."""

    @property
    @abstractmethod
    def message(self) -> str:
        """The line printed for this outcome."""


@dataclass(frozen=True)
class UnlockSucceeded(UnlockOutcome):
    exit_status = 0

    @property
    def message(self) -> str:
        return "Successfully unlocked"


@dataclass(frozen=True)
class UnlockFailed(UnlockOutcome):
    exit_status = 1

    @property
    def message(self) -> str:
        return f"Error unlocking keyring: {self.raw_code}"
