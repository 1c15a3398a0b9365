"""
Guess Rejection Models

Reasons a guess can be refused. They are returned to the caller, shown as a
transient message, and leave the session untouched.
"""

from dataclasses import dataclass

from ..utils.helpers import letter_number_msg


class RejectionReason:
    """Base class for recoverable, user-facing guess rejections."""

    # Loading is the only reason worth retrying unchanged
    is_retryable = False

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TooShort(RejectionReason):
    length: int

    @property
    def message(self) -> str:
        return "Not enough letters"


@dataclass(frozen=True)
class StillLoading(RejectionReason):
    is_retryable = True

    @property
    def message(self) -> str:
        return "Wait a sec, loading words..."


@dataclass(frozen=True)
class NotRecognized(RejectionReason):
    word: str

    @property
    def message(self) -> str:
        return "Word not recognized"


@dataclass(frozen=True)
class HardModeMismatch(RejectionReason):
    """A known right-place letter was not kept. ``position`` is zero-based."""
    position: int
    letter: str

    @property
    def message(self) -> str:
        return f"{letter_number_msg(self.position)} must be {self.letter}"


@dataclass(frozen=True)
class HardModeMissingLetter(RejectionReason):
    letter: str

    @property
    def message(self) -> str:
        return f"Guess must contain {self.letter}"
