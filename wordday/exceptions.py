"""
Exceptions

Errors raised when a caller breaks the puzzle state machine.
"""


class InvalidOperationError(RuntimeError):
    """
    Raised for caller or state-machine violations: submitting to a completed
    session, tallying twice, editing a submitted row, or evaluating words of
    the wrong length.

    Recoverable guess rejections are never raised; they are returned as
    ``RejectionReason`` values.
    """
