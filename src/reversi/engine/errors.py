from typing import Optional


class ReversiError(Exception):
    """Base class for rule violations a caller is expected to handle."""


class InvalidMoveError(ReversiError, ValueError):
    def __init__(self, position, reason: Optional[str] = None):
        self.position = position
        message = f"Illegal move at {tuple(position)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class GameFinishedError(ReversiError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: the game is already finished")


class InvalidStoneError(RuntimeError):
    """Raised when a non-stone value shows up where only BLACK or WHITE is valid.

    This is an internal invariant violation (a corrupted turn), not a
    user error, so it does not derive from ReversiError.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid stone value: {value!r}")
