"""Base exception class for all letterly-specific errors."""


class LetterlyError(Exception):
    """Base class for all letterly errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
