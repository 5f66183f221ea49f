"""Errors raised while reading letterly settings."""

from collections.abc import Sequence
from pathlib import Path

from letterly.core.errors import LetterlyError


class MissingEnvVarsError(LetterlyError):
    """Settings reference environment variables that are unset."""

    def __init__(self, missing_vars: Sequence[str]) -> None:
        self.missing_vars = list(missing_vars)
        names = ", ".join(sorted(self.missing_vars))
        super().__init__(f"Failed to load settings: set {names} in the environment")


class ConfigValidationError(LetterlyError):
    """Settings were read but are malformed or reference unknown agents."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to validate settings: {reason}")


class ConfigLoadError(LetterlyError):
    """The settings path does not point at a readable file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load settings: no such file {path}")
