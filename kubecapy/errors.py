"""Exceptions raised by the analyzer."""

from __future__ import annotations


class AppError(Exception):
    """A failure while loading or analysing a cluster dump."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_os_error(cls, error: OSError) -> "AppError":
        """Wrap a file-system failure."""
        return cls(f"IO error: {error}")

    @classmethod
    def from_json_error(cls, error: ValueError) -> "AppError":
        """Wrap a JSON decoding failure."""
        return cls(f"JSON error: {error}")


class ExitRequested(AppError):
    """Raised when the user picks the exit entry of the main menu."""

    def __init__(self, message: str = "exit") -> None:
        super().__init__(message)