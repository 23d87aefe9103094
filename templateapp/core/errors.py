"""Shared error types.

Raised at configuration and parsing boundaries; the theme core itself has no
failure path.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:  # pragma: no cover
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"


class ValidationError(AppError):
    """Invalid user input or configuration."""
