from __future__ import annotations

from typing import List, Optional


class CavegenError(Exception):
    """Base error for cave generation."""


class InvalidConfiguration(CavegenError, ValueError):
    """Raised when generation settings are out of range or malformed."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            parts.append(f" - {e}")
        return "\n".join(parts)
