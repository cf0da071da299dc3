"""Structured errors for spring construction."""

from __future__ import annotations
from typing import Any


class SpringError(Exception):
    """Base class for spring related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidParameterError(SpringError, ValueError):
    """Raised when spring parameters or motion settings are out of range."""
