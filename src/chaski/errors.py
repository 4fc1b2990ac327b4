"""Errors raised while reading or writing CGI parameters."""

from __future__ import annotations


class ChaskiError(Exception):
    """Base for all Chaski errors."""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class ValidationError(ChaskiError, ValueError):
    """Missing mandatory parameter, bad conversion, or undecodable ID."""


class SecurityError(ChaskiError):
    """Parameter value rejected to prevent an unvalidated redirect."""
