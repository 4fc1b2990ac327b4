"""Abstract interface for safely accessing CGI parameters.

Getters come in two flavours. Mandatory getters (get_man_*) raise
ValidationError when the parameter is missing and no default is given.
Optional getters (get_opt_*) return the default, None unless given, when
the parameter is missing. Both raise ValidationError when a value is
present but cannot be converted.

Putters (put_*) render a value as a percent-encoded name=value fragment
that can be placed in a query string as is, or "" when there is nothing
to render.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CgiInterface(ABC):
    """Typed, validated reading and writing of CGI parameters."""

    # ── Mandatory getters ─────────────────────────────────────

    @abstractmethod
    def get_man_bool(self, name: str, default: bool | None = None) -> bool:
        """Return the value of a mandatory boolean parameter."""

    @abstractmethod
    def get_man_float(self, name: str, default: float | None = None) -> float:
        """Return the value of a mandatory float parameter."""

    @abstractmethod
    def get_man_id(self, name: str, label: str, default: int | None = None) -> int:
        """Return a mandatory obfuscated database ID.

        label is the alias for the column holding the ID and must match
        the label used when the ID was obfuscated.
        """

    @abstractmethod
    def get_man_int(self, name: str, default: int | None = None) -> int:
        """Return the value of a mandatory integer parameter."""

    @abstractmethod
    def get_man_string(self, name: str, default: str | None = None) -> str:
        """Return the value of a mandatory parameter.

        Use get_man_url for parameters holding a URL.
        """

    @abstractmethod
    def get_man_url(
        self, name: str, default: str | None = None, force_relative: bool = True
    ) -> str:
        """Return a mandatory parameter holding a URL.

        With force_relative set, an absolute or protocol-relative URL
        raises SecurityError (unvalidated redirect protection).
        """

    # ── Optional getters ──────────────────────────────────────

    @abstractmethod
    def get_opt_bool(self, name: str, default: bool | None = None) -> bool | None:
        """Return the value of an optional boolean parameter."""

    @abstractmethod
    def get_opt_float(self, name: str, default: float | None = None) -> float | None:
        """Return the value of an optional float parameter."""

    @abstractmethod
    def get_opt_id(
        self, name: str, label: str, default: int | None = None
    ) -> int | None:
        """Return an optional obfuscated database ID."""

    @abstractmethod
    def get_opt_int(self, name: str, default: int | None = None) -> int | None:
        """Return the value of an optional integer parameter."""

    @abstractmethod
    def get_opt_string(self, name: str, default: str | None = None) -> str | None:
        """Return the value of an optional parameter."""

    @abstractmethod
    def get_opt_url(
        self, name: str, default: str | None = None, force_relative: bool = True
    ) -> str | None:
        """Return an optional parameter holding a URL.

        Same redirect protection as get_man_url.
        """

    # ── Putters ───────────────────────────────────────────────

    @abstractmethod
    def put_bool(self, name: str, value: bool | None, mandatory: bool = False) -> str:
        """Render a boolean parameter.

        A false value renders as "" unless mandatory is set.
        """

    @abstractmethod
    def put_float(self, name: str, value: float | None) -> str:
        """Render a float parameter."""

    @abstractmethod
    def put_id(self, name: str, value: int | None, label: str) -> str:
        """Render a database ID obfuscated under label."""

    @abstractmethod
    def put_int(self, name: str, value: int | None) -> str:
        """Render an integer parameter."""

    @abstractmethod
    def put_leader(self) -> str:
        """Return the common leader for all URLs."""

    @abstractmethod
    def put_slug_name(self, string: str | None, extension: str = ".html") -> str:
        """Return a (virtual) filename built from the slug of string."""

    @abstractmethod
    def put_string(self, name: str, value: str | None) -> str:
        """Render a string parameter."""

    @abstractmethod
    def put_url(self, name: str, value: str | None) -> str:
        """Render a parameter holding a URL. Alias of put_string."""
