"""Parameter accessor over an already decoded request-parameter mapping."""

from __future__ import annotations

import logging
import math
import re
from types import MappingProxyType
from typing import Callable, Mapping, TypeVar
from urllib.parse import parse_qsl, quote

from chaski.decoder import DecoderRing
from chaski.errors import SecurityError, ValidationError
from chaski.interface import CgiInterface
from chaski.slug import slugify
from chaski.urls import build_url, is_relative_url

logger = logging.getLogger("chaski.cgi")
audit_logger = logging.getLogger("chaski.audit")

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_TRUE_TOKENS = frozenset({"1", "true", "on", "yes"})
_FALSE_TOKENS = frozenset({"0", "false", "off", "no"})


def _invalid(name: str, raw: str, kind: str) -> ValidationError:
    logger.debug("Parameter %s=%r is not a valid %s", name, raw, kind)
    return ValidationError(f"Parameter '{name}' is not a valid {kind}: {raw!r}", name)


def _to_bool(name: str, raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise _invalid(name, raw, "boolean")


def _to_float(name: str, raw: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(raw.strip()):
        raise _invalid(name, raw, "float")
    value = float(raw)
    if not math.isfinite(value):
        raise _invalid(name, raw, "float")
    return value


def _to_int(name: str, raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw.strip()):
        raise _invalid(name, raw, "integer")
    try:
        return int(raw)
    except ValueError:
        # Beyond the interpreter's digit limit for str -> int.
        raise _invalid(name, raw[:32] + "...", "integer") from None


def _to_string(name: str, raw: str) -> str:
    return raw


def _fragment(name: str, text: str) -> str:
    return f"{quote(name, safe='')}={quote(text, safe='')}"


class Cgi(CgiInterface):
    """CGI parameter accessor for one request.

    params is copied on construction and read-only afterwards. An empty
    value counts as absent. leader is prefixed to URLs built here.
    """

    def __init__(
        self,
        params: Mapping[str, str],
        decoder: DecoderRing,
        leader: str = "",
    ):
        self._params = MappingProxyType(dict(params))
        self._decoder = decoder
        self._leader = leader

    @classmethod
    def from_query_string(
        cls, query: str, decoder: DecoderRing, leader: str = ""
    ) -> Cgi:
        """Build an accessor from a raw query string. Last value wins."""
        return cls(dict(parse_qsl(query, keep_blank_values=True)), decoder, leader)

    # ── Lookup ────────────────────────────────────────────────

    def _raw(self, name: str) -> str | None:
        value = self._params.get(name)
        if value is None or value == "":
            return None
        return value

    def _opt(
        self, name: str, convert: Callable[[str, str], T], default: T | None
    ) -> T | None:
        raw = self._raw(name)
        if raw is None:
            return default
        return convert(name, raw)

    def _man(
        self, name: str, convert: Callable[[str, str], T], default: T | None
    ) -> T:
        value = self._opt(name, convert, default)
        if value is None:
            logger.debug("Mandatory parameter %s is not set", name)
            raise ValidationError(f"Mandatory parameter '{name}' is not set", name)
        return value

    def _id_converter(self, label: str) -> Callable[[str, str], int]:
        def convert(name: str, raw: str) -> int:
            try:
                return self._decoder.decode(label, raw)
            except ValidationError as exc:
                logger.debug("Parameter %s: %s", name, exc)
                raise ValidationError(f"Parameter '{name}': {exc}", name) from exc

        return convert

    def _check_url(self, name: str, url: str | None, force_relative: bool) -> None:
        if url is None or not force_relative:
            return
        if not is_relative_url(url):
            audit_logger.warning("Rejected redirect target %s=%r", name, url)
            raise SecurityError(
                f"Parameter '{name}' must hold a relative URL, got {url!r}", name
            )

    # ── Mandatory getters ─────────────────────────────────────

    def get_man_bool(self, name: str, default: bool | None = None) -> bool:
        return self._man(name, _to_bool, default)

    def get_man_float(self, name: str, default: float | None = None) -> float:
        return self._man(name, _to_float, default)

    def get_man_id(self, name: str, label: str, default: int | None = None) -> int:
        return self._man(name, self._id_converter(label), default)

    def get_man_int(self, name: str, default: int | None = None) -> int:
        return self._man(name, _to_int, default)

    def get_man_string(self, name: str, default: str | None = None) -> str:
        return self._man(name, _to_string, default)

    def get_man_url(
        self, name: str, default: str | None = None, force_relative: bool = True
    ) -> str:
        url = self._man(name, _to_string, default)
        self._check_url(name, url, force_relative)
        return url

    # ── Optional getters ──────────────────────────────────────

    def get_opt_bool(self, name: str, default: bool | None = None) -> bool | None:
        return self._opt(name, _to_bool, default)

    def get_opt_float(self, name: str, default: float | None = None) -> float | None:
        return self._opt(name, _to_float, default)

    def get_opt_id(
        self, name: str, label: str, default: int | None = None
    ) -> int | None:
        return self._opt(name, self._id_converter(label), default)

    def get_opt_int(self, name: str, default: int | None = None) -> int | None:
        return self._opt(name, _to_int, default)

    def get_opt_string(self, name: str, default: str | None = None) -> str | None:
        return self._opt(name, _to_string, default)

    def get_opt_url(
        self, name: str, default: str | None = None, force_relative: bool = True
    ) -> str | None:
        url = self._opt(name, _to_string, default)
        self._check_url(name, url, force_relative)
        return url

    # ── Putters ───────────────────────────────────────────────

    def put_bool(self, name: str, value: bool | None, mandatory: bool = False) -> str:
        if value:
            return _fragment(name, "1")
        if mandatory:
            return _fragment(name, "0")
        return ""

    def put_float(self, name: str, value: float | None) -> str:
        if value is None:
            return ""
        value = float(value)
        if not math.isfinite(value):
            raise ValidationError(f"Parameter '{name}' cannot hold {value!r}", name)
        return _fragment(name, repr(value))

    def put_id(self, name: str, value: int | None, label: str) -> str:
        if not self._decoder.knows(label):
            raise ValidationError(f"Unknown ID label '{label}'", name)
        if value is None:
            return ""
        return _fragment(name, self._decoder.encode(label, value))

    def put_int(self, name: str, value: int | None) -> str:
        if value is None:
            return ""
        return _fragment(name, str(int(value)))

    def put_leader(self) -> str:
        return self._leader

    def put_slug_name(self, string: str | None, extension: str = ".html") -> str:
        if string is None:
            return ""
        slug = slugify(string)
        if not slug:
            return ""
        return slug + extension

    def put_string(self, name: str, value: str | None) -> str:
        if value is None:
            return ""
        return _fragment(name, value)

    def put_url(self, name: str, value: str | None) -> str:
        return self.put_string(name, value)

    # ── URL assembly ──────────────────────────────────────────

    def build_url(self, path: str, *fragments: str) -> str:
        """Leader + path + query made of the non-empty put_* fragments."""
        return build_url(self._leader, path, fragments)
