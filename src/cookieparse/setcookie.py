"""``Set-Cookie`` response header parsing.

A Set-Cookie header is one ``name=value`` pair followed by ``"; "``
separated attributes::

    cookie = parse_set_cookie_from_str("id=a3fWa; Max-Age=2592000; Secure")
    cookie.max_age  # 2592000
    cookie.secure  # True

Both entry points share one core over octets. The byte entry point
returns ``Cookie[bytes]``, the text entry point ``Cookie[str]``; the
attribute fields (``domain``, ``path``, ...) are ``str`` either way.

Parsing is fail-fast: the first invalid token raises its specific
``CookieParseError`` subclass and no partial record is returned.
Attribute names match case-insensitively. Unknown attributes are
skipped, and a repeated attribute overwrites the earlier one.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType

from cookieparse._internal.text import decode_text, encode_text
from cookieparse.charclass import first_invalid_name_octet, first_invalid_value_octet
from cookieparse.config import DEFAULT_CONFIG, EmptyPolicy, ParserConfig
from cookieparse.date import CookieDate, parse_cookie_date
from cookieparse.errors import (
    InvalidDate,
    InvalidMaxAge,
    InvalidName,
    InvalidSameSite,
    InvalidValue,
    Malformed,
)

logger = logging.getLogger("cookieparse.setcookie")

ATTRIBUTE_SEPARATOR = b"; "

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_MAX_AGE_RE = re.compile(rb"[+-]?[0-9]+")

CookiePath = NewType("CookiePath", str)


class SameSite(Enum):
    """Cross-site sending policy from the ``SameSite`` attribute."""

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


_SAME_SITE: dict[bytes, SameSite] = {member.value.lower().encode(): member for member in SameSite}

# Flag attributes: presence sets the field, any "=value" is ignored.
_FLAGS: dict[bytes, str] = {
    b"httponly": "http_only",
    b"partitioned": "partitioned",
    b"secure": "secure",
}


@dataclass(frozen=True, slots=True)
class Cookie[T: (str, bytes)]:
    """A parsed ``Set-Cookie`` header.

    ``name`` and ``value`` keep the type of the parsed input. The value
    has its surrounding quotes stripped.
    """

    name: T
    value: T
    # Host the cookie is sent to
    domain: str | None = None
    # Absent means a session cookie
    expires: CookieDate | None = None
    # Seconds until expiry; takes precedence over expires for user agents
    max_age: int | None = None
    http_only: bool = False
    # Stored in partitioned (CHIPS) storage
    partitioned: bool = False
    # Not normalized
    path: CookiePath | None = None
    same_site: SameSite | None = None
    # Sent only over https
    secure: bool = False


def parse_set_cookie_from_bytes(data: bytes, config: ParserConfig | None = None) -> Cookie[bytes]:
    """Parse a ``Set-Cookie`` header value given as raw octets.

    Attribute text is decoded as latin-1, so every octet survives.

    Raises:
        CookieParseError: The matching subclass for the first failure.
    """
    name, value, attributes = _parse(data, config or DEFAULT_CONFIG, _decode_latin1)
    return Cookie(name=name, value=value, **attributes)


def parse_set_cookie_from_str(text: str, config: ParserConfig | None = None) -> Cookie[str]:
    """Parse a ``Set-Cookie`` header value given as text."""
    name, value, attributes = _parse(encode_text(text), config or DEFAULT_CONFIG, decode_text)
    return Cookie(name=decode_text(name), value=decode_text(value), **attributes)


# ---------------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------------


def _decode_latin1(data: bytes) -> str:
    return data.decode("latin-1")


def _parse(
    data: bytes,
    config: ParserConfig,
    decode: Callable[[bytes], str],
) -> tuple[bytes, bytes, dict[str, Any]]:
    """Split *data* into name, unquoted value, and ``Cookie`` attribute fields."""
    if not data:
        raise Malformed("empty Set-Cookie header", offset=0)

    end = data.find(b";")
    if end == -1:
        end = len(data)
    name, sep, raw_value = data[:end].partition(b"=")
    if not sep:
        raise Malformed("cookie pair has no '='", offset=0)

    _check_name(name, config.ascii_only)
    value = _parse_value(raw_value, len(name) + 1, config.ascii_only)
    attributes = _parse_attributes(data, end, config, decode)
    return name, value, attributes


def _check_name(name: bytes, ascii_only: bool) -> None:
    if not name:
        raise InvalidName("cookie name is empty", offset=0)
    bad = first_invalid_name_octet(name, ascii_only=ascii_only)
    if bad is not None:
        raise InvalidName("disallowed byte in cookie name", offset=bad, octet=name[bad])


def _parse_value(raw: bytes, start: int, ascii_only: bool) -> bytes:
    """Strip optional quotes from *raw* and validate what is inside.

    The value class has no ``"`` or ``;``, so quoting never lets either
    through.
    """
    inner, inner_start = raw, start
    if raw.startswith(b'"'):
        if len(raw) < 2 or not raw.endswith(b'"'):
            raise InvalidValue("unbalanced quotes around cookie value", offset=start)
        inner, inner_start = raw[1:-1], start + 1

    bad = first_invalid_value_octet(inner, ascii_only=ascii_only)
    if bad is not None:
        raise InvalidValue(
            "disallowed byte in cookie value", offset=inner_start + bad, octet=inner[bad]
        )
    return inner


def _parse_attributes(
    data: bytes,
    start: int,
    config: ParserConfig,
    decode: Callable[[bytes], str],
) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if start == len(data):
        return fields
    if not data.startswith(ATTRIBUTE_SEPARATOR, start):
        raise Malformed("expected an attribute after '; '", offset=start, octet=data[start])

    offset = start + len(ATTRIBUTE_SEPARATOR)
    for token in data[offset:].split(ATTRIBUTE_SEPARATOR):
        _apply_attribute(token, offset, fields, config, decode)
        offset += len(token) + len(ATTRIBUTE_SEPARATOR)
    return fields


def _apply_attribute(
    token: bytes,
    offset: int,
    fields: dict[str, Any],
    config: ParserConfig,
    decode: Callable[[bytes], str],
) -> None:
    """Validate one attribute token and record it in *fields*."""
    if not token:
        raise Malformed("empty attribute", offset=offset)
    stray = token.find(b";")
    if stray != -1:
        raise Malformed(
            "attributes must be separated by '; '", offset=offset + stray, octet=token[stray]
        )

    attr, _, raw = token.partition(b"=")
    key = attr.lower()
    value_offset = offset + len(attr) + 1

    if key in _FLAGS:
        _store(fields, _FLAGS[key], True)
    elif key == b"domain":
        if _keep_value(raw, config.empty_domain, "Domain", value_offset, Malformed):
            _store(fields, "domain", decode(raw))
    elif key == b"path":
        if _keep_value(raw, config.empty_path, "Path", value_offset, Malformed):
            _store(fields, "path", CookiePath(decode(raw)))
    elif key == b"expires":
        try:
            expires = parse_cookie_date(raw)
        except InvalidDate as exc:
            raise InvalidDate(exc.detail, offset=value_offset) from None
        _store(fields, "expires", expires)
    elif key == b"max-age":
        if _keep_value(raw, config.empty_max_age, "Max-Age", value_offset, InvalidMaxAge):
            _store(fields, "max_age", _parse_max_age(raw, value_offset))
    elif key == b"samesite":
        same_site = _SAME_SITE.get(raw.lower())
        if same_site is None:
            raise InvalidSameSite(
                f"expected Strict, Lax, or None, got {raw!r}", offset=value_offset
            )
        _store(fields, "same_site", same_site)
    else:
        logger.debug("Ignoring unknown Set-Cookie attribute %r", attr)


def _keep_value(
    raw: bytes,
    policy: EmptyPolicy,
    attr: str,
    offset: int,
    error: type[Malformed] | type[InvalidMaxAge],
) -> bool:
    """Apply the empty-value *policy*; False means skip the attribute."""
    if raw or policy == "keep":
        return True
    if policy == "ignore":
        logger.debug("Ignoring empty %s attribute", attr)
        return False
    raise error(f"empty {attr} value", offset=offset)


def _parse_max_age(raw: bytes, offset: int) -> int:
    if _MAX_AGE_RE.fullmatch(raw) is None:
        raise InvalidMaxAge(f"expected a decimal integer, got {raw!r}", offset=offset)
    # More than 10 significant digits is out of 32-bit range for either sign.
    if len(raw.lstrip(b"+-").lstrip(b"0")) > 10:
        raise InvalidMaxAge("Max-Age outside the signed 32-bit range", offset=offset)
    max_age = int(raw)
    if not INT32_MIN <= max_age <= INT32_MAX:
        raise InvalidMaxAge("Max-Age outside the signed 32-bit range", offset=offset)
    return max_age


def _store(fields: dict[str, Any], field: str, value: object) -> None:
    if field in fields:
        logger.debug("Repeated %s attribute; keeping the last one", field)
    fields[field] = value
