"""cookieparse exception hierarchy.

Shared by the validators, the date parser, and both header parsers so
every module raises and catches the same types.

Parse failures form a closed taxonomy. Each ``ErrorKind`` has its own
``CookieParseError`` subclass, so callers can either catch a specific
class or match on ``err.kind``::

    try:
        cookie = parse_set_cookie_from_bytes(raw)
    except CookieParseError as exc:
        if exc.kind is ErrorKind.INVALID_DATE:
            ...
"""

from enum import Enum


class ErrorKind(Enum):
    """Every way a cookie header can fail to parse."""

    INVALID_NAME = "invalid_name"
    INVALID_VALUE = "invalid_value"
    INVALID_DATE = "invalid_date"
    INVALID_MAX_AGE = "invalid_max_age"
    INVALID_SAME_SITE = "invalid_same_site"
    MALFORMED = "malformed"


class CookieError(Exception):
    """Base for all cookieparse errors."""


class ConfigurationError(CookieError):
    """Raised when a ``ParserConfig`` holds an unsupported policy."""


class CookieParseError(CookieError):
    """A header failed to parse.

    ``offset`` is the byte offset into the parsed header where the
    problem was found, and ``octet`` the offending byte, when known.
    """

    kind: ErrorKind = ErrorKind.MALFORMED

    def __init__(
        self,
        detail: str = "",
        *,
        offset: int | None = None,
        octet: int | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.offset = offset
        self.octet = octet

    def __str__(self) -> str:
        message = self.kind.value
        if self.detail:
            message += f": {self.detail}"
        if self.offset is not None:
            message += f" at offset {self.offset}"
        if self.octet is not None:
            message += f" (byte 0x{self.octet:02x})"
        return message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.detail!r}, offset={self.offset!r}, octet={self.octet!r})"
        )


class InvalidName(CookieParseError):  # noqa: N818 — named after the error kind
    """Cookie name is empty or contains a disallowed byte."""

    kind = ErrorKind.INVALID_NAME


class InvalidValue(CookieParseError):  # noqa: N818 — named after the error kind
    """Cookie value contains a disallowed byte or has unbalanced quotes."""

    kind = ErrorKind.INVALID_VALUE


class InvalidDate(CookieParseError):  # noqa: N818 — named after the error kind
    """Expires value does not follow the HTTP-date grammar."""

    kind = ErrorKind.INVALID_DATE


class InvalidMaxAge(CookieParseError):  # noqa: N818 — named after the error kind
    """Max-Age value is not a signed 32-bit decimal integer."""

    kind = ErrorKind.INVALID_MAX_AGE


class InvalidSameSite(CookieParseError):  # noqa: N818 — named after the error kind
    """SameSite value is not Strict, Lax, or None."""

    kind = ErrorKind.INVALID_SAME_SITE


class Malformed(CookieParseError):  # noqa: N818 — named after the error kind
    """Structural failure: missing ``=``, stray ``;``, truncated input."""

    kind = ErrorKind.MALFORMED
