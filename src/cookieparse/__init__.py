"""cookieparse — Cookie and Set-Cookie header parsing over octets.

Cookies are octets, not characters. Every parser has a byte entry point
and a text entry point that share one validation core.

Basic usage::

    from cookieparse import parse_cookies_from_bytes, parse_set_cookie_from_bytes

    parse_cookies_from_bytes(b"name1=value1; name2=value2")
    # {b"name1": b"value1", b"name2": b"value2"}

    cookie = parse_set_cookie_from_bytes(b"id=a3fWa; Path=/; Secure; HttpOnly")
    cookie.path, cookie.secure, cookie.http_only
    # ("/", True, True)

Failures raise a ``CookieParseError`` subclass carrying an ``ErrorKind``.
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "Cookie",
    "CookieDate",
    "CookieError",
    "CookieParseError",
    "CookiePath",
    "ErrorKind",
    "InvalidDate",
    "InvalidMaxAge",
    "InvalidName",
    "InvalidSameSite",
    "InvalidValue",
    "Malformed",
    "ParserConfig",
    "SameSite",
    "parse_cookie_date",
    "parse_cookies_from_bytes",
    "parse_cookies_from_str",
    "parse_set_cookie_from_bytes",
    "parse_set_cookie_from_str",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import cookieparse`` fast while providing a clean top-level API.
    """
    if name in ("parse_cookies_from_bytes", "parse_cookies_from_str"):
        from cookieparse import cookie as _cookie

        return getattr(_cookie, name)

    if name in (
        "Cookie",
        "CookiePath",
        "SameSite",
        "parse_set_cookie_from_bytes",
        "parse_set_cookie_from_str",
    ):
        from cookieparse import setcookie as _setcookie

        return getattr(_setcookie, name)

    if name in ("CookieDate", "parse_cookie_date"):
        from cookieparse import date as _date

        return getattr(_date, name)

    if name in ("DEFAULT_CONFIG", "ParserConfig"):
        from cookieparse import config as _config

        return getattr(_config, name)

    if name in (
        "ConfigurationError",
        "CookieError",
        "CookieParseError",
        "ErrorKind",
        "InvalidDate",
        "InvalidMaxAge",
        "InvalidName",
        "InvalidSameSite",
        "InvalidValue",
        "Malformed",
    ):
        from cookieparse import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
