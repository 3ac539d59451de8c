"""Allowed-octet classes for cookie names and values.

Each class is compiled once into a 256-entry table. Membership is a
table lookup, and whole-sequence checks strip every allowed byte with
``bytes.translate`` so only the offenders are left.

Name class (RFC 6265 ``token``): everything except CTLs (0x00-0x1F, 0x7F),
space, and the separators ``( ) < > @ , ; : \\ " / [ ] ? = { }``.

Value class (``cookie-octet``): everything except CTLs, space, ``"``,
``,``, ``;`` and ``\\``.

Bytes 0x80-0xFF pass both classes unless ``ascii_only`` is requested.
"""

_CONTROL = bytes(range(0x20)) + b"\x7f"
_HIGH = bytes(range(0x80, 0x100))

NAME_EXCLUDED = _CONTROL + b' ()<>@,;:\\"/[]?={}'
VALUE_EXCLUDED = _CONTROL + b' ",;\\'


def _compile(excluded: bytes) -> tuple[bool, ...]:
    table = [True] * 256
    for octet in excluded:
        table[octet] = False
    return tuple(table)


def _allowed(table: tuple[bool, ...]) -> bytes:
    return bytes(octet for octet, ok in enumerate(table) if ok)


NAME_TABLE = _compile(NAME_EXCLUDED)
VALUE_TABLE = _compile(VALUE_EXCLUDED)
ASCII_NAME_TABLE = _compile(NAME_EXCLUDED + _HIGH)
ASCII_VALUE_TABLE = _compile(VALUE_EXCLUDED + _HIGH)

# Allowed-byte strings for bytes.translate(None, delete=...)
_NAME_ALLOWED = _allowed(NAME_TABLE)
_VALUE_ALLOWED = _allowed(VALUE_TABLE)
_ASCII_NAME_ALLOWED = _allowed(ASCII_NAME_TABLE)
_ASCII_VALUE_ALLOWED = _allowed(ASCII_VALUE_TABLE)


def is_name_octet(octet: int, *, ascii_only: bool = False) -> bool:
    """Whether a single byte may appear in a cookie name."""
    return (ASCII_NAME_TABLE if ascii_only else NAME_TABLE)[octet]


def is_value_octet(octet: int, *, ascii_only: bool = False) -> bool:
    """Whether a single byte may appear in a cookie value."""
    return (ASCII_VALUE_TABLE if ascii_only else VALUE_TABLE)[octet]


def is_cookie_name(data: bytes, *, ascii_only: bool = False) -> bool:
    """True if *data* is non-empty and every byte is a name octet."""
    allowed = _ASCII_NAME_ALLOWED if ascii_only else _NAME_ALLOWED
    return bool(data) and not data.translate(None, allowed)


def is_cookie_value(data: bytes, *, ascii_only: bool = False) -> bool:
    """True if *data* is non-empty and every byte is a value octet."""
    allowed = _ASCII_VALUE_ALLOWED if ascii_only else _VALUE_ALLOWED
    return bool(data) and not data.translate(None, allowed)


def _first_invalid(data: bytes, table: tuple[bool, ...], allowed: bytes) -> int | None:
    if not data.translate(None, allowed):
        return None
    for offset, octet in enumerate(data):
        if not table[octet]:
            return offset
    return None


def first_invalid_name_octet(data: bytes, *, ascii_only: bool = False) -> int | None:
    """Offset of the first byte not allowed in a name, or ``None``."""
    if ascii_only:
        return _first_invalid(data, ASCII_NAME_TABLE, _ASCII_NAME_ALLOWED)
    return _first_invalid(data, NAME_TABLE, _NAME_ALLOWED)


def first_invalid_value_octet(data: bytes, *, ascii_only: bool = False) -> int | None:
    """Offset of the first byte not allowed in a value, or ``None``."""
    if ascii_only:
        return _first_invalid(data, ASCII_VALUE_TABLE, _ASCII_VALUE_ALLOWED)
    return _first_invalid(data, VALUE_TABLE, _VALUE_ALLOWED)
