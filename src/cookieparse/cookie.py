"""``Cookie`` request header parsing.

A Cookie header is a ``"; "``-separated list of ``name=value`` pairs::

    parse_cookies_from_bytes(b"name1=value1; name2=value2")
    # {b"name1": b"value1", b"name2": b"value2"}

Cookies are octets, not characters. ``parse_cookies_from_str`` is the
text entry point over the same core for callers whose headers are
already decoded.

Names and values are not checked against the octet classes on this
path; only the pair structure is enforced. When a name repeats, the
last pair wins.
"""

from cookieparse._internal.text import decode_text, encode_text
from cookieparse.errors import Malformed

PAIR_SEPARATOR = b"; "


def parse_cookies_from_bytes(data: bytes) -> dict[bytes, bytes]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for an empty header.

    Raises:
        Malformed: A pair has no ``=``, an empty name, or a stray ``;``.
    """
    if not data:
        return {}
    cookies: dict[bytes, bytes] = {}
    offset = 0
    for pair in data.split(PAIR_SEPARATOR):
        name, sep, value = pair.partition(b"=")
        if not sep:
            raise Malformed(f"cookie pair {pair!r} has no '='", offset=offset)
        if not name:
            raise Malformed("cookie pair has an empty name", offset=offset)
        stray = pair.find(b";")
        if stray != -1:
            raise Malformed(
                "pairs must be separated by '; '", offset=offset + stray, octet=pair[stray]
            )
        cookies[name] = value
        offset += len(pair) + len(PAIR_SEPARATOR)
    return cookies


def parse_cookies_from_str(text: str) -> dict[str, str]:
    """Text variant of :func:`parse_cookies_from_bytes`.

    The header is encoded as UTF-8 for parsing. Separators are ASCII, so
    every name and value slice decodes back cleanly.
    """
    return {
        decode_text(name): decode_text(value)
        for name, value in parse_cookies_from_bytes(encode_text(text)).items()
    }
