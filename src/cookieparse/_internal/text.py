"""Text <-> octet bridging for the ``*_from_str`` entry points.

Text headers are encoded as UTF-8 and parsed as bytes. Every delimiter
the parsers split on is ASCII, and UTF-8 never uses ASCII bytes inside a
multi-byte sequence, so any slice of the encoded header decodes back
cleanly. ``surrogatepass`` keeps lone surrogates round-trippable.
"""

ENCODING = "utf-8"
ERRORS = "surrogatepass"


def encode_text(text: str) -> bytes:
    return text.encode(ENCODING, ERRORS)


def decode_text(data: bytes) -> str:
    return data.decode(ENCODING, ERRORS)
