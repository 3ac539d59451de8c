"""HTTP-date capture for the ``Expires`` attribute.

Recognizes exactly ``<day-name>, <day> <month> <year> <hh>:<mm>:<ss> GMT``.
The capture is purely syntactic: no calendar or range checks, no
timezone other than the literal ``GMT``.
"""

import re
from dataclasses import dataclass

from cookieparse.errors import InvalidDate

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_HTTP_DATE_RE = re.compile(
    rf"(?P<day_name>{'|'.join(DAY_NAMES)}), "
    r"(?P<day>[0-9]+) "
    rf"(?P<month>{'|'.join(MONTHS)}) "
    r"(?P<year>[0-9]+) "
    r"(?P<hour>[0-9]+):(?P<minute>[0-9]+):(?P<second>[0-9]+) GMT"
)


@dataclass(frozen=True, slots=True)
class CookieDate:
    """A syntactically valid HTTP-date.

    ``day`` may be 99 and ``hour`` may be 42: only the shape is checked.
    ``str()`` renders the date back in HTTP-date form.
    """

    day_name: str
    day: int
    month: str
    year: int
    hour: int
    minute: int
    second: int

    def __str__(self) -> str:
        return (
            f"{self.day_name}, {self.day:02d} {self.month} {self.year:04d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d} GMT"
        )


def parse_cookie_date(value: str | bytes) -> CookieDate:
    """Parse an ``Expires`` value.

    Bytes are decoded as latin-1 first, so every octet maps to one
    character and nothing is lost before matching.

    Raises:
        InvalidDate: On any separator, field, or suffix mismatch.
    """
    text = value.decode("latin-1") if isinstance(value, bytes) else value
    match = _HTTP_DATE_RE.fullmatch(text)
    if match is None:
        msg = f"expected '<day-name>, <day> <month> <year> <hh>:<mm>:<ss> GMT', got {text!r}"
        raise InvalidDate(msg)
    try:
        return CookieDate(
            day_name=match["day_name"],
            day=int(match["day"]),
            month=match["month"],
            year=int(match["year"]),
            hour=int(match["hour"]),
            minute=int(match["minute"]),
            second=int(match["second"]),
        )
    except ValueError as exc:
        # Digit runs past sys.get_int_max_str_digits()
        raise InvalidDate(f"numeric field too long in {text!r}") from exc
