"""``cookieparse cookie`` / ``cookieparse set-cookie`` — parse and print JSON.

Reads the header value from the positional argument or stdin, parses it
with the text entry point, and prints the result as JSON. Exits with
code 1 if the header does not parse.
"""

import argparse
import json
import sys
from typing import Any

from cookieparse.config import ParserConfig
from cookieparse.cookie import parse_cookies_from_str
from cookieparse.errors import CookieParseError
from cookieparse.setcookie import Cookie, parse_set_cookie_from_str


def _read_header(args: argparse.Namespace) -> str:
    if args.header is not None:
        return args.header
    return sys.stdin.read().rstrip("\r\n")


def cookie_to_dict(cookie: Cookie[str]) -> dict[str, Any]:
    """JSON-ready view of a parsed Set-Cookie record."""
    expires = cookie.expires
    return {
        "name": cookie.name,
        "value": cookie.value,
        "domain": cookie.domain,
        "expires": str(expires) if expires is not None else None,
        "max_age": cookie.max_age,
        "http_only": cookie.http_only,
        "partitioned": cookie.partitioned,
        "path": cookie.path,
        "same_site": cookie.same_site.value if cookie.same_site is not None else None,
        "secure": cookie.secure,
    }


def run_cookie(args: argparse.Namespace) -> None:
    """Parse a Cookie header and print the name-value map."""
    try:
        cookies = parse_cookies_from_str(_read_header(args))
    except CookieParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(json.dumps(cookies, indent=2, ensure_ascii=False))


def run_set_cookie(args: argparse.Namespace) -> None:
    """Parse a Set-Cookie header and print the record."""
    config = ParserConfig(
        ascii_only=args.ascii_only,
        empty_domain=args.empty_domain,
        empty_path=args.empty_path,
        empty_max_age=args.empty_max_age,
    )
    try:
        cookie = parse_set_cookie_from_str(_read_header(args), config)
    except CookieParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(json.dumps(cookie_to_dict(cookie), indent=2, ensure_ascii=False))
