"""cookieparse CLI — parse Cookie and Set-Cookie header values.

Entry point registered as ``cookieparse`` in ``pyproject.toml``::

    [project.scripts]
    cookieparse = "cookieparse.cli:main"
"""

import argparse
import logging
import sys

_POLICY_CHOICES = ("keep", "ignore", "reject")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``cookieparse`` command."""
    parser = argparse.ArgumentParser(
        prog="cookieparse",
        description="cookieparse — Cookie and Set-Cookie header parsing over octets.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser decisions (ignored and repeated attributes) to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- cookieparse cookie -----------------------------------------------
    cookie_parser = subparsers.add_parser("cookie", help="Parse a Cookie request header")
    cookie_parser.add_argument(
        "header",
        nargs="?",
        default=None,
        help="Header value (read from stdin when omitted)",
    )

    # -- cookieparse set-cookie -------------------------------------------
    set_cookie_parser = subparsers.add_parser(
        "set-cookie", help="Parse a Set-Cookie response header"
    )
    set_cookie_parser.add_argument(
        "header",
        nargs="?",
        default=None,
        help="Header value (read from stdin when omitted)",
    )
    set_cookie_parser.add_argument(
        "--ascii-only",
        action="store_true",
        help="Reject bytes 0x80-0xFF in the cookie name and value",
    )
    set_cookie_parser.add_argument(
        "--empty-domain",
        choices=_POLICY_CHOICES,
        default="keep",
        help="What to do with an empty Domain value",
    )
    set_cookie_parser.add_argument(
        "--empty-path",
        choices=_POLICY_CHOICES,
        default="keep",
        help="What to do with an empty Path value",
    )
    set_cookie_parser.add_argument(
        "--empty-max-age",
        choices=("ignore", "reject"),
        default="reject",
        help="What to do with an empty Max-Age value",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("cookieparse").setLevel(logging.DEBUG)

    if args.command == "cookie":
        from cookieparse.cli._parse import run_cookie

        run_cookie(args)
    elif args.command == "set-cookie":
        from cookieparse.cli._parse import run_set_cookie

        run_set_cookie(args)
