"""Tests for cookieparse.setcookie — Set-Cookie response header parsing."""

import logging

import pytest

from cookieparse.config import ParserConfig
from cookieparse.date import CookieDate
from cookieparse.errors import (
    CookieParseError,
    ErrorKind,
    InvalidDate,
    InvalidMaxAge,
    InvalidName,
    InvalidSameSite,
    InvalidValue,
    Malformed,
)
from cookieparse.setcookie import (
    INT32_MAX,
    INT32_MIN,
    Cookie,
    CookiePath,
    SameSite,
    parse_set_cookie_from_bytes,
    parse_set_cookie_from_str,
)


class TestNameValuePair:
    def test_scenario_domain_secure_httponly(self) -> None:
        cookie = parse_set_cookie_from_str(
            "cookie-name=cookie-value; Domain=domain-value; Secure; HttpOnly"
        )
        assert cookie == Cookie(
            name="cookie-name",
            value="cookie-value",
            domain="domain-value",
            expires=None,
            http_only=True,
            max_age=None,
            partitioned=False,
            path=None,
            same_site=None,
            secure=True,
        )

    def test_bytes_entry_keeps_bytes(self) -> None:
        cookie = parse_set_cookie_from_bytes(b"cookie-name=cookie-value; Domain=domain-value")
        assert cookie.name == b"cookie-name"
        assert cookie.value == b"cookie-value"
        assert cookie.domain == "domain-value"

    def test_defaults(self) -> None:
        cookie = parse_set_cookie_from_str("n=v")
        assert cookie == Cookie(name="n", value="v")
        assert cookie.domain is None
        assert cookie.expires is None
        assert cookie.max_age is None
        assert cookie.path is None
        assert cookie.same_site is None
        assert cookie.http_only is False
        assert cookie.partitioned is False
        assert cookie.secure is False

    def test_empty_value(self) -> None:
        assert parse_set_cookie_from_str("name=").value == ""

    def test_quoted_value_is_unquoted(self) -> None:
        assert parse_set_cookie_from_str('name="abc"').value == "abc"

    def test_empty_quoted_value(self) -> None:
        assert parse_set_cookie_from_str('name=""').value == ""

    def test_value_may_contain_equals(self) -> None:
        assert parse_set_cookie_from_str("token=abc=def=").value == "abc=def="

    def test_high_octets_in_value(self) -> None:
        cookie = parse_set_cookie_from_bytes(b"bin=\x80\xfe\xff")
        assert cookie.value == b"\x80\xfe\xff"

    def test_non_ascii_text_value(self) -> None:
        assert parse_set_cookie_from_str("lang=français").value == "français"

    def test_frozen(self) -> None:
        cookie = parse_set_cookie_from_str("a=b")
        with pytest.raises(AttributeError):
            cookie.name = "c"  # type: ignore[misc]

    def test_idempotent(self) -> None:
        header = b"n=v; Path=/; Max-Age=60; SameSite=Lax; Expires=Sun, 06 Nov 1994 08:49:37 GMT"
        assert parse_set_cookie_from_bytes(header) == parse_set_cookie_from_bytes(header)


class TestPairErrors:
    def test_empty_header_is_malformed(self) -> None:
        with pytest.raises(Malformed) as exc_info:
            parse_set_cookie_from_bytes(b"")
        assert exc_info.value.kind is ErrorKind.MALFORMED

    def test_missing_equals_is_malformed(self) -> None:
        with pytest.raises(Malformed):
            parse_set_cookie_from_str("just-a-name; Secure")

    def test_empty_name(self) -> None:
        with pytest.raises(InvalidName) as exc_info:
            parse_set_cookie_from_str("=value")
        assert exc_info.value.kind is ErrorKind.INVALID_NAME
        assert exc_info.value.offset == 0

    @pytest.mark.parametrize(
        "header",
        ["a b=v", "a(b=v", "a@b=v", "a,b=v", "a:b=v", 'a"b=v', "a/b=v", "a[b=v", "a?b=v", "a{b=v"],
    )
    def test_separator_in_name(self, header: str) -> None:
        with pytest.raises(InvalidName) as exc_info:
            parse_set_cookie_from_str(header)
        assert exc_info.value.offset == 1
        assert exc_info.value.octet == ord(header[1])

    def test_control_byte_in_name(self) -> None:
        with pytest.raises(InvalidName):
            parse_set_cookie_from_bytes(b"na\x01me=v")

    def test_scenario_semicolon_inside_quotes(self) -> None:
        """The value class has no ';', so quoting cannot smuggle one in."""
        with pytest.raises(InvalidValue) as exc_info:
            parse_set_cookie_from_str('name="a; b"')
        assert exc_info.value.kind is ErrorKind.INVALID_VALUE

    def test_unterminated_quote(self) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            parse_set_cookie_from_str('name="abc')
        assert exc_info.value.offset == len("name=")

    def test_lone_quote(self) -> None:
        with pytest.raises(InvalidValue):
            parse_set_cookie_from_str('name="')

    def test_nested_quote(self) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            parse_set_cookie_from_str('name="a"b"')
        assert exc_info.value.offset == len('name="a')
        assert exc_info.value.octet == ord('"')

    def test_trailing_quote_only(self) -> None:
        with pytest.raises(InvalidValue):
            parse_set_cookie_from_str('name=abc"')

    @pytest.mark.parametrize("bad", [" ", ",", "\\", "\t", "\x7f"])
    def test_disallowed_value_byte(self, bad: str) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            parse_set_cookie_from_str(f"name=ab{bad}cd")
        assert exc_info.value.offset == len("name=ab")
        assert exc_info.value.octet == ord(bad)

    def test_ascii_only_rejects_high_octets(self) -> None:
        config = ParserConfig(ascii_only=True)
        with pytest.raises(InvalidValue):
            parse_set_cookie_from_bytes(b"bin=\xff", config)
        with pytest.raises(InvalidName):
            parse_set_cookie_from_bytes(b"n\xe9=v", config)

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(CookieParseError):
            parse_set_cookie_from_str("=v")


class TestAttributeNames:
    @pytest.mark.parametrize("spelling", ["secure", "SECURE", "Secure", "sEcUrE"])
    def test_secure_case_insensitive(self, spelling: str) -> None:
        assert parse_set_cookie_from_str(f"n=v; {spelling}").secure is True

    @pytest.mark.parametrize(
        ("attr", "field"),
        [("HttpOnly", "http_only"), ("Partitioned", "partitioned"), ("Secure", "secure")],
    )
    def test_flags(self, attr: str, field: str) -> None:
        cookie = parse_set_cookie_from_str(f"n=v; {attr.upper()}")
        assert getattr(cookie, field) is True

    def test_flag_value_is_ignored(self) -> None:
        assert parse_set_cookie_from_str("n=v; Secure=false").secure is True

    def test_unknown_attribute_ignored(self) -> None:
        plain = parse_set_cookie_from_str("n=v")
        assert parse_set_cookie_from_str("n=v; Foo=bar") == plain
        assert parse_set_cookie_from_str("n=v; Foo") == plain
        assert parse_set_cookie_from_str("n=v; Version=1; Comment=x") == plain

    def test_unknown_attribute_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cookieparse.setcookie"):
            parse_set_cookie_from_str("n=v; Foo=bar")
        assert "Foo" in caplog.text

    def test_attribute_name_is_not_trimmed(self) -> None:
        """'Secure ' is not 'Secure'; it is an unknown attribute."""
        assert parse_set_cookie_from_str("n=v; Secure ").secure is False

    def test_all_attributes(self) -> None:
        cookie = parse_set_cookie_from_str(
            "session=abc; Domain=.example.com; Path=/app; "
            "Expires=Wed, 21 Oct 2015 07:28:00 GMT; Max-Age=3600; "
            "SameSite=Strict; Secure; HttpOnly; Partitioned"
        )
        assert cookie == Cookie(
            name="session",
            value="abc",
            domain=".example.com",
            expires=CookieDate("Wed", 21, "Oct", 2015, 7, 28, 0),
            max_age=3600,
            http_only=True,
            partitioned=True,
            path=CookiePath("/app"),
            same_site=SameSite.STRICT,
            secure=True,
        )


class TestAttributeStructure:
    def test_trailing_semicolon_is_malformed(self) -> None:
        with pytest.raises(Malformed) as exc_info:
            parse_set_cookie_from_str("n=v;")
        assert exc_info.value.offset == 3

    def test_semicolon_without_space_is_malformed(self) -> None:
        with pytest.raises(Malformed):
            parse_set_cookie_from_str("n=v;Secure")

    def test_trailing_separator_is_malformed(self) -> None:
        with pytest.raises(Malformed) as exc_info:
            parse_set_cookie_from_str("n=v; Secure; ")
        assert exc_info.value.offset == len("n=v; Secure; ")

    def test_stray_semicolon_in_attribute(self) -> None:
        with pytest.raises(Malformed) as exc_info:
            parse_set_cookie_from_str("n=v; Path=/a;b")
        assert exc_info.value.offset == len("n=v; Path=/a")


class TestValuedAttributes:
    def test_domain_is_opaque(self) -> None:
        assert parse_set_cookie_from_str("n=v; Domain=.EXAMPLE.com").domain == ".EXAMPLE.com"

    def test_path_not_normalized(self) -> None:
        cookie = parse_set_cookie_from_str("n=v; Path=//a/../b/")
        assert cookie.path == "//a/../b/"

    def test_path_may_contain_equals(self) -> None:
        assert parse_set_cookie_from_str("n=v; Path=/q=1").path == "/q=1"

    def test_bytes_attribute_text_decoded_as_latin1(self) -> None:
        cookie = parse_set_cookie_from_bytes(b"n=v; Path=/caf\xe9")
        assert cookie.path == "/caf\xe9"

    def test_str_attribute_text_round_trips(self) -> None:
        assert parse_set_cookie_from_str("n=v; Path=/café").path == "/café"

    def test_expires(self) -> None:
        cookie = parse_set_cookie_from_str("n=v; expires=Sun, 06 Nov 1994 08:49:37 GMT")
        assert cookie.expires == CookieDate("Sun", 6, "Nov", 1994, 8, 49, 37)

    def test_invalid_expires(self) -> None:
        with pytest.raises(InvalidDate) as exc_info:
            parse_set_cookie_from_str("n=v; Expires=Sunday, 06-Nov-94 08:49:37 GMT")
        assert exc_info.value.kind is ErrorKind.INVALID_DATE
        assert exc_info.value.offset == len("n=v; Expires=")

    def test_expires_without_value(self) -> None:
        with pytest.raises(InvalidDate):
            parse_set_cookie_from_str("n=v; Expires")

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", 0), ("60", 60), ("-1", -1), ("+5", 5), ("007", 7)],
    )
    def test_max_age(self, raw: str, expected: int) -> None:
        assert parse_set_cookie_from_str(f"n=v; Max-Age={raw}").max_age == expected

    def test_max_age_bounds(self) -> None:
        assert parse_set_cookie_from_str(f"n=v; Max-Age={INT32_MAX}").max_age == INT32_MAX
        assert parse_set_cookie_from_str(f"n=v; Max-Age={INT32_MIN}").max_age == INT32_MIN

    @pytest.mark.parametrize(
        "raw",
        [
            "abc",
            "1.5",
            "1e3",
            " 5",
            "5 ",
            "1_000",
            "--1",
            "-",
            "٣",  # non-ASCII digit
            str(INT32_MAX + 1),
            str(INT32_MIN - 1),
            "9" * 5000,
        ],
    )
    def test_invalid_max_age(self, raw: str) -> None:
        with pytest.raises(InvalidMaxAge) as exc_info:
            parse_set_cookie_from_str(f"n=v; Max-Age={raw}")
        assert exc_info.value.kind is ErrorKind.INVALID_MAX_AGE

    def test_max_age_leading_zeros_in_range(self) -> None:
        assert parse_set_cookie_from_str("n=v; Max-Age=-000000000042").max_age == -42

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Strict", SameSite.STRICT),
            ("lax", SameSite.LAX),
            ("NONE", SameSite.NONE),
        ],
    )
    def test_same_site(self, raw: str, expected: SameSite) -> None:
        assert parse_set_cookie_from_str(f"n=v; samesite={raw}").same_site is expected

    @pytest.mark.parametrize("raw", ["", "Relaxed", "Strict ", "no"])
    def test_invalid_same_site(self, raw: str) -> None:
        with pytest.raises(InvalidSameSite) as exc_info:
            parse_set_cookie_from_str(f"n=v; SameSite={raw}")
        assert exc_info.value.kind is ErrorKind.INVALID_SAME_SITE


class TestDuplicates:
    def test_flag_repeated_with_value(self) -> None:
        assert parse_set_cookie_from_str("n=v; Secure; Secure=false").secure is True

    def test_last_max_age_wins(self) -> None:
        assert parse_set_cookie_from_str("n=v; Max-Age=10; Max-Age=20").max_age == 20

    def test_last_domain_wins(self) -> None:
        cookie = parse_set_cookie_from_str("n=v; Domain=a.com; domain=b.com")
        assert cookie.domain == "b.com"

    def test_invalid_later_duplicate_fails(self) -> None:
        with pytest.raises(InvalidMaxAge):
            parse_set_cookie_from_str("n=v; Max-Age=10; Max-Age=ten")


class TestEmptyValuePolicy:
    def test_defaults_keep_empty_domain_and_path(self) -> None:
        cookie = parse_set_cookie_from_str("n=v; Domain=; Path=")
        assert cookie.domain == ""
        assert cookie.path == ""

    def test_missing_equals_counts_as_empty(self) -> None:
        assert parse_set_cookie_from_str("n=v; Domain").domain == ""

    def test_default_rejects_empty_max_age(self) -> None:
        with pytest.raises(InvalidMaxAge):
            parse_set_cookie_from_str("n=v; Max-Age=")

    def test_ignore(self) -> None:
        config = ParserConfig(empty_domain="ignore", empty_path="ignore", empty_max_age="ignore")
        cookie = parse_set_cookie_from_str(
            "n=v; Domain=a.com; Domain=; Path=; Max-Age=5; Max-Age=", config
        )
        assert cookie.domain == "a.com"
        assert cookie.path is None
        assert cookie.max_age == 5

    def test_reject(self) -> None:
        config = ParserConfig(empty_domain="reject", empty_path="reject")
        with pytest.raises(Malformed):
            parse_set_cookie_from_str("n=v; Domain=", config)
        with pytest.raises(Malformed):
            parse_set_cookie_from_str("n=v; Path=", config)
