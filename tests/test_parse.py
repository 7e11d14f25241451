from __future__ import annotations

import logging

import pytest

from loosever import NONE, Version, VersionFormatError, VersionSettings, compress_list, parse, trim_item, try_parse


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.0.0", ("1",)),
        ("2.3.5", ("2", "3", "5")),
        ("2.0.5", ("2", "0", "5")),
        ("2.7.0", ("2", "7")),
        ("12.003.15", ("12", "3", "15")),
        ("2.a.0", ("2", "a")),
        ("2.a.", ("2", "a")),
        ("2..0", ("2",)),
        ("2..", ("2",)),
        ("...", ()),
        ("a.b.0", ("a", "b")),
        ("a.00b.0", ("a", "00b")),
        ("a.00b.00c", ("a", "00b", "00c")),
        ("0a.00b.000c", ("0a", "00b", "000c")),
        ("1..5", ("1", "", "5")),
        (" 1 . 02 ", ("1", "2")),
    ],
)
def test_release_tokens_are_normalized(text: str, expected: tuple[str, ...]) -> None:
    assert parse(text).release == expected


def test_pre_release_and_metadata_are_split() -> None:
    v = parse("1.0.0-alpha.1+build.5")
    assert v.release == ("1",)
    assert v.pre_release == ("alpha", "1")
    assert v.metadata == "build.5"


def test_only_first_dash_starts_pre_release() -> None:
    v = parse("1.0.0-alpha-1.2-b")
    assert v.release == ("1",)
    assert v.pre_release == ("alpha-1", "2-b")


def test_metadata_is_taken_verbatim_after_first_plus() -> None:
    v = parse("1.2 + meta.007+x ")
    assert v.release == ("1", "2")
    assert v.pre_release == ()
    assert v.metadata == "meta.007+x"


def test_metadata_ends_pre_release() -> None:
    v = parse("1-rc.01+-not.pre")
    assert v.pre_release == ("rc", "1")
    assert v.metadata == "-not.pre"


def test_empty_metadata_normalizes_to_empty_string() -> None:
    assert parse("1.0+").metadata == ""
    assert parse("1.0+   ").metadata == ""


def test_trailing_zero_pre_release_is_compressed() -> None:
    assert parse("1.0.0-rc.0").pre_release == ("rc",)
    assert parse("1-0").pre_release == ()
    assert parse("1-0").release == ("1",)


def test_equivalent_spellings_normalize_to_same_fields() -> None:
    assert parse("01.02.03").release == parse("1.2.3").release
    for text in ("1", "1.0", "1.0.0", "1.0.0.0"):
        assert parse(text).release == ("1",)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("v. 1.2.3", ("1", "2", "3")),
        ("ver. 4.5", ("4", "5")),
        ("version.\t6", ("6",)),
        ("  v. 7.8  ", ("7", "8")),
    ],
)
def test_known_prefix_followed_by_whitespace_is_stripped(text: str, expected: tuple[str, ...]) -> None:
    assert parse(text).release == expected


def test_prefix_without_whitespace_is_not_stripped() -> None:
    assert parse("v.1.2").release == ("v", "1", "2")


def test_prefix_match_is_case_sensitive() -> None:
    assert parse("V. 1").release == ("V", "1")


def test_custom_prefixes_from_settings() -> None:
    settings = VersionSettings(known_prefixes=("release: ",))
    assert parse("release:  2.1", settings=settings).release == ("2", "1")
    assert parse("v. 2.1", settings=settings).release == ("v", "2", "1")


@pytest.mark.parametrize("text", ["", "   ", "\t\n", "v.  ", None])
def test_parse_rejects_empty_input(text: str | None) -> None:
    with pytest.raises(VersionFormatError, match="Not a valid semantic version"):
        parse(text)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Version.parse("  ")


def test_try_parse_reports_failure_with_sentinel() -> None:
    result, ok = try_parse("  ")
    assert ok is False
    assert result is NONE
    assert result is Version.NONE
    assert str(result) == "0.0.0"


def test_try_parse_success() -> None:
    result, ok = Version.try_parse("1.2-beta")
    assert ok is True
    assert result == parse("1.2.0-beta")


def test_try_parse_logs_rejection(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="loosever.version")
    try_parse("")
    assert any("rejected version text" in record.getMessage() for record in caplog.records)


def test_trim_item() -> None:
    assert trim_item(" 007 ") == "7"
    assert trim_item("000") == "0"
    assert trim_item("00b") == "00b"
    assert trim_item("") == ""
    assert trim_item(None) == ""


def test_compress_list() -> None:
    assert compress_list(["1", "", "0", "0"]) == ("1",)
    assert compress_list(["1", "", "2"]) == ("1", "", "2")
    assert compress_list(["0", "", "0"]) == ()
    assert compress_list([]) == ()


@pytest.mark.parametrize(
    "text",
    ["1.2.3", "01.2.03-rc.01+b", "v. 1.2", "1..5", "...", "-alpha", "1.0.0-.a", "a.00b.0", " 1.2 + meta "],
)
def test_parse_format_parse_is_idempotent(text: str) -> None:
    first = parse(text)
    second = parse(str(first))
    assert second == first
    assert (second.release, second.pre_release, second.metadata) == (
        first.release,
        first.pre_release,
        first.metadata,
    )
