"""Tests for flag validation."""
import pytest

from entrylog.entry import Entry
from entrylog.errors import InvalidDateFormat, InvalidSlugFormat, MissingArgument
from entrylog.validate import is_valid_date, is_valid_slug, validate_flags

REQUIRED = ["date", "slug", "thing", "type", "proofUrl", "proofText", "reflection"]


class TestPresence:
    @pytest.mark.parametrize("key", REQUIRED)
    def test_missing_key(self, flags, key):
        del flags[key]
        with pytest.raises(MissingArgument) as excinfo:
            validate_flags(flags)
        assert excinfo.value.key == key
        assert str(excinfo.value) == f"Missing --{key}"

    @pytest.mark.parametrize("key", REQUIRED)
    def test_empty_value_counts_as_missing(self, flags, key):
        flags[key] = ""
        with pytest.raises(MissingArgument):
            validate_flags(flags)

    def test_reports_first_missing_key_only(self, flags):
        del flags["thing"]
        del flags["reflection"]
        flags["date"] = "not-a-date"
        with pytest.raises(MissingArgument) as excinfo:
            validate_flags(flags)
        assert excinfo.value.key == "thing"


class TestDate:
    @pytest.mark.parametrize(
        "value", ["2025-03-14", "2025-02-30", "2025-13-40", "0000-00-00"]
    )
    def test_shape_only(self, value):
        assert is_valid_date(value)

    @pytest.mark.parametrize(
        "value",
        [
            "2025-3-14",
            "25-03-14",
            "2025/03/14",
            "2025-03-14T00:00",
            " 2025-03-14",
            "2025-03-14\n",
            "today",
            "٢٠٢٥-٠٣-١٤",
            "２０２５-０３-１４",
        ],
    )
    def test_rejected(self, flags, value):
        assert not is_valid_date(value)
        flags["date"] = value
        with pytest.raises(InvalidDateFormat):
            validate_flags(flags)

    def test_date_checked_before_slug(self, flags):
        flags["date"] = "bad"
        flags["slug"] = "Bad Slug"
        with pytest.raises(InvalidDateFormat):
            validate_flags(flags)


class TestSlug:
    @pytest.mark.parametrize("value", ["a", "manifesto-rules", "v2-0-release", "2025"])
    def test_accepted(self, value):
        assert is_valid_slug(value)

    @pytest.mark.parametrize(
        "value",
        ["Manifesto", "-lead", "trail-", "double--hyphen", "under_score", "spa ce", "ünï", "a/b", "../up"],
    )
    def test_rejected(self, flags, value):
        assert not is_valid_slug(value)
        flags["slug"] = value
        with pytest.raises(InvalidSlugFormat):
            validate_flags(flags)


def test_returns_typed_entry(flags):
    entry = validate_flags(flags)
    assert entry == Entry(
        date="2025-03-14",
        slug="manifesto-rules",
        thing="finishingthingz manifesto & rules",
        type="system",
        proof_url="/",
        proof_text="this page",
        reflection="built the container first.",
    )


def test_ignores_unknown_flags(flags):
    flags["extra"] = "ignored"
    assert validate_flags(flags).slug == "manifesto-rules"
