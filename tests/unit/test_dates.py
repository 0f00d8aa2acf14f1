"""Unit tests for date parsing and duration normalization."""

import pytest

from folioflow.utils.dates import ParsedDate, format_date_range, normalize_duration, parse_date


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("Jan 2023", "Jan 2023"),
        ("january 2023", "Jan 2023"),
        ("Sept. 2021", "Sep 2021"),
        ("Mar, 2019", "Mar 2019"),
        ("01/2023", "Jan 2023"),
        ("12-2020", "Dec 2020"),
        ("2023-01", "Jan 2023"),
        ("2023/11", "Nov 2023"),
        ("2015", "2015"),
        ("January 15, 2023", "Jan 2023"),
    ],
)
def test_parse_date_formats(value, expected):
    """Every supported format parses to the same display form."""
    parsed = parse_date(value)
    assert parsed is not None
    assert parsed.display == expected
    assert not parsed.is_present


@pytest.mark.unit
@pytest.mark.parametrize("value", ["Present", "current", "NOW", "Ongoing", "today"])
def test_parse_date_present_keywords(value):
    parsed = parse_date(value)
    assert parsed == ParsedDate(is_present=True, display="Present")
    assert parsed.year is None
    assert parsed.month is None


@pytest.mark.unit
def test_parse_date_month_out_of_range_keeps_year():
    """A month number outside 1-12 is discarded but the year survives."""
    parsed = parse_date("13/2023")
    assert parsed.year == 2023
    assert parsed.month is None
    assert parsed.display == "2023"


@pytest.mark.unit
def test_parse_date_zero_based_month():
    parsed = parse_date("Feb 2020")
    assert parsed.year == 2020
    assert parsed.month == 1


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", None, 2023, "gibberish", "Spring term"])
def test_parse_date_unparseable(value):
    assert parse_date(value) is None


@pytest.mark.unit
def test_format_date_range_same_year_collapses():
    assert format_date_range("Jan 2020", "Mar 2020") == "Jan – Mar 2020"


@pytest.mark.unit
def test_format_date_range_different_years():
    assert format_date_range("Jun 2019", "Feb 2021") == "Jun 2019 – Feb 2021"


@pytest.mark.unit
def test_format_date_range_same_year_without_months():
    assert format_date_range("2020", "2020") == "2020 – 2020"


@pytest.mark.unit
def test_format_date_range_open_ended():
    assert format_date_range("Jan 2020", "present") == "Jan 2020 – Present"
    assert format_date_range("Jan 2020", "") == "Jan 2020 – Present"


@pytest.mark.unit
def test_format_date_range_only_end():
    assert format_date_range("", "Mar 2020") == "Mar 2020"
    assert format_date_range("???", "Current") == "Present"


@pytest.mark.unit
def test_format_date_range_nothing_parseable():
    assert format_date_range("", "") == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("2020 - 2023", "2020 – 2023"),
        ("Jan 2021 – Present", "Jan 2021 – Present"),
        ("2018 to 2020", "2018 – 2020"),
        ("Jun 2019 UNTIL Aug 2019", "Jun – Aug 2019"),
        ("2016 through 2017", "2016 – 2017"),
        ("05/2022", "May 2022"),
    ],
)
def test_normalize_duration(value, expected):
    assert normalize_duration(value) == expected


@pytest.mark.unit
def test_normalize_duration_keeps_unparseable_text():
    """Nothing the user wrote is lost when no date can be recovered."""
    assert normalize_duration("Summer internship") == "Summer internship"
    assert normalize_duration("  gibberish ") == "gibberish"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", None, 42])
def test_normalize_duration_non_string(value):
    assert normalize_duration(value) == ""
