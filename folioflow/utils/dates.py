"""
Date and duration normalization for resume text.

Resumes write dates many ways ("Jan 2023", "01/2023", "2023-01", "January 15, 2023",
"Present"). These helpers turn them into one display form so durations read the
same everywhere in a rendered portfolio.

Main functions:
    parse_date: Parse one date string into a ParsedDate (or None if no year).
    format_date_range: Format a start/end pair as a display range.
    normalize_duration: Normalize a free-form duration, keeping unparseable input as-is.
"""

import re
from dataclasses import dataclass
from typing import Optional

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

PRESENT_DISPLAY = "Present"
RANGE_DASH = "–"
RANGE_SEPARATORS = [" - ", f" {RANGE_DASH} ", " to ", " until ", " through "]

_PRESENT_PATTERN = re.compile(r"\b(present|current|now|ongoing|today)", re.IGNORECASE)
_MONTH_YEAR = re.compile(r"^([A-Za-z]+)\s*[,.]?\s*(\d{4})$")
_MONTH_SLASH_YEAR = re.compile(r"^(\d{1,2})[/-](\d{4})$")
_YEAR_SLASH_MONTH = re.compile(r"^(\d{4})[/-](\d{1,2})$")
_YEAR_ONLY = re.compile(r"^(\d{4})$")
_MONTH_DAY_YEAR = re.compile(r"^([A-Za-z]+)\s+\d{1,2}[,.]?\s*(\d{4})$")


@dataclass(frozen=True)
class ParsedDate:
    """
    A parsed resume date.

    Attributes:
        year: Four-digit year (None only when is_present)
        month: Zero-based month (0-11), None if unknown
        is_present: True for "Present"/"Current"-style markers
        display: Canonical display string ("Jan 2023", "2023", or "Present")
    """

    year: Optional[int] = None
    month: Optional[int] = None
    is_present: bool = False
    display: str = ""


def _month_index(month_text: str) -> Optional[int]:
    """Match month text by full-name prefix, then by exact 3-letter abbreviation."""
    lowered = month_text.lower()
    for index, name in enumerate(MONTH_NAMES):
        if name.lower().startswith(lowered):
            return index
    for index, abbr in enumerate(MONTH_ABBR):
        if abbr.lower() == lowered:
            return index
    return None


# (pattern, match -> (year, month)) in priority order
_DATE_PATTERNS = [
    (_MONTH_YEAR, lambda m: (int(m.group(2)), _month_index(m.group(1)))),
    (_MONTH_SLASH_YEAR, lambda m: (int(m.group(2)), int(m.group(1)) - 1)),
    (_YEAR_SLASH_MONTH, lambda m: (int(m.group(1)), int(m.group(2)) - 1)),
    (_YEAR_ONLY, lambda m: (int(m.group(1)), None)),
    (_MONTH_DAY_YEAR, lambda m: (int(m.group(2)), _month_index(m.group(1)))),
]


def parse_date(value: str) -> Optional[ParsedDate]:
    """
    Parse a single date string.

    Patterns are tried in order: presence keyword, "Month Year", "MM/YYYY",
    "YYYY/MM", "YYYY", "Month D, YYYY". The day of a full date is ignored.

    Returns:
        ParsedDate, or None when no year can be recovered
    """
    if not value or not isinstance(value, str):
        return None

    value = value.strip()

    if _PRESENT_PATTERN.search(value):
        return ParsedDate(is_present=True, display=PRESENT_DISPLAY)

    month: Optional[int] = None
    year: Optional[int] = None

    for pattern, extract in _DATE_PATTERNS:
        match = pattern.match(value)
        if match:
            year, month = extract(match)
            break

    if year is None:
        return None

    if month is not None and not 0 <= month <= 11:
        month = None

    display = f"{MONTH_ABBR[month]} {year}" if month is not None else f"{year}"
    return ParsedDate(year=year, month=month, display=display)


def format_date_range(start_date: str, end_date: str) -> str:
    """
    Format a start/end pair as a display range.

    Examples:
        >>> format_date_range("Jan 2020", "Mar 2020")
        'Jan – Mar 2020'
        >>> format_date_range("Jan 2020", "present")
        'Jan 2020 – Present'
    """
    start = parse_date(start_date)
    end = parse_date(end_date)

    if start is None and end is None:
        return ""
    if start is None:
        return PRESENT_DISPLAY if end.is_present else end.display
    if end is None or end.is_present:
        return f"{start.display} {RANGE_DASH} {PRESENT_DISPLAY}"

    if start.year == end.year and start.month is not None and end.month is not None:
        return f"{MONTH_ABBR[start.month]} {RANGE_DASH} {MONTH_ABBR[end.month]} {end.year}"

    return f"{start.display} {RANGE_DASH} {end.display}"


def normalize_duration(duration: str) -> str:
    """
    Normalize a duration string that may be a range or a single date.

    Unparseable input is returned verbatim so no information is lost.

    Examples:
        >>> normalize_duration("2020 - 2023")
        '2020 – 2023'
        >>> normalize_duration("gibberish")
        'gibberish'
    """
    if not duration or not isinstance(duration, str):
        return ""

    duration = duration.strip()
    lowered = duration.lower()

    for separator in RANGE_SEPARATORS:
        if separator in lowered:
            parts = re.split(re.escape(separator), duration, flags=re.IGNORECASE)
            if len(parts) == 2:
                return format_date_range(parts[0].strip(), parts[1].strip())

    parsed = parse_date(duration)
    return parsed.display if parsed else duration
