"""
Date range resolution for a single entry's text.

Scans a text span for date-like tokens in priority order (MM/YYYY, Month YYYY,
bare YYYY), normalizes them to ISO dates and orders them chronologically.
A span covered by a higher-priority match is never re-read by a lower one, so
'03/2020' yields one date, not two.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from app.core.confidence_calculator import ConfidenceCalculator
from app.core.patterns import (
    BARE_YEAR_RE,
    MONTH_NAME_DATE_RE,
    MONTHS,
    NUMERIC_MONTH_DATE_RE,
)


@dataclass(frozen=True)
class DateRange:
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    confidence: float = 0.0


def _overlaps(span: Tuple[int, int], taken: List[Tuple[int, int]]) -> bool:
    start, end = span
    return any(start < t_end and t_start < end for t_start, t_end in taken)


def find_dates(text: str) -> List[date]:
    """
    All distinct dates in the span, earliest first.

    Examples:
        'Jan 2019 - 03/2021' -> [2019-01-01, 2021-03-01]
        '2023 ... 2018' -> [2018-01-01, 2023-01-01]
    """
    if not text:
        return []

    found = set()
    taken: List[Tuple[int, int]] = []

    for m in NUMERIC_MONTH_DATE_RE.finditer(text):
        found.add(date(int(m.group(2)), int(m.group(1)), 1))
        taken.append(m.span())

    for m in MONTH_NAME_DATE_RE.finditer(text):
        if _overlaps(m.span(), taken):
            continue
        month = MONTHS[m.group(1)[:3].lower()]
        found.add(date(int(m.group(2)), month, 1))
        taken.append(m.span())

    for m in BARE_YEAR_RE.finditer(text):
        if _overlaps(m.span(), taken):
            continue
        found.add(date(int(m.group(1)), 1, 1))

    return sorted(found)


def resolve_date_range(text: str) -> DateRange:
    """
    Resolve the date range of one entry.

    Two or more distinct dates give earliest..latest (0.9), a single date gives
    a start only (0.7), none gives an empty range (0).
    """
    dates = find_dates(text)
    confidence = ConfidenceCalculator.date_range(len(dates))
    if len(dates) >= 2:
        return DateRange(dates[0].isoformat(), dates[-1].isoformat(), confidence)
    if len(dates) == 1:
        return DateRange(dates[0].isoformat(), None, confidence)
    return DateRange()
