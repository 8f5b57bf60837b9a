"""Input validation utilities."""

import re
from datetime import date
from typing import Any

ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def is_valid_date(candidate: Any) -> bool:
    """Return True if candidate is a YYYY-MM-DD string naming a real calendar day.

    Dates that would only exist after rolling over into the next month or year
    (e.g. 2021-02-30, 2021-13-01) are rejected. Never raises.
    """
    if not isinstance(candidate, str):
        return False

    matches = ISO_DATE_RE.fullmatch(candidate)
    if not matches:
        return False

    year, month, day = (int(group) for group in matches.groups())
    try:
        composed = date(year, month, day)
    except ValueError:
        # out of range for the calendar, i.e. it would have rolled over
        return False

    return (
        composed.year == year and composed.month == month and composed.day == day
    )
