from __future__ import annotations
from datetime import date, datetime
from typing import Any

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    """
    Strict YYYY-MM-DD parse. strptime alone accepts "2024-2-1", so the
    parsed date must also format back to the exact input.
    """
    d = datetime.strptime(value, DATE_FORMAT).date()
    if d.isoformat() != value:
        raise ValueError(f"{value!r} is not a zero-padded YYYY-MM-DD date")
    return d


def is_valid_date(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parse_date(value)
    except ValueError:
        return False
    return True
