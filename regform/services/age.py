from __future__ import annotations
from datetime import date
from typing import Optional, Union

from .dates import parse_date


def calculate_age(birthday: Union[str, date], today: Optional[date] = None) -> int:
    """
    Whole years between birthday and today. A birthday still ahead in the
    current year counts one year less; Feb 29 birthdays turn over on Mar 1
    in common years.
    """
    born = parse_date(birthday) if isinstance(birthday, str) else birthday
    today = today or date.today()
    if born > today:
        raise ValueError(f"birthday {born.isoformat()} is after {today.isoformat()}")
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))
