from __future__ import annotations
from datetime import date
from typing import List, Optional

from ..schemas import SubmittedForm
from .dates import is_valid_date, parse_date

FIRSTNAME_REQUIRED = "First Name is required."
BIRTHDAY_REQUIRED = "Birthday is required."
BIRTHDAY_INVALID = "Invalid date format for Birthday."
BIRTHDAY_IN_FUTURE = "Birthday cannot be in the future."
GENDER_REQUIRED = "Gender is required."
MOTTO_REQUIRED = "Quote in Life is required."


def validate_form(form: SubmittedForm, today: Optional[date] = None) -> List[str]:
    """
    Run every field rule and collect the failures, in field order:
    firstname, birthday, gender, motto. An empty list means the form is valid.
    """
    errors: List[str] = []

    if not form.firstname:
        errors.append(FIRSTNAME_REQUIRED)

    if not form.birthday:
        errors.append(BIRTHDAY_REQUIRED)
    elif not is_valid_date(form.birthday):
        errors.append(BIRTHDAY_INVALID)
    elif parse_date(form.birthday) > (today or date.today()):
        errors.append(BIRTHDAY_IN_FUTURE)

    if not form.gender:
        errors.append(GENDER_REQUIRED)

    if not form.motto:
        errors.append(MOTTO_REQUIRED)

    return errors
