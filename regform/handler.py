from __future__ import annotations
import logging
from datetime import date
from typing import Any, Mapping, Optional

from .schemas import Outcome, RegistrationResult, SubmittedForm
from .services.age import calculate_age
from .services.validation import validate_form

log = logging.getLogger("regform.handler")


def handle_form_submission(method: str, form_data: Optional[Mapping[str, Any]],
                           today: Optional[date] = None) -> Outcome:
    """
    One request in, one Outcome out.

    Anything but POST shows the empty form. A POST is sanitized and
    validated; a clean submission moves to the result state, otherwise the
    form is shown again with the collected errors.
    """
    if (method or "").upper() != "POST":
        log.debug("%s request, showing empty form", method)
        return Outcome()

    form = SubmittedForm.from_raw(form_data)
    errors = validate_form(form, today=today)
    if errors:
        log.info("submission rejected with %d error(s)", len(errors))
        return Outcome(state="form", errors=errors)

    age = calculate_age(str(form.birthday), today=today)
    log.info("submission accepted")
    return Outcome(
        state="result",
        result=RegistrationResult(
            firstname=form.firstname, age=age, gender=form.gender, motto=form.motto
        ),
    )
