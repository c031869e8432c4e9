"""Tests for the request handler state machine and fragment rendering."""

from datetime import date

import pytest

from regform.handler import handle_form_submission
from regform.rendering import render_outcome

TODAY = date(2025, 10, 1)


class TestHandleFormSubmission:
    @pytest.mark.parametrize("method", ["GET", "HEAD", "PUT", ""])
    def test_non_post_shows_empty_form(self, method):
        outcome = handle_form_submission(method, {"firstname": "Ana"}, today=TODAY)
        assert outcome.state == "form"
        assert outcome.errors == []
        assert outcome.result is None

    def test_method_is_case_insensitive(self, valid_submission):
        outcome = handle_form_submission("post", valid_submission, today=TODAY)
        assert outcome.state == "result"

    def test_valid_submission_moves_to_result(self, valid_submission):
        outcome = handle_form_submission("POST", valid_submission, today=TODAY)
        assert outcome.state == "result"
        assert outcome.errors == []
        assert outcome.result.firstname == "Ana"
        assert outcome.result.age == 25
        assert outcome.result.gender == "Female"
        assert outcome.result.motto == "Carpe diem"

    def test_values_are_sanitized(self, valid_submission):
        valid_submission["firstname"] = "  <b>Ana</b> "
        outcome = handle_form_submission("POST", valid_submission, today=TODAY)
        assert outcome.result.firstname == "&lt;b&gt;Ana&lt;/b&gt;"

    def test_invalid_submission_stays_on_form(self):
        outcome = handle_form_submission(
            "POST", {"firstname": "", "birthday": "bad-date", "gender": "", "motto": ""}, today=TODAY
        )
        assert outcome.state == "form"
        assert len(outcome.errors) == 4
        assert outcome.result is None

    def test_missing_request_data(self):
        outcome = handle_form_submission("POST", None, today=TODAY)
        assert outcome.state == "form"
        assert len(outcome.errors) == 4


class TestRenderOutcome:
    def test_result_block(self, valid_submission):
        html = render_outcome(handle_form_submission("POST", valid_submission, today=TODAY))
        assert '<div class="result">' in html
        assert "<strong>Ana</strong>" in html
        assert "25-year-old Female" in html
        assert "<em>Carpe diem</em>" in html
        assert "<form" not in html

    def test_errors_then_form(self):
        html = render_outcome(handle_form_submission("POST", {}, today=TODAY))
        assert '<ul class="errors">' in html
        assert html.count("<li>") == 4
        assert html.index('<ul class="errors">') < html.index("<form")

    def test_empty_form(self):
        html = render_outcome(handle_form_submission("GET", None))
        assert "<form" in html
        assert "errors" not in html

    def test_escaped_values_are_not_escaped_twice(self, valid_submission):
        valid_submission["motto"] = "Tom & Jerry"
        html = render_outcome(handle_form_submission("POST", valid_submission, today=TODAY))
        assert "<em>Tom &amp; Jerry</em>" in html
