from __future__ import annotations

import re

from jobboard.schemas.application import ApplicationData
from jobboard.services.application_service import is_valid_email, new_application_id, submit_application


def _data(**overrides) -> ApplicationData:
    fields = {"full_name": "Jane Doe", "email": "jane@example.com"}
    fields.update(overrides)
    return ApplicationData(**fields)


def test_unknown_job_is_reported_first(store) -> None:
    result = submit_application(store, "nonexistent-id", _data(full_name="", email=""))
    assert result.success is False
    assert result.message == "Job not found"
    assert result.application_id is None


def test_missing_full_name(store) -> None:
    result = submit_application(store, "1", _data(full_name=""))
    assert result.success is False
    assert result.message == "Full name and email are required"


def test_missing_email(store) -> None:
    result = submit_application(store, "1", _data(email=""))
    assert result.success is False
    assert result.message == "Full name and email are required"


def test_invalid_email(store) -> None:
    result = submit_application(store, "1", _data(email="not-an-email"))
    assert result.success is False
    assert result.message == "Invalid email format"
    assert result.application_id is None


def test_successful_submission(store) -> None:
    result = submit_application(store, "1", _data())
    assert result.success is True
    assert result.application_id
    assert result.message == "Application submitted successfully for Senior Frontend Developer at TechCorp Inc."


def test_resubmission_gets_a_new_application_id(store) -> None:
    first = submit_application(store, "2", _data())
    second = submit_application(store, "2", _data())
    assert first.success and second.success
    assert first.application_id != second.application_id


def test_optional_fields_do_not_affect_outcome(store) -> None:
    result = submit_application(
        store,
        "3",
        _data(phone="555-0100", cover_letter="Hello", linkedin_url="https://linkedin.com/in/jane"),
    )
    assert result.success is True


def test_email_shape() -> None:
    assert is_valid_email("jane@example.com")
    assert is_valid_email("a.b+c@sub.example.co.uk")
    assert not is_valid_email("not-an-email")
    assert not is_valid_email("jane@example")
    assert not is_valid_email("jane doe@example.com")
    assert not is_valid_email("jane@@example.com")
    assert not is_valid_email("jane@example.com\n")
    assert not is_valid_email("@example.com")


def test_application_id_format() -> None:
    assert re.fullmatch(r"app_\d+_[a-z0-9]{9}", new_application_id())
