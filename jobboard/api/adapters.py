from __future__ import annotations

import re
from typing import Any, Mapping

from jobboard.schemas.application import ApplicationData
from jobboard.schemas.job import JOB_TYPES, FilterCriteria


# Leading base-10 integer; anything after the digits is ignored ("120k" -> 120).
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")

_OPTIONAL_APPLICATION_FIELDS: dict[str, str] = {
    "phone": "phone",
    "resume": "resume",
    "coverLetter": "cover_letter",
    "linkedInUrl": "linkedin_url",
    "portfolioUrl": "portfolio_url",
}


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    # File uploads and nested JSON are not text fields.
    return None


def parse_int(value: str | None) -> int | None:
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        return None


def parse_filter_criteria(params: Mapping[str, Any]) -> FilterCriteria:
    """Build filter criteria from query-string pairs.

    Unknown or malformed values leave the matching criterion unset; this never raises.
    """

    criteria: dict[str, Any] = {}

    job_type = _as_text(params.get("type"))
    if job_type and job_type in JOB_TYPES:
        criteria["type"] = job_type

    location = _as_text(params.get("location"))
    if location:
        criteria["location"] = location

    min_salary = parse_int(_as_text(params.get("minSalary")))
    if min_salary is not None:
        criteria["min_salary"] = min_salary

    max_salary = parse_int(_as_text(params.get("maxSalary")))
    if max_salary is not None:
        criteria["max_salary"] = max_salary

    search = _as_text(params.get("search"))
    if search:
        criteria["search"] = search

    return FilterCriteria(**criteria)


def filter_criteria_to_query_params(criteria: FilterCriteria) -> dict[str, str]:
    params: dict[str, str] = {}
    if criteria.type:
        params["type"] = criteria.type
    if criteria.location:
        params["location"] = criteria.location
    if criteria.min_salary is not None:
        params["minSalary"] = str(criteria.min_salary)
    if criteria.max_salary is not None:
        params["maxSalary"] = str(criteria.max_salary)
    if criteria.search:
        params["search"] = criteria.search
    return params


def parse_application_data(fields: Mapping[str, Any]) -> ApplicationData:
    data: dict[str, Any] = {
        "full_name": _as_text(fields.get("fullName")) or "",
        "email": _as_text(fields.get("email")) or "",
    }
    for key, attr in _OPTIONAL_APPLICATION_FIELDS.items():
        data[attr] = _as_text(fields.get(key)) or None
    return ApplicationData(**data)
