from __future__ import annotations

import logging
import re
import secrets
import string
import time

from jobboard.data.jobs import JobStore
from jobboard.schemas.application import ApplicationData, ApplicationResult


logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LEN = 9

JOB_NOT_FOUND = "Job not found"
MISSING_REQUIRED = "Full name and email are required"
INVALID_EMAIL = "Invalid email format"


def is_valid_email(value: str) -> bool:
    return _EMAIL_RE.fullmatch(value) is not None


def new_application_id() -> str:
    # Best-effort uniqueness: millisecond timestamp plus a random suffix.
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LEN))
    return f"app_{time.time_ns() // 1_000_000}_{suffix}"


def submit_application(store: JobStore, job_id: str, data: ApplicationData) -> ApplicationResult:
    job = store.get_by_id(job_id)
    if job is None:
        logger.info("application.rejected job_id=%s reason=job_not_found", job_id)
        return ApplicationResult(success=False, message=JOB_NOT_FOUND)

    if not data.full_name or not data.email:
        logger.info("application.rejected job_id=%s reason=missing_required", job_id)
        return ApplicationResult(success=False, message=MISSING_REQUIRED)

    if not is_valid_email(data.email):
        logger.info("application.rejected job_id=%s reason=invalid_email", job_id)
        return ApplicationResult(success=False, message=INVALID_EMAIL)

    # Nothing is stored; the id is informational only.
    application_id = new_application_id()
    logger.info("application.submitted job_id=%s application_id=%s", job_id, application_id)
    return ApplicationResult(
        success=True,
        message=f"Application submitted successfully for {job.title} at {job.company}",
        application_id=application_id,
    )
