from __future__ import annotations

import logging

from jobboard.data.jobs import JobStore
from jobboard.schemas.job import FilterCriteria, Job
from jobboard.services.application_service import submit_application
from jobboard.services.job_filter import apply_filters


logger = logging.getLogger(__name__)

__all__ = ["get_job", "list_jobs", "submit_application"]


def list_jobs(store: JobStore, criteria: FilterCriteria | None = None) -> list[Job]:
    jobs = apply_filters(store.get_all(), criteria)
    logger.debug("jobs.list criteria=%s matched=%d", criteria, len(jobs))
    return jobs


def get_job(store: JobStore, job_id: str) -> Job | None:
    job = store.get_by_id(job_id)
    if job is None:
        logger.info("jobs.get job_id=%s not found", job_id)
    return job
