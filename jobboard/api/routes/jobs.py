from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from jobboard.api.adapters import parse_application_data, parse_filter_criteria
from jobboard.config import get_settings
from jobboard.data.jobs import JobStore, load_job_store
from jobboard.schemas.application import ApplicationResult
from jobboard.schemas.job import Job, JobDetail, JobListResponse
from jobboard.services.formatting import display_fields
from jobboard.services.jobs_service import get_job, list_jobs, submit_application


router = APIRouter(prefix="/jobs", tags=["jobs"])

logger = logging.getLogger(__name__)


def get_job_store(request: Request) -> JobStore:
    store = getattr(request.app.state, "job_store", None)
    if store is None:
        # App created without running its lifespan (e.g. mounted elsewhere).
        store = load_job_store()
        request.app.state.job_store = store
    return store


async def _simulate_latency() -> None:
    delay_ms = get_settings().simulated_latency_ms
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)


def _to_detail(job: Job) -> JobDetail:
    return JobDetail(**job.model_dump(), **display_fields(job))


def _require_job(store: JobStore, job_id: str) -> Job:
    job = get_job(store, job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


async def _read_fields(request: Request) -> Mapping[str, Any]:
    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}
    try:
        async with request.form() as form:
            # Text fields only; uploaded files are closed with the form.
            return {key: value for key, value in form.items() if isinstance(value, str)}
    except (StarletteHTTPException, MultiPartException):
        # Malformed multipart or urlencoded body.
        return {}


@router.get("", response_model=JobListResponse, summary="List jobs, optionally filtered")
async def list_jobs_endpoint(request: Request, store: JobStore = Depends(get_job_store)) -> JobListResponse:
    # Query params are parsed by hand so malformed values degrade to "unset" instead of a 422.
    criteria = parse_filter_criteria(request.query_params)
    await _simulate_latency()

    jobs = list_jobs(store, criteria)
    logger.info("jobs.list filtered=%s matched=%d", not criteria.is_empty(), len(jobs))
    return JobListResponse(jobs=jobs, filters=criteria)


@router.get("/{job_id}", response_model=JobDetail, summary="Job detail")
async def job_detail_endpoint(job_id: str, store: JobStore = Depends(get_job_store)) -> JobDetail:
    await _simulate_latency()
    return _to_detail(_require_job(store, job_id))


@router.get("/{job_id}/apply", response_model=JobDetail, summary="Job shown on the application page")
async def job_apply_page_endpoint(job_id: str, store: JobStore = Depends(get_job_store)) -> JobDetail:
    await _simulate_latency()
    return _to_detail(_require_job(store, job_id))


@router.post("/{job_id}/apply", response_model=ApplicationResult, summary="Submit a job application")
async def submit_application_endpoint(
    job_id: str,
    request: Request,
    store: JobStore = Depends(get_job_store),
) -> ApplicationResult:
    # Validation failures are returned as a normal result (success=false), never as an HTTP error.
    fields = await _read_fields(request)
    data = parse_application_data(fields)
    await _simulate_latency()
    return submit_application(store, job_id, data)
