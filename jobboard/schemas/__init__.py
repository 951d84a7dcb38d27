# __init__.py
from jobboard.schemas.application import ApplicationData, ApplicationResult
from jobboard.schemas.job import JOB_TYPES, FilterCriteria, Job, JobDetail, JobListResponse, JobType, Salary

__all__ = [
    "ApplicationData",
    "ApplicationResult",
    "JOB_TYPES",
    "FilterCriteria",
    "Job",
    "JobDetail",
    "JobListResponse",
    "JobType",
    "Salary",
]
