# __init__.py
from jobboard.data.jobs import SEED_JOBS, JobStore, build_job_store, load_job_store

__all__ = [
    "SEED_JOBS",
    "JobStore",
    "build_job_store",
    "load_job_store",
]
