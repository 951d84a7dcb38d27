from __future__ import annotations

from jobboard.schemas.job import Job, JobType, Salary


_JOB_TYPE_LABELS: dict[str, str] = {
    "full-time": "Full Time",
    "part-time": "Part Time",
    "contract": "Contract",
    "internship": "Internship",
}


def format_salary(salary: Salary | None) -> str:
    if salary is None:
        return "Salary not specified"
    if salary.currency == "USD":
        return f"${salary.min:,} - ${salary.max:,}"
    return f"{salary.min:,} - {salary.max:,} {salary.currency}"


def format_job_type(job_type: JobType) -> str:
    return _JOB_TYPE_LABELS[job_type]


def display_fields(job: Job) -> dict[str, str]:
    return {
        "salary_display": format_salary(job.salary),
        "type_display": format_job_type(job.type),
    }
