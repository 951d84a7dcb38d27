# job.py
from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field


JobType = Literal[
    "full-time",
    "part-time",
    "contract",
    "internship",
]

JOB_TYPES: tuple[str, ...] = get_args(JobType)


class Salary(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    currency: str = "USD"


class Job(BaseModel):
    # Seeded once at startup and shared by every request.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    company: str
    location: str
    salary: Salary | None = None
    description: str
    requirements: list[str] = Field(default_factory=list)
    type: JobType
    posted_date: str = Field(alias="postedDate")
    apply_url: str | None = Field(default=None, alias="applyUrl")


class FilterCriteria(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: JobType | None = None
    location: str | None = None
    min_salary: int | None = Field(default=None, alias="minSalary")
    max_salary: int | None = Field(default=None, alias="maxSalary")
    search: str | None = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class JobDetail(Job):
    salary_display: str = Field(alias="salaryDisplay")
    type_display: str = Field(alias="typeDisplay")


class JobListResponse(BaseModel):
    jobs: list[Job] = Field(default_factory=list)
    # Echo of the criteria actually applied, so the list page can re-populate its form.
    filters: FilterCriteria = Field(default_factory=FilterCriteria)
