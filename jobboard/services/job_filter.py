# job_filter.py
from __future__ import annotations

from typing import Callable, Sequence

from jobboard.schemas.job import FilterCriteria, Job


JobPredicate = Callable[[Job], bool]


def _predicates(criteria: FilterCriteria) -> list[JobPredicate]:
    predicates: list[JobPredicate] = []

    if criteria.type:
        job_type = criteria.type
        predicates.append(lambda job: job.type == job_type)

    if criteria.location:
        location = criteria.location.lower()
        predicates.append(lambda job: location in job.location.lower())

    # Salary bounds use overlap semantics: a range matches when any part of it
    # clears the bound. Jobs without a salary never satisfy a salary bound.
    if criteria.min_salary is not None:
        floor = criteria.min_salary
        predicates.append(lambda job: job.salary is not None and job.salary.max >= floor)

    if criteria.max_salary is not None:
        ceiling = criteria.max_salary
        predicates.append(lambda job: job.salary is not None and job.salary.min <= ceiling)

    if criteria.search:
        needle = criteria.search.lower()
        predicates.append(
            lambda job: needle in job.title.lower()
            or needle in job.company.lower()
            or needle in job.description.lower()
        )

    return predicates


def apply_filters(jobs: Sequence[Job], criteria: FilterCriteria | None = None) -> list[Job]:
    """Return the jobs matching every set criterion, in input order.

    Empty (or missing) criteria returns the input unchanged. Inconsistent
    criteria such as min_salary > max_salary are not rejected; they just
    match nothing.
    """

    if criteria is None or criteria.is_empty():
        return list(jobs)

    predicates = _predicates(criteria)
    return [job for job in jobs if all(predicate(job) for predicate in predicates)]
