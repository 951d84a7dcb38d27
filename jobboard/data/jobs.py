from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, Sequence

from jobboard.schemas.job import Job


# Mock dataset standing in for the external jobs API.
SEED_JOBS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "title": "Senior Frontend Developer",
        "company": "TechCorp Inc.",
        "location": "San Francisco, CA",
        "salary": {"min": 120000, "max": 180000, "currency": "USD"},
        "description": (
            "We are looking for an experienced Frontend Developer to join our team. You will be "
            "responsible for building modern, responsive web applications using React and TypeScript. "
            "The ideal candidate has a strong understanding of modern JavaScript, React ecosystem, "
            "and web performance optimization."
        ),
        "requirements": [
            "5+ years of experience with React",
            "Strong TypeScript skills",
            "Experience with SSR frameworks (Remix, Next.js)",
            "Knowledge of modern CSS (Tailwind CSS)",
            "Understanding of web performance optimization",
        ],
        "type": "full-time",
        "postedDate": "2024-01-15",
        "applyUrl": "https://example.com/apply/1",
    },
    {
        "id": "2",
        "title": "Full Stack Engineer",
        "company": "StartupXYZ",
        "location": "Remote",
        "salary": {"min": 100000, "max": 150000, "currency": "USD"},
        "description": (
            "Join our fast-growing startup as a Full Stack Engineer. You'll work on both frontend and "
            "backend systems, building scalable applications that serve millions of users. We use "
            "modern technologies and best practices."
        ),
        "requirements": [
            "3+ years of full-stack development experience",
            "Proficiency in React and Node.js",
            "Experience with databases (PostgreSQL, MongoDB)",
            "Knowledge of cloud platforms (AWS)",
            "Strong problem-solving skills",
        ],
        "type": "full-time",
        "postedDate": "2024-01-14",
        "applyUrl": "https://example.com/apply/2",
    },
    {
        "id": "3",
        "title": "React Developer",
        "company": "Digital Agency Pro",
        "location": "New York, NY",
        "salary": {"min": 90000, "max": 130000, "currency": "USD"},
        "description": (
            "We're seeking a talented React Developer to work on client projects. You'll collaborate "
            "with designers and backend developers to create beautiful, functional web applications. "
            "This role offers the opportunity to work on diverse projects across different industries."
        ),
        "requirements": [
            "2+ years of React experience",
            "Experience with state management (Redux, Zustand)",
            "Knowledge of RESTful APIs",
            "Strong attention to detail",
            "Portfolio demonstrating React projects",
        ],
        "type": "full-time",
        "postedDate": "2024-01-13",
        "applyUrl": "https://example.com/apply/3",
    },
    {
        "id": "4",
        "title": "Frontend Engineer - Contract",
        "company": "Enterprise Solutions",
        "location": "Austin, TX",
        # Hourly rate.
        "salary": {"min": 80, "max": 120, "currency": "USD"},
        "description": (
            "We need a Frontend Engineer for a 6-month contract to help build our new customer portal. "
            "You'll work with our team to implement designs and ensure a great user experience. This is "
            "a great opportunity to work on a high-impact project."
        ),
        "requirements": [
            "3+ years of frontend development",
            "Strong React skills",
            "Experience with TypeScript",
            "Ability to work independently",
            "Available for 6-month contract",
        ],
        "type": "contract",
        "postedDate": "2024-01-12",
        "applyUrl": "https://example.com/apply/4",
    },
    {
        "id": "5",
        "title": "Junior Frontend Developer",
        "company": "Innovation Labs",
        "location": "Seattle, WA",
        "salary": {"min": 70000, "max": 90000, "currency": "USD"},
        "description": (
            "Perfect opportunity for a junior developer looking to grow their career. You'll work "
            "alongside senior developers, learn best practices, and contribute to real projects. We "
            "provide mentorship and opportunities for professional development."
        ),
        "requirements": [
            "1+ years of React experience",
            "Understanding of JavaScript fundamentals",
            "Basic knowledge of HTML/CSS",
            "Eagerness to learn",
            "Strong communication skills",
        ],
        "type": "full-time",
        "postedDate": "2024-01-11",
        "applyUrl": "https://example.com/apply/5",
    },
)


class JobStore:
    """Read-only, insertion-ordered collection of jobs.

    Built once per process; there are no mutation operations, so a single
    instance can be shared by every request.
    """

    def __init__(self, jobs: Iterable[Job]) -> None:
        self._jobs: tuple[Job, ...] = tuple(jobs)
        self._by_id: dict[str, Job] = {}
        for job in self._jobs:
            if job.id in self._by_id:
                raise ValueError(f"duplicate job id: {job.id}")
            self._by_id[job.id] = job

    def __len__(self) -> int:
        return len(self._jobs)

    def get_all(self) -> list[Job]:
        return list(self._jobs)

    def get_by_id(self, job_id: str) -> Job | None:
        return self._by_id.get(job_id)


def build_job_store(rows: Sequence[dict[str, Any]]) -> JobStore:
    return JobStore(Job.model_validate(row) for row in rows)


@lru_cache
def load_job_store() -> JobStore:
    return build_job_store(SEED_JOBS)
