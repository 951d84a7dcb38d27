from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Keep a local .env from changing behaviour under test.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["SIMULATED_LATENCY_MS"] = "0"
    os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture()
def store() -> Any:
    from jobboard.data.jobs import load_job_store

    return load_job_store()


@pytest.fixture()
def client() -> Any:
    from jobboard.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c
