# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from jobboard.config import settings
from jobboard.api.routes.health import router as health_router
from jobboard.api.routes.jobs import router as jobs_router
from jobboard.data.jobs import load_job_store


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.getLogger("jobboard").setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Seeded once; the store is read-only for the lifetime of the process.
        app.state.job_store = load_job_store()
        logger.info("job store loaded jobs=%d", len(app.state.job_store))
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(jobs_router, prefix=settings.api_prefix)
    return application


app = create_app()
