import uvicorn

from jobboard.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "jobboard.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.environment.lower() == "development",
        log_level=settings.log_level.lower(),
    )
