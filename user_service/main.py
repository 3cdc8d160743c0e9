"""
Entry point for running User Service with uvicorn.
"""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "user_service.app:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
