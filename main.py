import logging

import uvicorn

from app.config import configure_logging, get_settings

logger = logging.getLogger("taskboard")


def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("Serving on http://%s:%s", settings.host, settings.port)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
