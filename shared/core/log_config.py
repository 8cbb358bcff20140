import logging

from shared.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None):
    """Configure root logging once per process from LOG_LEVEL."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # uvicorn access lines are noisy next to the service logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
