import logging
import logging.config
import sys

from config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure console logging for the app and uvicorn."""
    level = (level or settings.LOG_LEVEL).upper()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "[%(asctime)s] %(levelname)s [%(name)s:%(lineno)d] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "detailed",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "": {
                "level": level,
                "handlers": ["console"],
            },
            "uvicorn": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured at %s", level)
