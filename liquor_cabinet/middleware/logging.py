from logging.config import dictConfig
from pydantic import BaseModel
from typing import Dict
import logging

from liquor_cabinet.core.config import settings

LOG_FORMAT = "%(levelprefix)s | %(asctime)s | %(name)s | %(funcName)s | %(lineno)d | %(message)s"


class LogConfig(BaseModel):
    """
    Configuration dictConfig de l'application.
    Tout passe par le formatter d'uvicorn ; les requêtes SQL ne sont
    journalisées qu'en DEBUG.
    """

    LOGGER_NAME: str = "liquor_cabinet"
    LOG_LEVEL: str = settings.LOG_LEVEL
    SQL_LOG_LEVEL: str = "INFO" if settings.DEBUG else "WARNING"

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict = {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: Dict = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    }
    loggers: Dict = {
        LOGGER_NAME: {"handlers": ["default"], "level": LOG_LEVEL, "propagate": False},
        "sqlalchemy.engine": {
            "handlers": ["default"],
            "level": SQL_LOG_LEVEL,
            "propagate": False,
        },
        "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    }


def configure_logging():
    config = LogConfig()
    dictConfig(config.model_dump())
    logging.getLogger(config.LOGGER_NAME).info(
        f"Logging configured at level {config.LOG_LEVEL}"
    )
