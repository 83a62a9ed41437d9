"""Logging setup for ArcadeFlight.

All modules obtain loggers through :func:`get_logger` so that they share the
``arcadeflight`` logger hierarchy. :func:`initialize_logging` configures the
handlers once at startup, either from a YAML ``dictConfig`` file or from a
console-only default.

Typical usage example:
    from arcadeflight.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    logger = get_logger(__name__)
    logger.info("Ready")
"""

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

ROOT_LOGGER_NAME = "arcadeflight"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_initialized = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the ArcadeFlight hierarchy.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _default_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": DEFAULT_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            }
        },
        "loggers": {
            ROOT_LOGGER_NAME: {"handlers": ["console"], "level": level, "propagate": False}
        },
    }


def initialize_logging(config_path: str | None = None, level: str | None = None) -> None:
    """Configure logging handlers.

    Args:
        config_path: Path to a YAML file holding a ``logging.config.dictConfig``
            mapping. Falls back to a console handler when None.
        level: Optional level name overriding the configured level of the
            ``arcadeflight`` logger (e.g. ``"DEBUG"``).

    Raises:
        FileNotFoundError: If config_path is given but does not exist.
    """
    global _initialized  # pylint: disable=global-statement

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Logging config not found: {config_path}")
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        config.setdefault("version", 1)
        logging.config.dictConfig(config)
    else:
        logging.config.dictConfig(_default_config(level or "INFO"))

    if level is not None:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(level.upper())

    _initialized = True
    get_logger(__name__).debug("Logging initialized (config=%s)", config_path or "default")


def is_initialized() -> bool:
    """Whether :func:`initialize_logging` has run."""
    return _initialized
