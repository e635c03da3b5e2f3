from __future__ import annotations

import logging
from typing import Optional

from automl_engine.settings import get_log_level

PACKAGE_LOGGER = "automl_engine"


class _OnlyPackageRecords(logging.Filter):
    """Keep records emitted below the package logger."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == PACKAGE_LOGGER or record.name.startswith(PACKAGE_LOGGER + ".")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger (idempotent).

    ``level`` defaults to ``AUTOML_LOG_LEVEL``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or get_log_level()).upper())

    # Avoid duplicate handlers on repeated calls
    if not any(isinstance(f, _OnlyPackageRecords) for h in logger.handlers for f in h.filters):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler.addFilter(_OnlyPackageRecords())
        logger.addHandler(handler)

    return logger
