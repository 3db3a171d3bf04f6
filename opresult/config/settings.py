"""Library settings -- read from environment variables."""

from __future__ import annotations

import logging
import os
from typing import ClassVar

LOG_FORMAT = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"


class Settings:
    """Runtime configuration sourced from ``OPRESULT_*`` environment variables."""

    _LOG_LEVEL_ENV: ClassVar[str] = "OPRESULT_LOG_LEVEL"
    _DEFAULT_LOG_LEVEL: ClassVar[str] = "WARNING"

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the environment."""
        raw = os.getenv(self._LOG_LEVEL_ENV, "").strip().upper()
        # Unknown level names fall back to the default instead of raising.
        self.log_level: str = raw if raw in logging.getLevelNamesMapping() else self._DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


# Module-level singleton
cfg = Settings()


def configure_logging(level: int | str | None = None) -> None:
    """Install a root handler for applications that have none.

    *level* defaults to ``cfg.log_level``.
    """
    logging.basicConfig(
        level=cfg.log_level_value if level is None else level,
        format=LOG_FORMAT,
    )
