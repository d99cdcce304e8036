"""Structured logging for catalog loading and lookups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from mui.config import CatalogSettings


def configure_logging(settings: CatalogSettings | None = None) -> None:
    """Render catalog diagnostics as one JSON object per line on stdout.

    Events below ``settings.log_level`` are dropped before rendering, so
    per-file ``debug`` events only appear when the level is ``DEBUG``.
    """

    level = settings.log_level_value if settings is not None else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Lazy proxies: they pick up whatever configure_logging installs later.
logger = structlog.get_logger(component="mui")
catalog_logger = structlog.get_logger(component="mui.catalog")

__all__ = ["catalog_logger", "configure_logging", "logger"]
