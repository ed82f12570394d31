"""Centralized logging configuration.

Applies per-category log levels from Settings so that chatty loggers
(e.g. per-operation store and repository debug output) can be silenced
without affecting other parts of the application.

Usage:
    from document_manager.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup, before building services
"""

import logging
import sys

from document_manager.config import Settings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_store": [
        "document_manager.infrastructure.storage",
        "document_manager.infrastructure.repositories",
    ],
    "log_level_service": [
        "document_manager.application.services",
        "document_manager.infrastructure.dependencies",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from application settings."""
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Embedding applications usually install their own handler.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, store=%s, service=%s",
        settings.log_level,
        settings.log_level_store,
        settings.log_level_service,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
