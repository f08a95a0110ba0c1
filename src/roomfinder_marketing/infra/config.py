from __future__ import annotations

import logging
import os

from roomfinder_marketing.domain.paging import DEFAULT_MAX_PAGE_SIZE


def max_page_size() -> int:
    """Upper bound for the ``size`` query parameter; larger values are clamped."""
    raw = os.getenv("POST_MAX_PAGE_SIZE")

    if not raw:
        return DEFAULT_MAX_PAGE_SIZE

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"POST_MAX_PAGE_SIZE must be an integer, got {raw!r}") from None

    if value < 1:
        raise RuntimeError("POST_MAX_PAGE_SIZE must be >= 1")

    return value


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """Set the root log level from LOG_LEVEL. Safe to call more than once."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger().setLevel(log_level())
