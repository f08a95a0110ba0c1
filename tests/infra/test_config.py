from __future__ import annotations

import logging

import pytest

from roomfinder_marketing.infra.config import configure_logging, log_level, max_page_size
from roomfinder_marketing.infra.db.config import database_url


def test_max_page_size_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("POST_MAX_PAGE_SIZE", raising=False)

    assert max_page_size() == 100


def test_max_page_size_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POST_MAX_PAGE_SIZE", "40")

    assert max_page_size() == 40


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_max_page_size_invalid(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("POST_MAX_PAGE_SIZE", raw)

    with pytest.raises(RuntimeError, match="POST_MAX_PAGE_SIZE"):
        max_page_size()


def test_database_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_database_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@localhost/posts")

    assert database_url() == "postgresql+psycopg://u:p@localhost/posts"


def test_configure_logging_applies_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging()

    assert log_level() == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG
    logging.getLogger().setLevel(logging.WARNING)
