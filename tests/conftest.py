"""Shared test fixtures: isolated settings, sample pages."""

import os
from collections.abc import Iterator

import pytest

from docmermaid.config import Settings, get_settings

PAGE_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n<title>Docs</title>\n</head>\n"
    "<body>\n{body}\n</body>\n"
    "</html>"
)


@pytest.fixture(autouse=True)
def _isolated_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[None]:
    """Drop DOCMERMAID_* variables and the cached Settings."""
    for key in list(os.environ):
        if key.startswith("DOCMERMAID_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


def make_page(body: str) -> str:
    return PAGE_TEMPLATE.format(body=body)
