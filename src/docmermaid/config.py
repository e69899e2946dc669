"""Environment-based plugin configuration."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from docmermaid.constants import (
    DEFAULT_ANNOTATION_TAG,
    DEFAULT_SCRIPT_URL,
    MARKDOWN_PARSE_PRIORITY,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads DOCMERMAID_* variables from the environment and .env file."""

    # Comment tag whose text is a titled diagram (``@mermaid Title``)
    annotation_tag: str = DEFAULT_ANNOTATION_TAG

    # Where the injected <script> loads the rendering engine from
    script_url: str = DEFAULT_SCRIPT_URL

    # Host priority for the markdown-parse hook
    markdown_parse_priority: int = MARKDOWN_PARSE_PRIORITY

    # Raise when a page with diagrams lacks </head> or </body>;
    # when False the page is left untouched and a warning is logged
    strict_markers: bool = True

    # Logging
    log_level: str = "INFO"

    @field_validator("annotation_tag")
    @classmethod
    def _normalize_tag(cls, v: str) -> str:
        """Accept ``@mermaid`` as well as ``mermaid``."""
        tag = v.strip().removeprefix("@")
        if not tag:
            raise ValueError("annotation_tag must not be empty")
        return tag

    @field_validator("script_url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        url = v.strip()
        if not url.startswith(("https://", "http://")):
            raise ValueError(
                "script_url must be an http(s) URL"
            )
        if url.startswith("http://"):
            logger.warning(
                "event=insecure_script_url url=%s", url
            )
        return url

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DOCMERMAID_",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once on first use."""
    return Settings()
