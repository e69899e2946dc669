"""Exception hierarchy for diagram transformation and asset injection.

Every transform in this package is a pure string operation, so the
only failures are structural: a page that cannot receive the runtime
assets because it lacks the markers they are spliced against.
"""

from __future__ import annotations


class DocMermaidError(Exception):
    """Base class for all docmermaid errors."""


class AssetInjectionError(DocMermaidError):
    """Raised when style/script assets cannot be placed in a page."""


class MissingMarkerError(AssetInjectionError):
    """The page holds diagrams but lacks a required closing tag."""

    def __init__(self, marker: str, url: str | None = None) -> None:
        self.marker = marker
        self.url = url
        where = f" in page {url}" if url else ""
        super().__init__(
            f"Cannot inject mermaid assets{where}: "
            f"no {marker} marker found"
        )
