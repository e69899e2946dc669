"""Shared constants, the single source of truth for cross-module values.

Marker strings and class names below are part of the output HTML
contract: custom themes and stylesheets select on them, so changing
any of them is a breaking change.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class HostEvent(StrEnum):
    """Host pipeline event names the plugin subscribes to."""

    RESOLVE_BEGIN = "resolveBegin"
    MARKDOWN_PARSE = "parseMarkdown"
    PAGE_END = "endPage"


class DiagramTheme(StrEnum):
    """Mermaid theme names paired with the wrapper CSS class."""

    DARK = "dark"
    LIGHT = "default"


# ── Fragment Markup ──────────────────────────────────────

FENCE_LANGUAGE = "mermaid"
DEFAULT_ANNOTATION_TAG = "mermaid"

MERMAID_BLOCK_START = '<div class="mermaid-block">'
MERMAID_BLOCK_END = "</div>"

# ── Page Markers ─────────────────────────────────────────

HEAD_END_MARKER = "</head>"
BODY_END_MARKER = "</body>"

# ── Host Integration ─────────────────────────────────────

DEFAULT_SCRIPT_URL = "https://unpkg.com/mermaid/dist/mermaid.min.js"

# Runs ahead of the host's default markdown handlers (priority 0)
MARKDOWN_PARSE_PRIORITY = 1000

# Python-Markdown: after normalize_whitespace (30), before
# fenced_code_block (25) and html_block (20)
MARKDOWN_PREPROCESSOR_PRIORITY = 28
