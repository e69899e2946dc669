"""Mermaid source to theme-aware HTML fragments.

Two input shapes are recognised:

- fenced blocks (```` ```mermaid ```` ... ```` ``` ````) anywhere in
  markdown text, replaced in place;
- ``@mermaid`` annotation text, whose first line is a title and the
  rest raw diagram source.

Both end up in :func:`to_mermaid_block`, which emits a dark and a
light diagram plus a plain code fallback. The injected stylesheet
decides which of the three is visible.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable

from docmermaid.constants import (
    FENCE_LANGUAGE,
    MERMAID_BLOCK_END,
    MERMAID_BLOCK_START,
    DiagramTheme,
)

_FENCED_RE = re.compile(
    rf"^```{FENCE_LANGUAGE}[ \t\r]*\n(.*?)^```[ \t\r]*$",
    re.MULTILINE | re.DOTALL,
)
_TITLE_RE = re.compile(r"[^\r\n]*")


def to_mermaid_block(source: str) -> str:
    """Create the HTML fragment for one diagram source."""
    code = html.escape(source.strip())
    dark = _diagram_div(DiagramTheme.DARK, "dark", code)
    light = _diagram_div(DiagramTheme.LIGHT, "light", code)
    pre = (
        f'<pre><code class="language-{FENCE_LANGUAGE}">'
        f"{code}</code></pre>"
    )
    return MERMAID_BLOCK_START + dark + light + pre + MERMAID_BLOCK_END


def transform_fenced_blocks(text: str) -> str:
    """Replace every fenced mermaid block in *text* with a fragment."""
    return replace_fenced_blocks(text, to_mermaid_block)[0]


def replace_fenced_blocks(
    text: str,
    replace: Callable[[str], str],
) -> tuple[str, int]:
    """Substitute each fenced block with ``replace(source)``.

    Fences are consumed along with the source. Unterminated fences
    never match and stay as literal text. Returns the new text and
    the number of blocks replaced.
    """
    return _FENCED_RE.subn(lambda m: replace(m.group(1)), text)


def transform_annotation(text: str) -> str:
    """Convert the text of a diagram annotation tag.

    The first line becomes an ``h4`` title; everything after it is
    mermaid source. Empty text yields an empty title and fragment.
    """
    # Always matches, possibly the empty string
    title = _TITLE_RE.match(text).group(0)  # type: ignore[union-attr]
    code = text[len(title):]
    return f"#### {title}\n\n{to_mermaid_block(code)}"


def _diagram_div(theme: str, css_class: str, code: str) -> str:
    return (
        f'<div class="mermaid {css_class}">'
        f'%%{{init:{{"theme":"{theme}"}}}}%%\n'
        f"{code}</div>"
    )
