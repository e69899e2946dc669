"""Python-Markdown extension for mermaid fenced blocks.

Lets Python-Markdown based generators (MkDocs and the like) use the
same fragments as the plugin hooks:

    markdown.markdown(text, extensions=["docmermaid.markdown_ext"])

Fragments are parked in the html stash, so block parsing, inline
patterns and paragraph wrapping never see the diagram source.
"""

from __future__ import annotations

import logging
from typing import Any

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from docmermaid.blocks import replace_fenced_blocks, to_mermaid_block
from docmermaid.constants import MARKDOWN_PREPROCESSOR_PRIORITY

logger = logging.getLogger(__name__)


class MermaidPreprocessor(Preprocessor):
    """Swaps fenced mermaid blocks for html stash placeholders."""

    def run(self, lines: list[str]) -> list[str]:
        text, count = replace_fenced_blocks(
            "\n".join(lines), self._stash
        )
        if count:
            logger.debug(
                "event=markdown_blocks_transformed count=%d", count
            )
        return text.split("\n")

    def _stash(self, source: str) -> str:
        placeholder = self.md.htmlStash.store(to_mermaid_block(source))
        # Own paragraph, so the raw-html postprocessor unwraps it
        return f"\n{placeholder}\n"


class MermaidExtension(Extension):
    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802
        md.registerExtension(self)
        md.preprocessors.register(
            MermaidPreprocessor(md),
            "mermaid_blocks",
            MARKDOWN_PREPROCESSOR_PRIORITY,
        )


def makeExtension(**kwargs: Any) -> MermaidExtension:  # noqa: N802
    return MermaidExtension(**kwargs)
