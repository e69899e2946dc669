"""Tests for the Python-Markdown extension."""

from __future__ import annotations

import markdown

from docmermaid.blocks import to_mermaid_block
from docmermaid.markdown_ext import MermaidExtension, makeExtension

SOURCE = "# Title\n\nBefore\n\n```mermaid\ngraph TD\n  A-->B\n```\n\nAfter\n"


class TestMermaidExtension:
    def test_fragment_survives_markdown(self) -> None:
        html = markdown.markdown(SOURCE, extensions=[MermaidExtension()])
        assert to_mermaid_block("graph TD\n  A-->B") in html
        assert "<h1>Title</h1>" in html
        assert "<p>Before</p>" in html
        assert "<p>After</p>" in html

    def test_fragment_not_wrapped_in_paragraph(self) -> None:
        html = markdown.markdown(SOURCE, extensions=[MermaidExtension()])
        assert '<p><div class="mermaid-block">' not in html

    def test_loadable_by_module_name(self) -> None:
        html = markdown.markdown(
            SOURCE, extensions=["docmermaid.markdown_ext"]
        )
        assert '<div class="mermaid-block">' in html

    def test_runs_before_fenced_code(self) -> None:
        html = markdown.markdown(
            SOURCE, extensions=["fenced_code", makeExtension()]
        )
        assert '<div class="mermaid-block">' in html
        assert 'class="language-mermaid">graph TD' in html
        assert html.count("<pre>") == 1

    def test_other_fences_left_to_markdown(self) -> None:
        text = "```python\nprint(1)\n```\n"
        html = markdown.markdown(
            text, extensions=["fenced_code", MermaidExtension()]
        )
        assert "mermaid-block" not in html
        assert '<code class="language-python">' in html

    def test_blank_lines_inside_diagram(self) -> None:
        text = "```mermaid\ngraph TD\n\n  A-->B\n```\n"
        html = markdown.markdown(text, extensions=[MermaidExtension()])
        assert to_mermaid_block("graph TD\n\n  A-->B") in html

    def test_plain_markdown_unaffected(self) -> None:
        text = "Some *text*"
        assert markdown.markdown(
            text, extensions=[MermaidExtension()]
        ) == markdown.markdown(text)
