"""Diagram-block plugin: adapts host events onto the text transforms."""

from __future__ import annotations

import logging

from docmermaid.assets import inject_assets, render_script
from docmermaid.blocks import (
    replace_fenced_blocks,
    to_mermaid_block,
    transform_annotation,
    transform_fenced_blocks,
)
from docmermaid.config import Settings, get_settings
from docmermaid.constants import HostEvent
from docmermaid.host import (
    Application,
    MarkdownEvent,
    PageEvent,
    ResolveContext,
)
from docmermaid.logging_config import setup_logging

logger = logging.getLogger(__name__)


class MermaidPlugin:
    """Turns mermaid code in comments and markdown into HTML diagrams.

    Holds configuration only. Every handler receives a host-owned
    object, replaces the relevant text on it and keeps no reference.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = (
            settings if settings is not None else get_settings()
        )
        self._script = render_script(self._settings.script_url)

    @property
    def settings(self) -> Settings:
        return self._settings

    def add_to_application(self, app: Application) -> None:
        app.converter.on(
            HostEvent.RESOLVE_BEGIN, self.on_resolve_begin
        )
        app.renderer.on(HostEvent.PAGE_END, self.on_end_page)
        # High priority: catch blocks before the built-in markdown parser
        app.renderer.on(
            HostEvent.MARKDOWN_PARSE,
            self.on_parse_markdown,
            self._settings.markdown_parse_priority,
        )
        logger.debug(
            "event=plugin_registered priority=%d tag=%s",
            self._settings.markdown_parse_priority,
            self._settings.annotation_tag,
        )

    def on_resolve_begin(self, context: ResolveContext) -> None:
        blocks = 0
        annotations = 0
        for reflection in context.project.get_reflections():
            comment = reflection.comment
            if comment is None:
                continue
            comment.text, found = replace_fenced_blocks(
                comment.text, to_mermaid_block
            )
            blocks += found
            for tag in comment.tags:
                if tag.tag_name == self._settings.annotation_tag:
                    tag.text = transform_annotation(tag.text)
                    annotations += 1
                else:
                    tag.text, found = replace_fenced_blocks(
                        tag.text, to_mermaid_block
                    )
                    blocks += found
        logger.debug(
            "event=comments_transformed blocks=%d annotations=%d",
            blocks,
            annotations,
        )

    def on_parse_markdown(self, event: MarkdownEvent) -> None:
        event.parsed_text = transform_fenced_blocks(event.parsed_text)

    def on_end_page(self, event: PageEvent) -> None:
        if event.contents is None:
            return
        event.contents = inject_assets(
            event.contents,
            self._script,
            strict=self._settings.strict_markers,
            url=event.url,
        )


def load(app: Application, settings: Settings | None = None) -> None:
    """Host entry point: register the plugin on *app*.

    Root logging is only configured when the host has not done so.
    """
    plugin = MermaidPlugin(settings)
    setup_logging(plugin.settings.log_level)
    plugin.add_to_application(app)
