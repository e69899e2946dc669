"""Host pipeline contract: the documentation generator side.

The plugin only needs a small slice of a documentation host: a
converter and a renderer that accept event subscriptions, and a few
mutable objects passed to the handlers. The protocols describe that
slice so any generator with equivalent hooks can be adapted. The
dataclasses and :class:`EventPipeline` are a minimal synchronous
implementation, used by hosts that have no event system of their own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


# ── Documentation model ──────────────────────────────────


@dataclass
class CommentTag:
    """A block tag of a comment, e.g. ``@returns`` or ``@mermaid``."""

    tag_name: str
    text: str = ""


@dataclass
class Comment:
    """Documentation comment attached to a reflection."""

    text: str = ""
    tags: list[CommentTag] = field(
        default_factory=lambda: list[CommentTag]()
    )


@dataclass
class Reflection:
    """A documented symbol; may contain nested symbols."""

    name: str
    comment: Comment | None = None
    children: list[Reflection] = field(
        default_factory=lambda: list[Reflection]()
    )

    def traverse(self) -> Iterator[Reflection]:
        """Depth-first walk over all descendants (self excluded)."""
        for child in self.children:
            yield child
            yield from child.traverse()


@dataclass
class Project(Reflection):
    """Root of the documentation model."""

    def get_reflections(self) -> list[Reflection]:
        """Every reflection of every kind below the project."""
        return list(self.traverse())


# ── Event objects ────────────────────────────────────────


@dataclass
class ResolveContext:
    """Payload of the converter's resolve-begin event."""

    project: Project


@dataclass
class MarkdownEvent:
    """Payload of the renderer's markdown-parse event.

    Handlers replace ``parsed_text``; ``original_text`` is kept for
    reference and never modified.
    """

    original_text: str
    parsed_text: str


@dataclass
class PageEvent:
    """Payload of the renderer's page-end event.

    ``contents`` is the finished HTML, or None for pages the host
    decided not to write.
    """

    url: str
    contents: str | None = None


# ── Pipeline protocols ───────────────────────────────────


class EventSource(Protocol):
    def on(
        self,
        name: str,
        handler: EventHandler,
        priority: int = 0,
    ) -> None: ...


class Application(Protocol):
    @property
    def converter(self) -> EventSource: ...

    @property
    def renderer(self) -> EventSource: ...


# ── Reference implementation ─────────────────────────────


@dataclass(frozen=True)
class _Subscription:
    handler: EventHandler
    priority: int
    order: int


class EventPipeline:
    """Synchronous event dispatcher with priority ordering.

    Higher priority runs first; equal priorities keep registration
    order. Handler exceptions propagate to whoever triggered the event.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[_Subscription]] = {}
        self._registered = 0

    def on(
        self,
        name: str,
        handler: EventHandler,
        priority: int = 0,
    ) -> None:
        """Subscribe *handler* to the event *name*."""
        subs = self._subscriptions.setdefault(name, [])
        subs.append(_Subscription(handler, priority, self._registered))
        subs.sort(key=lambda s: (-s.priority, s.order))
        self._registered += 1

    def trigger(self, name: str, event: Any) -> None:
        """Run every handler for *name* with *event*, in order."""
        subs = self._subscriptions.get(name, [])
        logger.debug(
            "event=pipeline_trigger name=%s handlers=%d",
            name,
            len(subs),
        )
        for sub in list(subs):
            sub.handler(event)

    def handler_count(self, name: str) -> int:
        return len(self._subscriptions.get(name, []))


@dataclass
class HostApplication:
    """Converter + renderer pair satisfying :class:`Application`."""

    converter: EventPipeline = field(default_factory=EventPipeline)
    renderer: EventPipeline = field(default_factory=EventPipeline)
