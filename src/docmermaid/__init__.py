"""docmermaid: client-side mermaid diagrams for generated documentation.

Hosts call :func:`load` with their application object; everything else
is plain text-in, text-out functions usable without any host.
"""

from docmermaid.assets import SCRIPT, STYLE, inject_assets, render_script
from docmermaid.blocks import (
    to_mermaid_block,
    transform_annotation,
    transform_fenced_blocks,
)
from docmermaid.config import Settings, get_settings
from docmermaid.errors import (
    AssetInjectionError,
    DocMermaidError,
    MissingMarkerError,
)
from docmermaid.plugin import MermaidPlugin, load

__all__ = [
    "SCRIPT",
    "STYLE",
    "AssetInjectionError",
    "DocMermaidError",
    "MermaidPlugin",
    "MissingMarkerError",
    "Settings",
    "get_settings",
    "inject_assets",
    "load",
    "render_script",
    "to_mermaid_block",
    "transform_annotation",
    "transform_fenced_blocks",
]
