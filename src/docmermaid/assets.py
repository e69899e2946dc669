"""Page-level style and script assets for rendered diagram fragments."""

from __future__ import annotations

import logging
from html import escape

from docmermaid.constants import (
    BODY_END_MARKER,
    DEFAULT_SCRIPT_URL,
    HEAD_END_MARKER,
    MERMAID_BLOCK_START,
)
from docmermaid.errors import MissingMarkerError

logger = logging.getLogger(__name__)

STYLE = r"""
<style>
:root.mermaid-enabled .mermaid-block > pre {
  display: none;
}
:root:not(.mermaid-enabled) .mermaid-block > .mermaid {
  display: none !important;
}

.mermaid-block > .mermaid[data-inserted].dark {
  display: var(--mermaid-dark-display);
}
.mermaid-block > .mermaid[data-inserted].light {
  display: var(--mermaid-light-display);
}

:root {
  --mermaid-dark-display: none;
  --mermaid-light-display: block;
}
@media (prefers-color-scheme: light) {
  :root {
    --mermaid-dark-display: none;
    --mermaid-light-display: block;
  }
}
@media (prefers-color-scheme: dark) {
  :root {
    --mermaid-dark-display: block;
    --mermaid-light-display: none;
  }
}
body.light, :root[data-theme="light"] {
  --mermaid-dark-display: none;
  --mermaid-light-display: block;
}
body.dark, :root[data-theme="dark"] {
  --mermaid-dark-display: block;
  --mermaid-light-display: none;
}
</style>
"""

# 1. Load mermaid.js.
# 2. Mark the document as diagram-enabled and initialize mermaid.
# 3. Tag each diagram with data-inserted once its SVG exists, polling
#    once per animation frame until no untagged diagram remains.
_SCRIPT_TEMPLATE = r"""
<script src="{script_url}"></script>
<script>
(function() {{
  if (typeof mermaid === "undefined") {{
    return;
  }}

  document.documentElement.classList.add("mermaid-enabled");

  mermaid.initialize({{startOnLoad:true}});

  requestAnimationFrame(function check() {{
    let some = false;
    document.querySelectorAll("div.mermaid:not([data-inserted])").forEach(div => {{
      some = true;
      if (div.querySelector("svg")) {{
        div.dataset.inserted = true;
      }}
    }});

    if (some) {{
      requestAnimationFrame(check);
    }}
  }});
}})();
</script>
"""


def render_script(script_url: str = DEFAULT_SCRIPT_URL) -> str:
    """Build the script block that loads mermaid from *script_url*."""
    return _SCRIPT_TEMPLATE.format(
        script_url=escape(script_url, quote=True)
    )


SCRIPT = render_script()


def needs_assets(html: str) -> bool:
    """True when the page contains at least one diagram fragment."""
    return MERMAID_BLOCK_START in html


def inject_assets(
    html: str,
    script: str = SCRIPT,
    *,
    strict: bool = True,
    url: str | None = None,
) -> str:
    """Insert STYLE before ``</head>`` and *script* before ``</body>``.

    Pages without a diagram fragment, or that already carry STYLE, are
    returned unchanged, so injecting twice is the same as once. The style
    goes before the first ``</head>``; the script before the last
    ``</body>``. Plain string splicing, no HTML parsing.

    If either marker is missing, raises :class:`MissingMarkerError`
    when *strict*, otherwise logs a warning and returns *html* as is.
    """
    if not needs_assets(html):
        return html
    if STYLE in html:
        logger.debug("event=assets_already_present url=%s", url)
        return html

    head_end = html.find(HEAD_END_MARKER)
    body_end = html.rfind(BODY_END_MARKER)
    missing = next(
        (
            marker
            for marker, index in (
                (HEAD_END_MARKER, head_end),
                (BODY_END_MARKER, body_end),
            )
            if index == -1
        ),
        None,
    )
    if missing is not None:
        if strict:
            raise MissingMarkerError(missing, url)
        logger.warning(
            "event=asset_injection_skipped marker=%s url=%s",
            missing,
            url,
        )
        return html

    html = html[:head_end] + STYLE + html[head_end:]

    # Offsets after the head splice have moved
    body_end = html.rfind(BODY_END_MARKER)
    return html[:body_end] + script + html[body_end:]
