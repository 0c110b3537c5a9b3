# kbdwrap/services/markdown_renderer.py
from __future__ import annotations

from collections.abc import Callable

import markdown

from kbdwrap.domain.interfaces import IMarkdownRenderer
from kbdwrap.utils.constants import CSS_PREVIEW, HTML_TEMPLATE


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to a full HTML page for the preview pane.

    Inline HTML (notably <kbd>…</kbd>) passes through untouched; the CSS for the
    active <kbd> style is pulled from `kbd_css` on every render so a style
    change shows up on the next refresh.
    """

    def __init__(self, kbd_css: Callable[[], str] | None = None) -> None:
        self._kbd_css = kbd_css or (lambda: "")

    def to_html(self, markdown_text: str) -> str:
        exts = [
            "extra",
            "fenced_code",
            "codehilite",
            "toc",
            "sane_lists",
        ]
        ext_cfg = {
            "codehilite": {"guess_lang": False, "noclasses": True},
        }

        body = markdown.markdown(
            markdown_text,
            extensions=exts,
            extension_configs=ext_cfg,
            output_format="html",
        )
        return HTML_TEMPLATE.format(css=CSS_PREVIEW + self._kbd_css(), body=body)
