# docbundle/services/markdown_renderer.py
from __future__ import annotations

import markdown

from docbundle.domain.interfaces import IMarkdownRenderer


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to an HTML fragment.

    Python-Markdown plus a few pymdownx extensions, roughly matching what a
    GitHub-flavoured renderer gives you: tables, fenced code, strikethrough
    and task lists. Page chrome (doctype, head, CSS) is not added here.
    """

    def __init__(self, highlight: bool = True) -> None:
        self.highlight = highlight

    def to_html(self, markdown_text: str) -> str:
        exts = [
            "extra",
            "toc",
            "sane_lists",
            "pymdownx.tilde",  # ~~strike~~
            "pymdownx.tasklist",  # - [x] done
        ]
        ext_cfg: dict[str, dict[str, object]] = {
            "pymdownx.tilde": {"subscript": False},
        }
        if self.highlight:
            exts.append("codehilite")
            # Inline styles: the page template carries no Pygments stylesheet.
            ext_cfg["codehilite"] = {"guess_lang": False, "noclasses": True}

        # markdown.markdown() builds a fresh Markdown instance per call, so toc
        # ids and footnote counters never leak between renders.
        return markdown.markdown(
            markdown_text,
            extensions=exts,
            extension_configs=ext_cfg,
            output_format="html5",
        )
