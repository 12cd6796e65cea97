from __future__ import annotations

import html
import logging
from pathlib import Path

from docbundle.domain.errors import FileReadError, MissingInputError, WriteError
from docbundle.domain.interfaces import IFileService, IMarkdownRenderer
from docbundle.domain.models import RenderedPage
from docbundle.utils.constants import CSS_PAGE, HTML_TEMPLATE

logger = logging.getLogger(__name__)


class PageRenderer:
    """
    Renders the combined document into a standalone HTML page.

    Does not run the collector: the combined document must already exist.
    Errors raised by the markdown renderer propagate unchanged.
    """

    def __init__(self, renderer: IMarkdownRenderer, files: IFileService, title: str) -> None:
        self._renderer = renderer
        self._files = files
        self._title = title

    def build_page(self, markdown_text: str) -> RenderedPage:
        body = self._renderer.to_html(markdown_text)
        page = HTML_TEMPLATE.format(title=html.escape(self._title), css=CSS_PAGE, body=body)
        return RenderedPage(title=self._title, html=page)

    def render(self, combined_path: Path, out_path: Path) -> RenderedPage:
        try:
            text = self._files.read_text(combined_path)
        except FileNotFoundError as exc:
            raise MissingInputError(f"Combined document not found: {combined_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(f"Cannot read combined document: {combined_path}") from exc

        page = self.build_page(text)

        try:
            self._files.write_text_atomic(out_path, page.html)
        except OSError as exc:
            raise WriteError(f"Cannot write HTML page: {out_path}") from exc

        logger.info("Rendered %s into %s", combined_path, out_path)
        return page
