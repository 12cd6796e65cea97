"""Concrete service implementations: file access, rendering and the two build steps."""

from .collector import Collector
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .page_renderer import PageRenderer

__all__ = ["Collector", "FileService", "MarkdownRenderer", "PageRenderer"]
