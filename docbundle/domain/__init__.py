"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    DirectoryReadError,
    DocBundleError,
    FileReadError,
    MissingInputError,
    WriteError,
)
from .interfaces import IConfigService, IFileService, IMarkdownRenderer
from .models import CombinedDocument, RenderedPage, Section, SourceFile, section_title

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IConfigService",
    "DocBundleError",
    "DirectoryReadError",
    "FileReadError",
    "MissingInputError",
    "WriteError",
    "SourceFile",
    "Section",
    "CombinedDocument",
    "RenderedPage",
    "section_title",
]
