from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to an HTML fragment (no page chrome)."""

    def to_html(self, markdown_text: str) -> str: ...


class IFileService(Protocol):
    """Read/write UTF-8 text files. Writes are atomic."""

    def list_names(self, directory: Path) -> list[str]: ...
    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, section: str, key: str, default: list[str] | None = None) -> list[str] | None: ...

    @property
    def loaded_from(self) -> Path | None: ...
