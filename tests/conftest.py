from __future__ import annotations

from pathlib import Path

import pytest

from docbundle.services.file_service import FileService
from docbundle.services.markdown_renderer import MarkdownRenderer


class StubRenderer:
    """Stands in for the markdown library: wraps the text so tests can find it."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def to_html(self, markdown_text: str) -> str:
        self.calls.append(markdown_text)
        return f"<pre data-stub>{markdown_text}</pre>"


# Keep the real user config dir out of every test.
@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path: Path) -> Path:
    user_dir = tmp_path / "usercfg"
    monkeypatch.setattr(
        "docbundle.services.config.ini_config_service.user_config_dir",
        lambda appname: str(user_dir),
        raising=True,
    )
    return user_dir


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def stub_renderer() -> StubRenderer:
    return StubRenderer()


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    d = tmp_path / "docs"
    d.mkdir()
    (d / "README.md").write_text("# Readme\n", encoding="utf-8")
    (d / "_sidebar.md").write_text("* [Home](/)\n", encoding="utf-8")
    (d / "GettingStarted.md").write_text("\n\nInstall it.\n\n", encoding="utf-8")
    (d / "API.md").write_text("## Calls\n\n`spawn()`\n", encoding="utf-8")
    (d / "index.md").write_text("Welcome!", encoding="utf-8")
    (d / "notes.txt").write_text("not markdown", encoding="utf-8")
    return d
