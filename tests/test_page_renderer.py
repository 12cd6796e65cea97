from __future__ import annotations

from pathlib import Path

import pytest

from docbundle.domain.errors import MissingInputError, WriteError
from docbundle.services.page_renderer import PageRenderer


@pytest.fixture()
def combined(tmp_path: Path) -> Path:
    p = tmp_path / "CombinedDocs.md"
    p.write_text("# FishNet Documentation\n\nbody", encoding="utf-8")
    return p


def test_render_wraps_fragment_in_template(file_service, stub_renderer, combined: Path, tmp_path: Path):
    out = tmp_path / "index.html"
    page = PageRenderer(stub_renderer, file_service, "FishNet Docs").render(combined, out)

    html = out.read_text(encoding="utf-8")
    assert html == page.html
    assert html.startswith("<!DOCTYPE html>")
    assert '<meta charset="UTF-8" />' in html
    assert 'name="viewport"' in html
    assert "<title>FishNet Docs</title>" in html
    assert "<style>" in html and "pre {" in html and "hr {" in html
    assert html.count("<html") == 1 and html.count("<body>") == 1
    body = html.split("<body>", 1)[1].split("</body>", 1)[0]
    assert "<pre data-stub># FishNet Documentation\n\nbody</pre>" in body
    assert stub_renderer.calls == ["# FishNet Documentation\n\nbody"]


def test_render_escapes_title(file_service, stub_renderer):
    page = PageRenderer(stub_renderer, file_service, "R&D <Docs>").build_page("x")
    assert "<title>R&amp;D &lt;Docs&gt;</title>" in page.html
    assert page.title == "R&D <Docs>"


def test_render_keeps_braces_in_fragment(file_service, stub_renderer):
    page = PageRenderer(stub_renderer, file_service, "T").build_page("{css} {body}")
    assert "<pre data-stub>{css} {body}</pre>" in page.html


def test_render_is_deterministic(file_service, renderer, combined: Path, tmp_path: Path):
    pr = PageRenderer(renderer, file_service, "FishNet Docs")
    out = tmp_path / "index.html"
    pr.render(combined, out)
    first = out.read_bytes()
    pr.render(combined, out)
    assert out.read_bytes() == first


def test_render_missing_input(file_service, stub_renderer, tmp_path: Path):
    out = tmp_path / "index.html"
    with pytest.raises(MissingInputError):
        PageRenderer(stub_renderer, file_service, "T").render(tmp_path / "CombinedDocs.md", out)
    assert not out.exists()
    assert stub_renderer.calls == []


def test_render_missing_input_keeps_previous_page(file_service, stub_renderer, tmp_path: Path):
    out = tmp_path / "index.html"
    out.write_text("old page", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        PageRenderer(stub_renderer, file_service, "T").render(tmp_path / "nope.md", out)
    assert out.read_text(encoding="utf-8") == "old page"


def test_render_error_propagates_unchanged(file_service, combined: Path, tmp_path: Path):
    class Exploding:
        def to_html(self, markdown_text: str) -> str:
            raise ValueError("bad markdown")

    out = tmp_path / "index.html"
    with pytest.raises(ValueError, match="bad markdown"):
        PageRenderer(Exploding(), file_service, "T").render(combined, out)
    assert not out.exists()


def test_render_write_failure(monkeypatch, file_service, stub_renderer, combined: Path, tmp_path: Path):
    def boom(path, text):
        raise PermissionError("nope")

    monkeypatch.setattr(file_service, "write_text_atomic", boom)
    with pytest.raises(WriteError):
        PageRenderer(stub_renderer, file_service, "T").render(combined, tmp_path / "index.html")
