from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from docbundle.di.container import Container
from docbundle.domain.errors import DocBundleError


def _container(argv: Sequence[str]) -> Container:
    # Optional source directory passed as first CLI argument
    source_dir = Path(argv[1]) if len(argv) > 1 else Path.cwd()
    container = Container.default(source_dir)
    logging.basicConfig(
        level=container.config.log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if container.config.loaded_from is not None:
        logging.getLogger(__name__).debug("Config loaded from %s", container.config.loaded_from)
    return container


def _collect(container: Container) -> None:
    doc = container.build_collector().collect(container.source_dir)
    print(f"Combined {len(doc.sections)} markdown files into {container.settings.combined_file}")


def _render(container: Container) -> None:
    container.build_page_renderer().render(container.combined_path, container.html_path)
    print(f"Rendered {container.settings.combined_file} into {container.settings.html_file}")


def collect_docs(argv: Sequence[str]) -> int:
    """Concatenate the markdown files of a directory into the combined document."""
    try:
        _collect(_container(argv))
    except DocBundleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def render_docs(argv: Sequence[str]) -> int:
    """Render an existing combined document into the HTML page."""
    try:
        _render(_container(argv))
    except DocBundleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def run_app(argv: Sequence[str]) -> int:
    """
    Full build: collect, then render.

    Always collects first, so the page reflects the current sources.
    """
    try:
        container = _container(argv)
        _collect(container)
        _render(container)
    except DocBundleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
