from __future__ import annotations

import logging
from pathlib import Path

from docbundle.domain.errors import DirectoryReadError, FileReadError, WriteError
from docbundle.domain.interfaces import IFileService
from docbundle.domain.models import CombinedDocument, Section, SourceFile
from docbundle.services.config.app_config import DocsSettings

logger = logging.getLogger(__name__)


class Collector:
    """
    Concatenates a directory's markdown files into one combined document.

    The whole document is built in memory before the single atomic write, so a
    read failure part-way through leaves any previous output untouched.
    """

    def __init__(self, files: IFileService, settings: DocsSettings | None = None) -> None:
        self._files = files
        self._settings = settings or DocsSettings()

    @property
    def settings(self) -> DocsSettings:
        return self._settings

    def output_path(self, source_dir: Path) -> Path:
        return source_dir / self._settings.combined_file

    def select(self, names: list[str]) -> list[str]:
        """Markdown names that are not excluded, in code-point order."""
        excluded = self._settings.excluded_names
        exts = self._settings.extensions
        return sorted(n for n in names if n.endswith(exts) and n not in excluded)

    def collect(self, source_dir: Path) -> CombinedDocument:
        try:
            names = self._files.list_names(source_dir)
        except OSError as exc:
            raise DirectoryReadError(f"Cannot list source directory: {source_dir}") from exc

        selected = self.select(names)
        logger.debug("Selected %d of %d entries in %s", len(selected), len(names), source_dir)

        doc = CombinedDocument(project_name=self._settings.project_name)
        for name in selected:
            path = source_dir / name
            try:
                content = self._files.read_text(path)
            except (OSError, UnicodeDecodeError) as exc:
                raise FileReadError(f"Cannot read source file: {path}") from exc
            doc.sections.append(Section.from_source(SourceFile(name, content), self._settings.extensions))
            logger.debug("Added section from %s", name)

        out = self.output_path(source_dir)
        try:
            self._files.write_text_atomic(out, doc.to_markdown())
        except OSError as exc:
            raise WriteError(f"Cannot write combined document: {out}") from exc

        logger.info("Combined %d markdown files into %s", len(doc.sections), out)
        return doc
