from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from docbundle.domain.interfaces import IFileService


class FileService(IFileService):
    """UTF-8 reads and atomic writes for text files."""

    def list_names(self, directory: Path) -> list[str]:
        return [entry.name for entry in directory.iterdir()]

    def read_text(self, path: Path) -> str:
        # newline="": keep \r\n as written
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()

    def write_text_atomic(self, path: Path, text: str) -> None:
        # Temp file + rename on commit: the target is never left truncated.
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
