from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from docbundle.utils.constants import DOC_PREAMBLE, SECTION_TEMPLATE

_UPPER_RE = re.compile(r"([A-Z])")
# Whitespace plus a leading/trailing byte order mark.
_EDGE_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def trim(text: str) -> str:
    return _EDGE_RE.sub("", text)


def section_title(file_name: str, extensions: Iterable[str] = (".md",)) -> str:
    """
    Human-readable heading for a source file name.

    Drops the markdown extension, then puts a space in front of every uppercase
    letter: "MyFile.md" -> "My File", "API.md" -> "A P I".
    """
    stem = file_name
    for ext in extensions:
        if stem.endswith(ext):
            stem = stem[: -len(ext)]
            break
    return _UPPER_RE.sub(r" \1", stem).strip()


@dataclass(frozen=True)
class SourceFile:
    name: str
    content: str


@dataclass(frozen=True)
class Section:
    title: str
    body: str

    @classmethod
    def from_source(cls, src: SourceFile, extensions: Iterable[str] = (".md",)) -> Section:
        return cls(title=section_title(src.name, extensions), body=trim(src.content))

    def to_markdown(self) -> str:
        return SECTION_TEMPLATE.format(title=self.title, body=self.body)


@dataclass
class CombinedDocument:
    """Ordered sections under one top-level title."""

    project_name: str
    sections: list[Section] = field(default_factory=list)

    @property
    def title(self) -> str:
        return f"{self.project_name} Documentation"

    def to_markdown(self) -> str:
        parts = [DOC_PREAMBLE.format(title=self.title)]
        parts.extend(s.to_markdown() for s in self.sections)
        return "".join(parts)


@dataclass(frozen=True)
class RenderedPage:
    title: str
    html: str
