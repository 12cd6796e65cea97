from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from docbundle.domain.interfaces import IConfigService
from docbundle.services.config.ini_config_service import IniConfigService
from docbundle.utils.constants import (
    DEFAULT_COMBINED_FILE,
    DEFAULT_EXCLUDE,
    DEFAULT_EXTENSIONS,
    DEFAULT_HTML_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROJECT_NAME,
)


@dataclass(frozen=True)
class DocsSettings:
    project_name: str = DEFAULT_PROJECT_NAME
    combined_file: str = DEFAULT_COMBINED_FILE
    html_file: str = DEFAULT_HTML_FILE
    page_title: str = ""
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE

    @property
    def title(self) -> str:
        return self.page_title or f"{self.project_name} Docs"

    @property
    def excluded_names(self) -> frozenset[str]:
        # The combined output lives next to the sources; never feed it back in.
        return frozenset(self.exclude) | {self.combined_file}


@dataclass(frozen=True)
class AppConfig:
    """
    Typed view over an IniConfigService.

    Every key is optional; with no config file the settings reproduce the
    built-in defaults exactly.
    """

    ini: IConfigService
    source_dir: Path

    def docs_settings(self) -> DocsSettings:
        ini = self.ini
        return DocsSettings(
            project_name=ini.get("docs", "project_name", DEFAULT_PROJECT_NAME) or DEFAULT_PROJECT_NAME,
            combined_file=ini.get("docs", "combined_file", DEFAULT_COMBINED_FILE) or DEFAULT_COMBINED_FILE,
            html_file=ini.get("docs", "html_file", DEFAULT_HTML_FILE) or DEFAULT_HTML_FILE,
            page_title=ini.get("docs", "page_title", "") or "",
            extensions=tuple(ini.get_list("docs", "extensions", None) or DEFAULT_EXTENSIONS),
            exclude=tuple(ini.get_list("docs", "exclude", list(DEFAULT_EXCLUDE)) or ()),
        )

    def log_level(self) -> int:
        name = (self.ini.get("logging", "level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.WARNING

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(source_dir: Path, *, explicit_ini: Path | None = None) -> AppConfig:
    ini = IniConfigService(explicit_path=explicit_ini, source_dir=source_dir)
    return AppConfig(ini=ini, source_dir=source_dir)
