from __future__ import annotations

from pathlib import Path

from docbundle.domain.interfaces import IFileService, IMarkdownRenderer
from docbundle.services.collector import Collector
from docbundle.services.config.app_config import AppConfig, build_app_config
from docbundle.services.file_service import FileService
from docbundle.services.markdown_renderer import MarkdownRenderer
from docbundle.services.page_renderer import PageRenderer


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the collector and page renderer from the loaded settings
    """

    def __init__(
        self,
        config: AppConfig,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
    ) -> None:
        self.config = config
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        self.file_service: IFileService = files or FileService()
        self.settings = config.docs_settings()

    @staticmethod
    def default(source_dir: Path, *, explicit_ini: Path | None = None) -> Container:
        """Container backed by the config found for `source_dir`."""
        return Container(config=build_app_config(source_dir, explicit_ini=explicit_ini))

    @property
    def source_dir(self) -> Path:
        return self.config.source_dir

    @property
    def combined_path(self) -> Path:
        return self.source_dir / self.settings.combined_file

    @property
    def html_path(self) -> Path:
        return self.source_dir / self.settings.html_file

    # ---------- factories ----------

    def build_collector(self) -> Collector:
        return Collector(files=self.file_service, settings=self.settings)

    def build_page_renderer(self) -> PageRenderer:
        return PageRenderer(renderer=self.renderer, files=self.file_service, title=self.settings.title)
