# docbundle/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from docbundle.domain.interfaces import IConfigService
from docbundle.utils.constants import LOCAL_CONFIG_FILE

logger = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. <source_dir>/docbundle.ini next to the markdown sources
      3. User config dir (e.g., ~/.config/docbundle/config.ini or %APPDATA%\docbundle\config.ini)
    """

    DEFAULT_APP_DIR = "docbundle"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, source_dir: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        if source_dir:
            candidates.append(source_dir / LOCAL_CONFIG_FILE)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, configparser.Error) as exc:
                # A broken config must not stop a docs build; defaults apply.
                logger.warning("Ignoring unreadable config %s: %s", path, exc)
                continue
            self._parser = parser
            self._loaded_from = path
            break

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_list(
        self, section: str, key: str, default: Optional[list[str]] = None
    ) -> Optional[list[str]]:
        val = self.get(section, key, None)
        if val is None:
            return default
        return [item.strip() for item in val.split(",") if item.strip()]

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from
