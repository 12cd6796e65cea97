"""INI configuration and the typed settings built from it."""

from .app_config import AppConfig, DocsSettings, build_app_config
from .ini_config_service import IniConfigService

__all__ = ["AppConfig", "DocsSettings", "IniConfigService", "build_app_config"]
