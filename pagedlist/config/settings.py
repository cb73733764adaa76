"""
PagedList Settings Management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from pagedlist.services.ipc_helpers import default_socket_path

logger = logging.getLogger("PagedList.Settings")


class PaginationSettings(BaseModel):
    """Paging and prefetch settings"""
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Number of records requested per page (1-100)"
    )
    look_ahead: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Rows before the end of the list at which the next page is requested"
    )
    stop_on_empty_page: bool = Field(
        default=True,
        description="Treat a page without records as the last page"
    )


class SourceSettings(BaseModel):
    """Page source connection settings"""
    transport: Literal["memory", "ipc", "websocket"] = "websocket"
    uri: str = Field(
        default="ws://localhost:8765",
        description="WebSocket endpoint serving pages"
    )
    socket_path: Optional[str] = Field(
        default=None,
        description="UNIX socket path for the ipc transport"
    )
    resource: Optional[str] = Field(
        default=None,
        description="Resource name sent with each page request"
    )
    max_size: int = Field(
        default=8 * 1024 * 1024,
        ge=1024,
        description="Largest accepted WebSocket message in bytes"
    )
    open_timeout: float = Field(default=5.0, gt=0)
    request_timeout: float = Field(default=10.0, gt=0)

    @model_validator(mode="after")
    def validate_uri(self) -> "SourceSettings":
        """The websocket transport needs a ws:// or wss:// uri"""
        if self.transport == "websocket" and not self.uri.startswith(("ws://", "wss://")):
            raise ValueError("uri must start with ws:// or wss://")
        return self

    @property
    def resolved_socket_path(self) -> str:
        return self.socket_path or default_socket_path()


class Settings(BaseModel):
    """Main settings model"""
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = Path("settings.yml")

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Error reading settings YAML: {e}. Using default settings")
            return Settings()

        if config_data is None:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid settings in {self.config_path}: {e}. Using default settings")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        logger.debug(f"  - Page size: {settings.pagination.page_size}")
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def page_size(self) -> int:
        return self.settings.pagination.page_size

    @property
    def look_ahead(self) -> int:
        return self.settings.pagination.look_ahead

    @property
    def stop_on_empty_page(self) -> bool:
        return self.settings.pagination.stop_on_empty_page

    @property
    def source(self) -> SourceSettings:
        return self.settings.source

    def update_settings(self, **kwargs):
        """Update settings and save to file.

        Nested fields use dotted keys, e.g. ``update_settings(**{"pagination.page_size": 50})``.
        Values are validated against the models before anything is written.
        """
        data = self.settings.model_dump()
        for key, value in kwargs.items():
            parts = key.split('.')
            target = data
            for part in parts[:-1]:
                if part not in target or not isinstance(target[part], dict):
                    raise KeyError(f"Unknown settings section: {key}")
                target = target[part]
            if parts[-1] not in target:
                raise KeyError(f"Unknown setting: {key}")
            target[parts[-1]] = value

        self.settings = Settings(**data)
        self._save_settings()

    def _save_settings(self):
        """Save current settings to YAML file"""
        config_data = self.settings.model_dump()
        with open(self.config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False)


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings() -> SettingsManager:
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
