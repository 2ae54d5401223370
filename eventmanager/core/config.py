from typing import Any
import json
import os
from pydantic import BaseModel, Field
from loguru import logger

# --- Settings Models ---
class LoggingSettings(BaseModel):
    debug_mode: bool = False
    log_dir: str = "logs"
    log_to_file: bool = False

class ManagerSettings(BaseModel):
    log_emits: bool = False  # trace every dispatch

class EventManagerConfig(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    manager: ManagerSettings = Field(default_factory=ManagerSettings)

# --- Manager ---
class ConfigManager:
    """
    Loads EventManager configuration from JSON or TOML.

    A missing file keeps the defaults; an unreadable or invalid one is
    logged and replaced by defaults.
    """
    def __init__(self, filepath: str = "eventmanager.json"):
        self.filepath = filepath
        self._data = EventManagerConfig()
        self._load()

    @property
    def data(self) -> EventManagerConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting in memory after checking that it exists."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        setattr(section_obj, key, value)

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        if not os.path.isfile(self.filepath):
            return
        try:
            if self.filepath.endswith('.toml'):
                import tomllib
                with open(self.filepath, "rb") as f:
                    raw = tomllib.load(f)
            else:
                with open(self.filepath, "r", encoding="utf-8") as f:
                    raw = json.load(f)
            self._data = EventManagerConfig.model_validate(raw)
        except Exception as e:
            logger.error(f"Failed to load config from {self.filepath}: {e}")
            self._data = EventManagerConfig()

    def save(self):
        """Persist current config as JSON."""
        dirname = os.path.dirname(self.filepath)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        with open(self.filepath, "w", encoding="utf-8") as f:
            json.dump(self._data.model_dump(), f, indent=4)
