from typing import Any, List
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Signal


# --- Layout / Scroll Settings ---
class Breakpoint(BaseModel):
    """Layout parameters applied when the viewport is at least `min_width` wide."""
    min_width: int
    card_height: int
    gutter: int


def _default_breakpoints() -> List[Breakpoint]:
    return [
        Breakpoint(min_width=1200, card_height=280, gutter=100),
        Breakpoint(min_width=768, card_height=260, gutter=80),
        Breakpoint(min_width=600, card_height=240, gutter=60),
    ]


class LayoutSettings(BaseModel):
    breakpoints: List[Breakpoint] = Field(default_factory=_default_breakpoints)
    compact_card_height: int = 220  # below the narrowest breakpoint, one column
    column_width: int = 270
    chrome_height: int = 300  # header, title and margins
    extra_rows: int = 1  # more than one screen of content before pinning
    min_results_floor: int = 3


class ScrollSettings(BaseModel):
    dead_zone: int = 10
    pin_offset: int = 100


class GeneralSettings(BaseModel):
    debug_mode: bool = False
    catalog_path: str = ""
    window_width: int = 1280
    window_height: int = 900
    log_dir: str = "logs"


class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    scroll: ScrollSettings = Field(default_factory=ScrollSettings)


# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if not hasattr(section_obj, key):
            raise ValueError(f"Invalid key: {key} in section {section}")

        setattr(section_obj, key, value)
        self._save()
        self.on_changed.emit(section, key, value)

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
                logger.debug(f"Config loaded from {self.filepath}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file. TOML files are treated as read-only."""
        if self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
