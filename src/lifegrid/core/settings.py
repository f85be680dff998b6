"""Board settings and their JSON file."""

import json
import os
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, Dict

from .errors import SettingsError

SETTINGS_FILENAME = "BoardSettings.json"

# Attribute name -> JSON key
_FIELDS = {
    "width": "Width",
    "height": "Height",
    "cell_size": "CellSize",
    "live_density": "LiveDensity",
}


@dataclass(frozen=True)
class BoardSettings:
    """Pixel area, cell size and initial live density of a board."""

    width: int = 0
    height: int = 0
    cell_size: int = 0
    live_density: float = 0.0

    def copy(self) -> "BoardSettings":
        """Return an equal, independent settings record."""
        return replace(self)

    def validate(self) -> None:
        """Check that the settings describe a usable board.

        Raises:
            SettingsError: If any value is out of range
        """
        errors = []

        if self.width <= 0:
            errors.append("Width must be positive")

        if self.height <= 0:
            errors.append("Height must be positive")

        if self.cell_size <= 0:
            errors.append("CellSize must be positive")

        if not 0.0 <= self.live_density <= 1.0:
            errors.append("LiveDensity must be between 0.0 and 1.0")

        if errors:
            raise SettingsError("; ".join(errors))

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to the JSON file's key layout."""
        return {key: getattr(self, attr) for attr, key in _FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Any) -> "BoardSettings":
        """Create settings from a parsed JSON document.

        Raises:
            SettingsError: If a key is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise SettingsError(f"Settings must be a JSON object, got {type(data).__name__}")

        missing = [key for key in _FIELDS.values() if key not in data]
        if missing:
            raise SettingsError(f"Settings missing field(s): {', '.join(missing)}")

        values = {}
        for attr, key in _FIELDS.items():
            value = data[key]
            if attr == "live_density":
                if isinstance(value, bool) or not isinstance(value, Real):
                    raise SettingsError(f"{key} must be a number, got {value!r}")
                values[attr] = float(value)
            else:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise SettingsError(f"{key} must be an integer, got {value!r}")
                values[attr] = value

        return cls(**values)


DEFAULT_SETTINGS = BoardSettings(width=50, height=20, cell_size=1, live_density=0.5)


def save_settings(path: str, settings: BoardSettings) -> None:
    """Write settings as indented JSON, replacing any existing file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)


def load_settings(path: str) -> BoardSettings:
    """Read settings from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SettingsError: If the file is not valid UTF-8 JSON or a field is missing
            or invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsError(f"Malformed settings file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SettingsError(f"Settings file {path} is not UTF-8 text: {e}") from e

    return BoardSettings.from_dict(data)


def load_or_init_settings(path: str = SETTINGS_FILENAME) -> BoardSettings:
    """Load settings, writing the defaults first if the file is absent.

    An existing file that fails to load is an error; it is never replaced
    by the defaults.
    """
    if os.path.exists(path):
        return load_settings(path)

    save_settings(path, DEFAULT_SETTINGS)
    return DEFAULT_SETTINGS
