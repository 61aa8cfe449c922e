"""Settings management for season-renamer."""
import json
import os
import sys
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .models import RenameOptions


# ---------------------------------------------------------------------------
# Platform-appropriate settings directory
# ---------------------------------------------------------------------------

def _settings_dir() -> Path:
    """Return the platform settings directory (not created here)."""
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "season-renamer"


def default_settings_file() -> Path:
    return _settings_dir() / "settings.json"


# ---------------------------------------------------------------------------
# Default values for every known key
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS: dict[str, Any] = {
    # File recognition
    "media_extensions": [".mp4", ".mkv"],
    "subtitle_extension": ".srt",

    # Subtitles
    "default_subtitle_language": "en",
    "language_aliases": {"eng": "en"},

    # Behavior
    "ignore_filename": False,
    "dry_run": False,
}


# ---------------------------------------------------------------------------
# SettingsManager -- single authority for reading / writing settings
# ---------------------------------------------------------------------------

class SettingsManager:
    """Settings store backed by a JSON file.

    Usage:
        mgr = SettingsManager()
        lang = mgr.get("default_subtitle_language")
        mgr.set("default_subtitle_language", "de")
        mgr.save()

    With no *settings_file* the platform default location is used and a
    missing file simply means defaults.  An explicit file must exist.
    """

    def __init__(self, settings_file: Path | None = None):
        self._explicit = settings_file is not None
        self.settings_file = settings_file or default_settings_file()
        self._data = self._load()

    # -- public API -------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        fallback = DEFAULT_SETTINGS.get(key, default)
        return self._data.get(key, fallback)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def save(self) -> bool:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            return True
        except OSError:
            return False

    def all(self) -> dict[str, Any]:
        """Return a merged view: defaults + saved values."""
        merged = DEFAULT_SETTINGS.copy()
        merged.update(self._data)
        return merged

    def reload(self) -> None:
        self._data = self._load()

    def options(self, **overrides: Any) -> RenameOptions:
        """Build RenameOptions; truthy *overrides* win over stored values.

        Raises:
            ConfigurationError: If a setting has the wrong type
        """
        values = self.all()
        for key, value in overrides.items():
            if value:
                values[key] = value
        self._validate(values)
        return RenameOptions(
            dry_run=values["dry_run"],
            ignore_filename=values["ignore_filename"],
            media_extensions=tuple(values["media_extensions"]),
            subtitle_extension=values["subtitle_extension"],
            default_subtitle_language=values["default_subtitle_language"],
            language_aliases=dict(values["language_aliases"]),
        )

    # -- private ----------------------------------------------------------

    def _invalid(self, key: str, expected: str) -> ConfigurationError:
        return ConfigurationError(
            f"Setting '{key}' in {self.settings_file} must be {expected}",
            self.settings_file,
        )

    def _validate(self, values: dict[str, Any]) -> None:
        for key in ("dry_run", "ignore_filename"):
            if not isinstance(values[key], bool):
                raise self._invalid(key, "true or false")

        for key in ("subtitle_extension", "default_subtitle_language"):
            if not isinstance(values[key], str) or not values[key]:
                raise self._invalid(key, "a non-empty string")

        extensions = values["media_extensions"]
        if not isinstance(extensions, (list, tuple)) or not all(
            isinstance(ext, str) and ext for ext in extensions
        ):
            raise self._invalid("media_extensions", "a list of extensions")

        aliases = values["language_aliases"]
        if not isinstance(aliases, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in aliases.items()
        ):
            raise self._invalid("language_aliases", "an object of language codes")

    def _load(self) -> dict[str, Any]:
        if not self.settings_file.exists():
            if self._explicit:
                raise ConfigurationError(
                    f"Settings file not found: {self.settings_file}", self.settings_file
                )
            return {}
        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Cannot read settings file {self.settings_file}: {e}", self.settings_file
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must hold a JSON object: {self.settings_file}",
                self.settings_file,
            )
        return data


def load_settings(settings_file: Path | None = None) -> dict[str, Any]:
    """Load settings. Returns a dict with defaults for missing keys."""
    return SettingsManager(settings_file).all()
