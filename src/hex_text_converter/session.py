# hex_text_converter/session.py

"""UI-independent session state shared by the CLI and the GUI.

The engine in :mod:`hex_text_converter.logic` is stateless; everything that
lives between conversions (current mode, input/output, history, live vs manual
trigger, theme and language) is owned here.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .__about__ import DIST_NAME
from .logic import ConversionResult, convert
from .settings import ConversionMode, ConverterSettings, normalize_settings

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10

THEMES = ("dark", "light")
LANGUAGES = ("en", "zh")
DEFAULT_PREFERENCES = {"theme": "dark", "language": "en"}


# ---------------- Preferences ----------------
def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no dependencies)."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / DIST_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / DIST_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / DIST_NAME
    return Path.home() / ".config" / DIST_NAME


class PreferenceStore:
    """Theme/language persisted as JSON under the stable keys ``theme`` and ``language``."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else get_user_config_dir() / "preferences.json"

    def load(self) -> dict[str, str]:
        prefs = dict(DEFAULT_PREFERENCES)
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return prefs
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable preferences at %s: %s", self.path, exc)
            return prefs

        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed preferences at %s", self.path)
            return prefs
        if raw.get("theme") in THEMES:
            prefs["theme"] = raw["theme"]
        if raw.get("language") in LANGUAGES:
            prefs["language"] = raw["language"]
        return prefs

    def save(self, **values: str) -> None:
        prefs = self.load()
        prefs.update(values)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(prefs, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save preferences to %s: %s", self.path, exc)


# ---------------- History ----------------
@dataclass(frozen=True)
class HistoryEntry:
    input_text: str
    output_text: str
    mode: ConversionMode
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp_ms: int = field(default_factory=lambda: int(time.time() * 1000))

    def summary(self, width: int = 30) -> str:
        text = self.input_text if len(self.input_text) <= width else self.input_text[:width] + "..."
        return f"{self.mode.label}  {text}"


# ---------------- Session ----------------
class ConverterSession:
    """Mode, input/output, settings, history and preferences for one user."""

    def __init__(
        self,
        settings: ConverterSettings | dict[str, Any] | None = None,
        *,
        mode: ConversionMode | str = ConversionMode.TEXT_TO_HEX,
        store: PreferenceStore | None = None,
    ) -> None:
        self.settings = normalize_settings(settings) if settings is not None else ConverterSettings()
        self.mode = ConversionMode.parse(mode)
        self.input_text = ""
        self.output_text = ""
        self.error: str | None = None
        self.history: list[HistoryEntry] = []
        self.store = store

        prefs = store.load() if store is not None else dict(DEFAULT_PREFERENCES)
        self.theme = prefs["theme"]
        self.language = prefs["language"]

    # -- conversion --
    def _perform(self) -> ConversionResult | None:
        if not self.input_text.strip():
            self.output_text = ""
            self.error = None
            return None

        result = convert(self.input_text, self.mode, self.settings)
        self.output_text = result.text
        self.error = result.message
        return result

    def _maybe_live(self) -> None:
        if self.settings.live_mode:
            self._perform()

    def convert_now(self) -> ConversionResult | None:
        """Explicit conversion; records history when input and output are non-blank."""
        result = self._perform()
        if result is not None and result.ok and self.output_text.strip():
            entry = HistoryEntry(self.input_text, self.output_text, self.mode)
            self.history = [entry, *self.history][:HISTORY_LIMIT]
            logger.debug("history: recorded %s (%d entries)", entry.id, len(self.history))
        return result

    # -- state changes --
    def set_input(self, text: str) -> None:
        self.input_text = text
        self._maybe_live()

    def set_mode(self, mode: ConversionMode | str) -> None:
        self.mode = ConversionMode.parse(mode)
        self._maybe_live()

    def update_settings(self, **changes: Any) -> None:
        self.settings = self.settings.replace(**changes)
        self._maybe_live()

    def swap_mode(self) -> None:
        if self.output_text:
            self.input_text = self.output_text
        self.mode = self.mode.swapped()
        self._maybe_live()

    def clear(self) -> None:
        self.input_text = ""
        self.output_text = ""
        self.error = None

    def clear_history(self) -> None:
        self.history = []

    def restore(self, entry: HistoryEntry | str) -> HistoryEntry:
        """Load a history entry (or its id) back into the input."""
        if isinstance(entry, str):
            match = next((h for h in self.history if h.id == entry), None)
            if match is None:
                raise KeyError(entry)
            entry = match
        self.mode = entry.mode
        self.set_input(entry.input_text)
        return entry

    # -- appearance --
    def toggle_theme(self) -> str:
        self.theme = "light" if self.theme == "dark" else "dark"
        if self.store is not None:
            self.store.save(theme=self.theme)
        return self.theme

    def toggle_language(self) -> str:
        self.language = "zh" if self.language == "en" else "en"
        if self.store is not None:
            self.store.save(language=self.language)
        return self.language
