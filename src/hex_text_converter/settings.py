# hex_text_converter/settings.py

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

UTF8 = "UTF-8"
ASCII = "ASCII"
ENCODINGS = (UTF8, ASCII)

_ENCODING_ALIASES = {
    "utf-8": UTF8,
    "utf8": UTF8,
    "utf_8": UTF8,
    "ascii": ASCII,
    "us-ascii": ASCII,
    "us_ascii": ASCII,
}

# camelCase keys accepted from mappings (saved UI state, JSON payloads)
_KEY_ALIASES = {"liveMode": "live_mode"}

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}

_HEX_DIGITS = set("0123456789abcdefABCDEF")


class ConversionMode(Enum):
    TEXT_TO_HEX = "TEXT_TO_HEX"
    HEX_TO_TEXT = "HEX_TO_TEXT"

    @classmethod
    def parse(cls, value: "ConversionMode | str") -> "ConversionMode":
        """Accept a member, its name, or the STRING_TO_HEX / HEX_TO_STRING aliases."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace("-", "_")
        key = {"STRING_TO_HEX": "TEXT_TO_HEX", "HEX_TO_STRING": "HEX_TO_TEXT"}.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown conversion mode: {value!r}") from None

    def swapped(self) -> "ConversionMode":
        if self is ConversionMode.TEXT_TO_HEX:
            return ConversionMode.HEX_TO_TEXT
        return ConversionMode.TEXT_TO_HEX

    @property
    def label(self) -> str:
        return "TEXT → HEX" if self is ConversionMode.TEXT_TO_HEX else "HEX → TEXT"


def parse_flag(name: str, value: Any, default: bool = True) -> bool:
    """Read a boolean setting; accepts bools, 0/1 and true/false/yes/no/on/off strings."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
    raise ValueError(f"Setting {name!r} must be a boolean, got {value!r}")


def check_format(delimiter: str, prefix: str) -> None:
    """Reject delimiter/prefix combinations that hex input cannot be split back from.

    - the delimiter may not contain hex digits (it would cut byte-pairs apart)
    - the prefix may not contain whitespace (input is trimmed and split on it)
    - the prefix may not consist only of hex digits (``41`` would lose its ``4``)
    - the prefix may not contain the delimiter
    """
    if _HEX_DIGITS & set(delimiter):
        raise ValueError(f"Delimiter {delimiter!r} may not contain hex digits")
    if any(ch.isspace() for ch in prefix):
        raise ValueError(f"Prefix {prefix!r} may not contain whitespace")
    if prefix and set(prefix) <= _HEX_DIGITS:
        raise ValueError(f"Prefix {prefix!r} may not consist only of hex digits")
    if delimiter and delimiter in prefix:
        raise ValueError(f"Prefix {prefix!r} may not contain the delimiter {delimiter!r}")


def canonical_encoding(name: str | None) -> str:
    """Map user-supplied encoding names onto ``UTF-8`` or ``ASCII``."""
    if name is None:
        return UTF8
    s = str(name).strip()
    if s in ENCODINGS:
        return s
    try:
        return _ENCODING_ALIASES[s.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported encoding: {name!r} (expected one of {', '.join(ENCODINGS)})"
        ) from None


@dataclass(frozen=True)
class ConverterSettings:
    """Formatting rules for a single conversion call.

    ``live_mode`` only matters to the session layer; the engine ignores it.
    """
    delimiter: str = " "
    prefix: str = ""
    uppercase: bool = True
    encoding: str = UTF8
    live_mode: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "encoding", canonical_encoding(self.encoding))
        check_format(self.delimiter, self.prefix)

    def replace(self, **changes: Any) -> "ConverterSettings":
        return normalize_settings(self, **changes)


_FIELD_NAMES = {f.name for f in fields(ConverterSettings)}


def normalize_settings(
    settings: ConverterSettings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ConverterSettings:
    """Return fully-populated settings.

    ``settings`` may be ``None``, a :class:`ConverterSettings` or a mapping.
    Absent or ``None`` delimiter/prefix become ``""``; absent flags fall back to
    ``True``; the encoding name is canonicalized.
    """
    if isinstance(settings, ConverterSettings):
        raw: dict[str, Any] = {f: getattr(settings, f) for f in _FIELD_NAMES}
    else:
        raw = {}
        for key, value in dict(settings or {}).items():
            raw[_KEY_ALIASES.get(key, key)] = value

    for key, value in overrides.items():
        raw[_KEY_ALIASES.get(key, key)] = value

    unknown = set(raw) - _FIELD_NAMES
    if unknown:
        raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    return ConverterSettings(
        delimiter=str(raw.get("delimiter") or ""),
        prefix=str(raw.get("prefix") or ""),
        uppercase=parse_flag("uppercase", raw.get("uppercase")),
        encoding=canonical_encoding(raw.get("encoding")),
        live_mode=parse_flag("live_mode", raw.get("live_mode")),
    )
