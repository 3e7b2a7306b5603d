# hex_text_converter/logic.py

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from .settings import ASCII, ConversionMode, ConverterSettings, normalize_settings

logger = logging.getLogger(__name__)

ASCII_MAX = 0x7F

_HEX_PAIRS_RE = re.compile(r"(?:[0-9A-Fa-f]{2})+")
_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")

SettingsLike = Union[ConverterSettings, Mapping[str, Any], None]


# ---------------- Errors ----------------
class ErrorKind(Enum):
    ENCODING = "EncodingError"
    MALFORMED_HEX = "MalformedHexError"
    INVALID_SEQUENCE = "InvalidSequenceError"


class ConversionError(ValueError):
    """Base class for per-call conversion failures.

    ``str(exc)`` is the user-facing message.
    """
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EncodingError(ConversionError):
    """A character (encode) or byte (decode) lies outside the selected encoding."""
    kind = ErrorKind.ENCODING

    def __init__(
        self,
        message: str,
        *,
        char: str | None = None,
        byte: int | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.char = char
        self.byte = byte
        self.index = index


class MalformedHexError(ConversionError):
    """A token is not an even-length run of hex digits."""
    kind = ErrorKind.MALFORMED_HEX

    def __init__(self, message: str, *, token: str, index: int) -> None:
        super().__init__(message)
        self.token = token
        self.index = index


class InvalidSequenceError(ConversionError):
    """Well-formed bytes that do not form valid UTF-8."""
    kind = ErrorKind.INVALID_SEQUENCE

    def __init__(self, message: str, *, byte: int, offset: int) -> None:
        super().__init__(message)
        self.byte = byte
        self.offset = offset


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion: output text, or the error that aborted it."""
    text: str = ""
    error: ConversionError | None = None

    @classmethod
    def success(cls, text: str) -> "ConversionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: ConversionError) -> "ConversionResult":
        return cls(text="", error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind

    @property
    def message(self) -> str | None:
        return None if self.error is None else self.error.message


# ---------------- Text → bytes → hex ----------------
def text_to_bytes(text: str, encoding: str) -> bytes:
    """Encode ``text`` per ``encoding`` ("UTF-8" or "ASCII"), naming any bad character."""
    if encoding == ASCII:
        for i, ch in enumerate(text):
            if ord(ch) > ASCII_MAX:
                raise EncodingError(
                    f"Character {ch!r} (U+{ord(ch):04X}) at index {i} is not valid ASCII",
                    char=ch, index=i,
                )
        return text.encode("ascii")

    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        ch = text[exc.start]
        raise EncodingError(
            f"Character U+{ord(ch):04X} at index {exc.start} cannot be encoded as UTF-8",
            char=ch, index=exc.start,
        ) from None


def format_hex_bytes(data: bytes, settings: SettingsLike = None) -> str:
    """Render bytes as prefixed, delimited byte-pairs (e.g. ``0xAA 0xBB``)."""
    s = normalize_settings(settings)
    pair = "{:02X}" if s.uppercase else "{:02x}"
    return s.delimiter.join(s.prefix + pair.format(b) for b in data)


def text_to_hex(text: str, settings: SettingsLike = None) -> str:
    """Convert text to formatted hex. Raises :class:`EncodingError`."""
    s = normalize_settings(settings)
    if not text:
        return ""
    return format_hex_bytes(text_to_bytes(text, s.encoding), s)


# ---------------- Hex → bytes → text ----------------
def _strip_prefix(token: str, prefix: str) -> str:
    # Lenient and case-insensitive: "0X41" and "41" both pass with prefix "0x".
    if prefix and token[:len(prefix)].lower() == prefix.lower():
        return token[len(prefix):]
    return token


def _split_contiguous(s: str, prefix: str) -> list[str]:
    """Cut an undelimited stream into ``[prefix]XX`` chunks."""
    chunks: list[str] = []
    i = 0
    plen = len(prefix)
    while i < len(s):
        start = i
        if plen and s[i:i + plen].lower() == prefix.lower():
            i += plen
        i += 2
        chunks.append(s[start:i])
    return chunks


def split_hex_tokens(text: str, settings: SettingsLike = None) -> list[str]:
    """Split trimmed input into raw tokens (prefix still attached)."""
    s = normalize_settings(settings)
    src = text.strip()
    if not src:
        return []
    if not s.delimiter:
        return _split_contiguous(src, s.prefix)
    if not s.delimiter.strip():
        return src.split()
    tokens = (tok.strip() for tok in src.split(s.delimiter))
    return [tok for tok in tokens if tok]


def parse_hex_tokens(text: str, settings: SettingsLike = None) -> bytes:
    """Validate and parse formatted hex into bytes. Raises :class:`MalformedHexError`."""
    s = normalize_settings(settings)
    out = bytearray()
    for index, token in enumerate(split_hex_tokens(text, s)):
        digits = _strip_prefix(token, s.prefix)
        if not digits:
            raise MalformedHexError(
                f"Missing hex digits in token {token!r} at position {index}",
                token=token, index=index,
            )
        if not _HEX_PAIRS_RE.fullmatch(digits):
            if _HEX_DIGITS_RE.fullmatch(digits):
                msg = f"Odd number of hex digits in token {token!r} at position {index}"
            else:
                msg = f"Invalid hex token {token!r} at position {index}"
            raise MalformedHexError(msg, token=token, index=index)
        out.extend(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))
    return bytes(out)


def bytes_to_text(data: bytes, encoding: str) -> str:
    """Decode bytes per ``encoding``, naming the first offending byte."""
    if encoding == ASCII:
        for offset, b in enumerate(data):
            if b > ASCII_MAX:
                raise EncodingError(
                    f"Byte 0x{b:02X} at offset {offset} is not valid ASCII",
                    byte=b, index=offset,
                )
        return data.decode("ascii")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        b = data[exc.start]
        raise InvalidSequenceError(
            f"Invalid UTF-8 sequence at byte offset {exc.start} (0x{b:02X}): {exc.reason}",
            byte=b, offset=exc.start,
        ) from None


def hex_to_text(text: str, settings: SettingsLike = None) -> str:
    """Convert formatted hex to text.

    Raises :class:`MalformedHexError`, :class:`InvalidSequenceError` or
    :class:`EncodingError`; never returns partial output.
    """
    s = normalize_settings(settings)
    return bytes_to_text(parse_hex_tokens(text, s), s.encoding)


# ---------------- Result-returning boundary ----------------
def encode(text: str, settings: SettingsLike = None) -> ConversionResult:
    try:
        return ConversionResult.success(text_to_hex(text, settings))
    except ConversionError as exc:
        logger.debug("encode failed: %s", exc)
        return ConversionResult.failure(exc)


def decode(text: str, settings: SettingsLike = None) -> ConversionResult:
    try:
        return ConversionResult.success(hex_to_text(text, settings))
    except ConversionError as exc:
        logger.debug("decode failed: %s", exc)
        return ConversionResult.failure(exc)


def convert(
    text: str,
    mode: ConversionMode | str,
    settings: SettingsLike = None,
) -> ConversionResult:
    """Route to :func:`encode` or :func:`decode` with normalized settings."""
    s = normalize_settings(settings)
    if ConversionMode.parse(mode) is ConversionMode.TEXT_TO_HEX:
        return encode(text, s)
    return decode(text, s)


def is_hex_like(text: str, settings: SettingsLike = None) -> bool:
    """Best-effort check that ``text`` is non-empty, structurally valid hex."""
    try:
        return bool(text and text.strip()) and bool(parse_hex_tokens(text, settings))
    except (ValueError, TypeError, AttributeError):
        return False
