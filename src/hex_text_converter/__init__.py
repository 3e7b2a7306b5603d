# hex_text_converter/__init__.py

"""Hex Text Converter package.

Re-exports the conversion engine for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    DIST_NAME,
    BUNDLE_ID,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
)

from .settings import (
    ASCII,
    ENCODINGS,
    UTF8,
    ConversionMode,
    ConverterSettings,
    canonical_encoding,
    normalize_settings,
)

from .logic import (
    ConversionError,
    ConversionResult,
    EncodingError,
    ErrorKind,
    InvalidSequenceError,
    MalformedHexError,
    convert,
    decode,
    encode,
    hex_to_text,
    is_hex_like,
    parse_hex_tokens,
    text_to_hex,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "DIST_NAME", "BUNDLE_ID",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR",
    # Settings
    "ASCII", "ENCODINGS", "UTF8",
    "ConversionMode", "ConverterSettings", "canonical_encoding", "normalize_settings",
    # Engine
    "ConversionError", "ConversionResult", "EncodingError", "ErrorKind",
    "InvalidSequenceError", "MalformedHexError",
    "convert", "decode", "encode", "hex_to_text", "is_hex_like",
    "parse_hex_tokens", "text_to_hex",
]
