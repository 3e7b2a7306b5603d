import pytest

from hex_text_converter.settings import (
    ConversionMode,
    ConverterSettings,
    canonical_encoding,
    normalize_settings,
)


def test_defaults():
    s = ConverterSettings()
    assert (s.delimiter, s.prefix, s.uppercase, s.encoding, s.live_mode) == (" ", "", True, "UTF-8", True)


def test_settings_are_immutable():
    s = ConverterSettings()
    with pytest.raises(AttributeError):
        s.delimiter = ","


@pytest.mark.parametrize(
    "name,expected",
    [("UTF-8", "UTF-8"), ("utf8", "UTF-8"), ("Utf_8", "UTF-8"), (None, "UTF-8"),
     ("ASCII", "ASCII"), ("ascii", "ASCII"), ("US-ASCII", "ASCII")],
)
def test_canonical_encoding(name, expected):
    assert canonical_encoding(name) == expected


@pytest.mark.parametrize("bad", ["latin-1", "utf-16", ""])
def test_unsupported_encoding(bad):
    with pytest.raises(ValueError):
        ConverterSettings(encoding=bad)


def test_normalize_fills_missing_fields():
    s = normalize_settings({})
    assert s.delimiter == ""
    assert s.prefix == ""
    assert s.uppercase is True
    assert s.encoding == "UTF-8"


def test_normalize_none_and_camel_case():
    s = normalize_settings({"delimiter": None, "prefix": "0x", "liveMode": False, "encoding": "ascii"})
    assert s == ConverterSettings(delimiter="", prefix="0x", encoding="ASCII", live_mode=False)
    assert normalize_settings(None) == ConverterSettings(delimiter="")


def test_normalize_overrides_and_replace():
    base = ConverterSettings(prefix="0x")
    assert normalize_settings(base, delimiter=",").delimiter == ","
    assert base.replace(uppercase=False) == ConverterSettings(prefix="0x", uppercase=False)
    assert base.prefix == "0x"


def test_normalize_rejects_unknown_keys():
    with pytest.raises(ValueError, match="sep"):
        normalize_settings({"sep": ","})


@pytest.mark.parametrize(
    "value,expected",
    [
        (ConversionMode.HEX_TO_TEXT, ConversionMode.HEX_TO_TEXT),
        ("TEXT_TO_HEX", ConversionMode.TEXT_TO_HEX),
        ("hex-to-text", ConversionMode.HEX_TO_TEXT),
        ("STRING_TO_HEX", ConversionMode.TEXT_TO_HEX),
        ("HEX_TO_STRING", ConversionMode.HEX_TO_TEXT),
    ],
)
def test_mode_parse(value, expected):
    assert ConversionMode.parse(value) is expected


def test_mode_parse_unknown():
    with pytest.raises(ValueError):
        ConversionMode.parse("sideways")


def test_mode_swapped():
    assert ConversionMode.TEXT_TO_HEX.swapped() is ConversionMode.HEX_TO_TEXT
    assert ConversionMode.HEX_TO_TEXT.swapped() is ConversionMode.TEXT_TO_HEX


def test_convert_routes_by_mode(logic):
    s = ConverterSettings(prefix="0x")
    assert logic.convert("A", ConversionMode.TEXT_TO_HEX, s).text == "0x41"
    assert logic.convert("0x41", "HEX_TO_TEXT", s).text == "A"


def test_convert_with_mapping_settings(logic):
    # an absent delimiter is treated as empty
    assert logic.convert("AB", "TEXT_TO_HEX", {"prefix": "0x"}).text == "0x410x42"
    assert logic.convert("0x410x42", "HEX_TO_TEXT", {"prefix": "0x"}).text == "AB"


def test_convert_returns_classified_errors(logic):
    s = ConverterSettings(encoding="ASCII")
    assert logic.convert("é", "TEXT_TO_HEX", s).error_kind is logic.ErrorKind.ENCODING
    assert logic.convert("zz", "HEX_TO_TEXT", s).error_kind is logic.ErrorKind.MALFORMED_HEX
    assert logic.convert("C3", "HEX_TO_TEXT").error_kind is logic.ErrorKind.INVALID_SEQUENCE


def test_engine_ignores_live_mode(logic):
    on = ConverterSettings(live_mode=True)
    off = ConverterSettings(live_mode=False)
    assert logic.encode("xyz", on) == logic.encode("xyz", off)


@pytest.mark.parametrize("raw,expected", [
    ("false", False), ("False", False), (" no ", False), ("0", False), ("off", False), (0, False), (False, False),
    ("true", True), ("YES", True), ("1", True), ("on", True), (1, True), (True, True), (None, True),
])
def test_flags_parse_strings(raw, expected):
    s = normalize_settings({"uppercase": raw, "liveMode": raw})
    assert s.uppercase is expected
    assert s.live_mode is expected


@pytest.mark.parametrize("raw", ["maybe", "", 2, 0.5, []])
def test_unparseable_flag_raises(raw):
    with pytest.raises(ValueError, match="uppercase"):
        normalize_settings(uppercase=raw)


def test_string_false_gives_lowercase_output(logic):
    assert logic.text_to_hex("\xff", {"uppercase": "false"}) == "c3 bf"


@pytest.mark.parametrize("delimiter,prefix", [
    ("0", ""),          # delimiter would split "40" apart
    ("a", ""),
    (" ", " 0x"),       # prefix with whitespace is lost to trimming
    ("", "0 x"),
    (" ", "4"),         # all-hex prefix eats the first digit of "41"
    ("", "ab"),
    ("x", "0x"),        # delimiter inside prefix
])
def test_ambiguous_formats_are_rejected(delimiter, prefix):
    with pytest.raises(ValueError):
        ConverterSettings(delimiter=delimiter, prefix=prefix)
    with pytest.raises(ValueError):
        normalize_settings({"delimiter": delimiter, "prefix": prefix})


@pytest.mark.parametrize("delimiter,prefix", [
    (" ", "0x"), ("", "\\x"), ("\n", "#"), (", ", "0x"), ("::", ""), ("-", "U+"),
])
def test_unambiguous_formats_are_accepted(delimiter, prefix):
    s = ConverterSettings(delimiter=delimiter, prefix=prefix)
    assert (s.delimiter, s.prefix) == (delimiter, prefix)


def test_rejected_format_leaves_settings_unchanged():
    s = ConverterSettings(prefix="0x")
    with pytest.raises(ValueError):
        s.replace(prefix="4")
    assert s.prefix == "0x"


def test_is_hex_like_false_for_ambiguous_settings(logic):
    assert logic.is_hex_like("41 42", {"prefix": "4"}) is False
