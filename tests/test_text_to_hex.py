import pytest

from hex_text_converter.logic import EncodingError


@pytest.mark.parametrize(
    "text,opts,expected",
    [
        ("", {}, ""),
        ("A", {"delimiter": " ", "prefix": "0x", "uppercase": True}, "0x41"),
        ("AB", {"delimiter": " ", "prefix": "0x"}, "0x41 0x42"),
        ("Hi", {}, "48 69"),
        ("Hi", {"delimiter": ""}, "4869"),
        ("Hi", {"delimiter": ", "}, "48, 69"),
        ("\n\x00", {"delimiter": ":"}, "0A:00"),
        ("ÿ", {"uppercase": False}, "c3 bf"),
        ("é", {}, "C3 A9"),
        ("€", {"prefix": "\\x", "delimiter": ""}, "\\xE2\\x82\\xAC"),
        ("😀", {}, "F0 9F 98 80"),
    ],
)
def test_text_to_hex_ok(logic, settings, text, opts, expected):
    assert logic.text_to_hex(text, settings(**opts)) == expected


def test_prefix_is_per_byte_not_per_string(logic, settings):
    out = logic.text_to_hex("abc", settings(prefix="0x", delimiter=","))
    assert out.count("0x") == 3


def test_prefix_case_untouched_by_lowercase(logic, settings):
    assert logic.text_to_hex("J", settings(prefix="0X", uppercase=False)) == "0X4a"


def test_text_to_hex_accepts_mapping(logic):
    assert logic.text_to_hex("A", {"delimiter": None, "prefix": None}) == "41"


def test_ascii_rejects_non_ascii(logic, settings):
    with pytest.raises(EncodingError) as info:
        logic.text_to_hex("café", settings(encoding="ASCII"))
    err = info.value
    assert err.char == "é"
    assert err.index == 3
    assert "é" in str(err)


def test_ascii_accepts_full_7bit_range(logic, settings):
    text = "".join(chr(i) for i in range(0x80))
    out = logic.text_to_hex(text, settings(encoding="ASCII", delimiter=""))
    assert out.endswith("7F")
    assert len(out) == 0x80 * 2


def test_lone_surrogate_is_encoding_error(logic, settings):
    with pytest.raises(EncodingError) as info:
        logic.text_to_hex("a\ud800", settings())
    assert info.value.index == 1


def test_encode_result_success_and_failure(logic, settings):
    ok = logic.encode("é", settings(encoding="UTF-8"))
    assert ok.ok and ok.text == "C3 A9" and ok.error_kind is None

    bad = logic.encode("é", settings(encoding="ASCII"))
    assert not bad.ok
    assert bad.text == ""
    assert bad.error_kind is logic.ErrorKind.ENCODING
    assert "ASCII" in bad.message
