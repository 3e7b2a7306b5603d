import io

import pytest

from hex_text_converter import __version__
from hex_text_converter.cli import build_parser, main


def test_encode_default_format(capsys):
    assert main(["encode", "Hi"]) == 0
    assert capsys.readouterr().out == "48 69\n"


def test_encode_with_options(capsys):
    assert main(["encode", "Hi", "-d", ",", "-p", "0x", "--lower"]) == 0
    assert capsys.readouterr().out == "0x48,0x69\n"


def test_encode_empty_delimiter(capsys):
    assert main(["encode", "Hi", "--delimiter", ""]) == 0
    assert capsys.readouterr().out == "4869\n"


def test_encode_ascii_error(capsys):
    assert main(["encode", "é", "-e", "ascii"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert "not valid ASCII" in captured.err


def test_decode(capsys):
    assert main(["decode", "0x41 0x42", "-p", "0x"]) == 0
    assert capsys.readouterr().out == "AB\n"


@pytest.mark.parametrize("bad", ["4", "zz", "C3 28"])
def test_decode_errors(capsys, bad):
    assert main(["decode", bad]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_reads_stdin_when_no_argument(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hi\n"))
    assert main(["encode"]) == 0
    assert capsys.readouterr().out == "48 69\n"


@pytest.mark.parametrize("src,code,out", [("41 42", 0, "hex\n"), ("hello", 1, "not hex\n")])
def test_check(capsys, src, code, out):
    assert main(["check", src]) == code
    assert capsys.readouterr().out == out


def test_unknown_encoding_is_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        main(["encode", "x", "-e", "latin-1"])
    assert info.value.code == 2


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--version"])
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize("opts", [["-d", "0"], ["-p", " 0x"], ["-p", "4"]])
def test_ambiguous_format_is_usage_error(capsys, opts):
    with pytest.raises(SystemExit) as info:
        main(["decode", "41 42", *opts])
    assert info.value.code == 2
    assert "may not" in capsys.readouterr().err
