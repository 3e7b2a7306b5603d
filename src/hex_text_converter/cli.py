# hex_text_converter/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import __version__
from .logic import ConversionResult, convert, is_hex_like
from .settings import ENCODINGS, ConversionMode, ConverterSettings, canonical_encoding

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _read_input(value: str | None) -> str:
    if value is not None:
        return value
    # Drop the single trailing newline most shells and pipes add
    data = sys.stdin.read()
    return data[:-1] if data.endswith("\n") else data

def _settings_from_args(args: argparse.Namespace) -> ConverterSettings:
    return ConverterSettings(
        delimiter=args.delimiter,
        prefix=args.prefix,
        uppercase=not args.lower,
        encoding=args.encoding,
        live_mode=False,
    )

def _emit(result: ConversionResult) -> int:
    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    print(result.text)
    return 0


# ---------- subcommands ----------
def cmd_encode(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    logger.debug("encode with %s", settings)
    return _emit(convert(_read_input(args.text), ConversionMode.TEXT_TO_HEX, settings))


def cmd_decode(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    logger.debug("decode with %s", settings)
    return _emit(convert(_read_input(args.hex), ConversionMode.HEX_TO_TEXT, settings))


def cmd_check(args: argparse.Namespace) -> int:
    ok = is_hex_like(_read_input(args.hex), _settings_from_args(args))
    print("hex" if ok else "not hex")
    return 0 if ok else 1


# ---------- parser ----------
def _add_format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-d", "--delimiter", default=" ",
        help="separator between byte-pairs (default: a space; '' for none)"
    )
    p.add_argument(
        "-p", "--prefix", default="",
        help="prefix attached to every byte-pair, e.g. 0x (default: none)"
    )
    p.add_argument(
        "--lower", action="store_true",
        help="emit lower-case hex digits (decoding is case-insensitive)"
    )
    p.add_argument(
        "-e", "--encoding", type=canonical_encoding, default="UTF-8",
        metavar="{" + ",".join(ENCODINGS) + "}",
        help="text encoding (default: UTF-8)"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hex-text",
        description="Text ⇆ Hex Converter (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sp = p.add_subparsers(dest="cmd")

    pe = sp.add_parser("encode", help="convert text → hex")
    pe.add_argument("text", nargs="?", help="text to encode (default: read stdin)")
    _add_format_args(pe)
    pe.set_defaults(func=cmd_encode)

    pd = sp.add_parser("decode", help="convert hex → text")
    pd.add_argument("hex", nargs="?", help="hex like '48 69' or '0x48,0x69' (default: read stdin)")
    _add_format_args(pd)
    pd.set_defaults(func=cmd_decode)

    pc = sp.add_parser("check", help="exit 0 if the input looks like hex")
    pc.add_argument("hex", nargs="?", help="candidate hex (default: read stdin)")
    _add_format_args(pc)
    pc.set_defaults(func=cmd_check)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        _settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
