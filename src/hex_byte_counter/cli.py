# hex_byte_counter/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .logic import HEX_MIN_DIGITS, count_hex_bytes, format_byte_count

logger = logging.getLogger(__name__)

SUBCOMMANDS = ("count", "file")


# ---------- helpers ----------
def _render(count: int, fmt: str) -> str:
    if fmt == "dec":
        return str(count)
    if fmt == "hex":
        return f"0x{count:0{HEX_MIN_DIGITS}x}"
    return format_byte_count(count)

def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------- subcommands ----------
def cmd_count(args: argparse.Namespace) -> int:
    src = args.text if args.text is not None else sys.stdin.read()
    count = count_hex_bytes(src)
    logger.debug("counted %d byte(s) in %d character(s)", count, len(src))
    print(_render(count, args.format))
    return 0


def cmd_file(args: argparse.Namespace) -> int:
    status = 0
    show_names = len(args.paths) > 1
    for path in args.paths:
        try:
            text = Path(path).read_text(encoding=args.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            status = 1
            continue

        count = count_hex_bytes(text)
        logger.debug("%s: counted %d byte(s)", path, count)
        out = _render(count, args.format)
        print(f"{path}: {out}" if show_names else out)
    return status


# ---------- parser ----------
def _add_format_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format", choices=("status", "dec", "hex"), default="status",
        help="output style: 'Bytes: N (0xHH)', bare decimal or bare hex (default: status)"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hex-byte-counter",
        description="Count the hex bytes in source-like text (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")

    sp = p.add_subparsers(dest="cmd")

    # count
    pc = sp.add_parser("count", help="count hex bytes in TEXT (or stdin)")
    pc.add_argument("text", nargs="?", help="text like '0xDE, 0xAD' or 'DEADBEEF'")
    _add_format_arg(pc)
    pc.set_defaults(func=cmd_count)

    # file
    pf = sp.add_parser("file", help="count hex bytes in one or more files")
    pf.add_argument("paths", nargs="+", help="files to read")
    pf.add_argument("--encoding", default="utf-8", help="file encoding (default: utf-8)")
    _add_format_arg(pf)
    pf.set_defaults(func=cmd_file)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Convenience: `hex-byte-counter "AA BB"` is treated as the `count` subcommand.
    if argv and argv[0] not in SUBCOMMANDS and not argv[0].startswith("-"):
        argv = ["count"] + argv

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
