# humanesort/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from humanesort.config import apply_env_overrides, load_config, validate_config
from humanesort.errors import NumericTokenError
from humanesort.order import humane_sorted

_LOGGER = logging.getLogger("humanesort.cli")


def _read_lines(paths: Sequence[str], stdin: TextIO) -> List[str]:
    lines: List[str] = []
    if not paths:
        lines.extend(ln.rstrip("\r\n") for ln in stdin)
        return lines
    for p in paths:
        if p == "-":
            lines.extend(ln.rstrip("\r\n") for ln in stdin)
            continue
        with open(p, "r", encoding="utf-8") as f:
            lines.extend(ln.rstrip("\r\n") for ln in f)
    return lines


def _write_lines(lines: Iterable[str], out: TextIO) -> None:
    for ln in lines:
        out.write(ln)
        out.write("\n")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="humanesort",
        description="Sort lines so that embedded numbers compare by value (file2 < file10).",
    )
    ap.add_argument("files", nargs="*", help="Input files ('-' or none reads stdin).")
    ap.add_argument("-r", "--reverse", action="store_true", default=None, help="Descending order.")
    ap.add_argument("-u", "--unique", action="store_true", default=None,
                    help="Drop exact-duplicate lines (keeps the first).")
    ap.add_argument("--config", type=str, default="configs/default.yaml",
                    help="YAML config; missing file means defaults.")
    ap.add_argument("--log-level", type=str, default=None, help="DEBUG|INFO|WARNING|ERROR|CRITICAL")
    return ap


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    cfg = load_config(args.config)
    apply_env_overrides(cfg)
    if args.reverse is not None:
        cfg.cli.reverse = True
    if args.unique is not None:
        cfg.cli.unique = True
    if args.log_level is not None:
        cfg.cli.log_level = args.log_level.strip().upper()
    try:
        validate_config(cfg)
    except ValueError as e:
        ap.error(str(e))

    logging.basicConfig(level=cfg.cli.level(), format="%(levelname)s %(name)s: %(message)s")

    lines = _read_lines(args.files, stdin)
    if cfg.cli.unique:
        lines = list(dict.fromkeys(lines))
    _LOGGER.info("sorting %d lines (u%d numeric runs)", len(lines), cfg.order.numeric_bits)

    try:
        ordered = humane_sorted(lines, reverse=cfg.cli.reverse, cfg=cfg.order)
    except NumericTokenError as e:
        _LOGGER.error("%s", e)
        return 2

    _write_lines(ordered, stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
