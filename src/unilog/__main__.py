"""
Demo: configure the registry, then log one message at every severity.

    python -m unilog --level demo=Debug --message "hello"
    python -m unilog --config logging.json --escalate
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from unilog.log_config import SINK_KINDS, LogConfig
from unilog.log_exceptions import EscalatedLogError


def parse_level_arg(text: str) -> Dict[str, str]:
    """
    Parse "net=Debug" (or "net=Debug,ui=Off") into {"net": "Debug", ...}.
    """
    levels: Dict[str, str] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, level = item.partition("=")
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f"Malformed level entry: {item!r} (expected NAME=LEVEL)")
        levels[name.strip()] = level.strip()
    return levels


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unilog", description="UniLog named-logger demo")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument(
        "--level",
        action="append",
        default=[],
        type=parse_level_arg,
        metavar="NAME=LEVEL",
        help="Per-logger level (repeatable), e.g. net=Debug",
    )
    parser.add_argument("--default-level", help="Default threshold for new loggers (e.g. Warn)")
    parser.add_argument("--sink", choices=SINK_KINDS, help="Output sink")
    parser.add_argument("--escalate", action="store_true", help="Raise on Error instead of writing")
    parser.add_argument("--logger", default="demo", help="Logger name to emit on")
    parser.add_argument("--message", default="hello from unilog", help="Message text")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    data: Dict[str, Any] = {}
    if args.config:
        with Path(args.config).open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise SystemExit(f"Log config must be a JSON object: {args.config}")

    if args.default_level:
        data["default_level"] = args.default_level
    if args.sink:
        data["sink"] = args.sink
    if args.escalate:
        data["escalate_on_error"] = True
    if args.level:
        levels = dict(data.get("levels") or {})
        for entry in args.level:
            levels.update(entry)
        data["levels"] = levels

    registry = LogConfig.from_dict(data).apply()
    logger = registry.get_logger(args.logger)

    try:
        logger.debug(args.message)
        logger.verbose(args.message)
        logger.info(args.message)
        logger.warn(args.message)
        logger.error(args.message)
    except EscalatedLogError as exc:
        print(f"escalated: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
