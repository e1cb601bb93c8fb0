"""Command line entry point running the prompted demos."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Any, Dict, Optional, Sequence

from prompted import __version__
from prompted.config import PromptSettings, configure_logging, load_demo_config
from prompted.demos import cylon, guess, phases
from prompted.errors import PromptError
from prompted.io import ConsoleIO
from prompted.output import colorize
from prompted.streams import ask

logger = logging.getLogger("prompted")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def positive_int(value: str) -> int:
    ivalue = int(value)
    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"Invalid value: {value}. Must be a positive integer.")
    return ivalue


def cylon_width(value: str) -> int:
    ivalue = int(value)
    if ivalue < cylon.MIN_WIDTH:
        raise argparse.ArgumentTypeError(f"Invalid value: {value}. Width must be at least {cylon.MIN_WIDTH}.")
    return ivalue


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="prompted", description="Prompt-and-read demos")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level (default from PROMPTED_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    cylon_parser = subparsers.add_parser("cylon", help="Bounce a Cylon eye across one line")
    cylon_parser.add_argument("--width", type=cylon_width, help="Width of the field")
    cylon_parser.add_argument("--delay", type=float, help="Seconds between frames")
    cylon_parser.add_argument("--cycles", type=positive_int, help="Stop after this many frames (default: forever)")

    guess_parser = subparsers.add_parser("guess", help="Play the number guessing game")
    guess_parser.add_argument("--upper", type=positive_int, help="Largest possible secret number")
    guess_parser.add_argument("--seed", type=int, help="Seed for the secret number")

    subparsers.add_parser("phases", help="Show the phases of a simulated process")

    ask_parser = subparsers.add_parser("ask", help="Prompt once and echo the line read from stdin")
    ask_parser.add_argument("message", help="Prompt text")
    ask_parser.add_argument("--encoding", help="Encoding of stdin bytes (default from PROMPTED_ENCODING)")

    return parser.parse_args(argv)


def _run_ask(io: ConsoleIO, message: str, encoding: str) -> None:
    stdin = io.stdin if io.stdin is not None else sys.stdin
    source = getattr(stdin, "buffer", None)
    if source is None:
        io.error("ask needs a byte-level stdin; got a text-only stream")
        sys.exit(1)
    try:
        answer = ask(io.out, source, message, encoding=encoding)
    except PromptError as exc:
        logger.debug("ask failed", exc_info=exc)
        io.error(str(exc))
        sys.exit(1)
    io.print(answer)


def run_command(args: argparse.Namespace, settings: PromptSettings, io: ConsoleIO) -> None:
    demo_config: Dict[str, Any] = load_demo_config(settings.demo_config_path)

    if args.command == "cylon":
        cfg = demo_config.get("cylon", {}) or {}
        width = args.width or int(cfg.get("width", 7))
        if width < cylon.MIN_WIDTH:
            io.error(f"cylon width must be at least {cylon.MIN_WIDTH}, got {width}")
            sys.exit(2)
        cylon.run(
            io,
            width=width,
            delay=args.delay if args.delay is not None else float(cfg.get("delay", 0.1)),
            cycles=args.cycles,
        )
        io.print()
    elif args.command == "guess":
        cfg = demo_config.get("guess", {}) or {}
        rng = random.Random(args.seed) if args.seed is not None else None
        guess.run(io, upper=args.upper or int(cfg.get("upper", 100)), rng=rng)
    elif args.command == "phases":
        phases.run(io, phases.parse_phases(demo_config.get("phases", []) or []))
    elif args.command == "ask":
        _run_ask(io, args.message, args.encoding or settings.encoding)


def main(argv: Optional[Sequence[str]] = None, io: Optional[ConsoleIO] = None) -> None:
    args = parse_cli_args(argv)
    settings = PromptSettings.load()
    configure_logging(args.log_level or settings.log_level)
    io = io or ConsoleIO(use_color=settings.use_color(), colorize_fn=colorize)
    logger.debug("running %s", args.command)

    try:
        run_command(args, settings, io)
    except KeyboardInterrupt:  # pragma: no cover - interactive path
        io.print()
        sys.exit(130)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
