"""Prompt, flush and line-reading primitives.

Two policies live side by side here. The *fatal* helpers (``flush``,
``eflush``, ``read_line``, ``prompt``, ``eprompt`` and ``input_line``) are
meant for small interactive scripts: any stream failure ends the process with
a diagnostic via ``SystemExit``. The *checked* helpers (``try_flush``,
``read_line_from``, ``prompt_to`` and ``ask``) raise ``PromptError``
subclasses so the caller decides what to do.

Standard streams are looked up on ``sys`` at call time, so redirecting
``sys.stdout`` or ``sys.stdin`` is always honoured.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, BinaryIO, NoReturn, Optional, TextIO

from .errors import PromptDecodeError, PromptIOError

logger = logging.getLogger(__name__)

LF = b"\n"


def _fail(operation: str, exc: BaseException) -> NoReturn:
    raise SystemExit(f"Failed to {operation}: {exc}") from exc


def _format(message: Optional[str], args: tuple, kwargs: dict) -> Optional[str]:
    if message is not None and (args or kwargs):
        return message.format(*args, **kwargs)
    return message


# ---------------------------------------------------------------------------
# Flush
# ---------------------------------------------------------------------------


def flush_or_exit(stream: TextIO, name: str) -> None:
    try:
        stream.flush()
    except OSError as exc:
        _fail(f"flush {name}", exc)


def flush() -> None:
    """Flush standard output, exiting the process if that fails."""
    flush_or_exit(sys.stdout, "stdout")


def eflush() -> None:
    """Flush standard error, exiting the process if that fails."""
    flush_or_exit(sys.stderr, "stderr")


def try_flush(stream: Any) -> None:
    """Flush ``stream``, raising ``PromptIOError`` on failure."""
    try:
        stream.flush()
    except OSError as exc:
        raise PromptIOError("flush", exc) from exc


# ---------------------------------------------------------------------------
# Line readers
# ---------------------------------------------------------------------------


def strip_line_ending(text: str) -> str:
    """Remove at most one trailing ``\\n`` and then at most one ``\\r``."""
    if text.endswith("\n"):
        text = text[:-1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def read_line(source: Optional[TextIO] = None) -> str:
    """Read one line of text and return it without its line ending.

    ``source`` defaults to standard input. End of input returns whatever was
    read, which may be the empty string. A failing read ends the process.
    """
    stream = sys.stdin if source is None else source
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as exc:
        _fail("read stdin" if source is None else "read input", exc)
    return strip_line_ending(line)


def read_line_from(source: BinaryIO, encoding: str = "utf-8") -> str:
    """Read bytes from ``source`` up to and including the next LF.

    The line ending is kept. Reading stops early when the source is
    exhausted. Read failures raise ``PromptIOError`` and undecodable bytes
    raise ``PromptDecodeError``.
    """
    buf = bytearray()
    while True:
        try:
            chunk = source.read(1)
        except OSError as exc:
            raise PromptIOError("read line", exc) from exc
        if not chunk:
            break
        buf += chunk
        if chunk == LF:
            break
    logger.debug("read %d bytes from %r", len(buf), source)
    try:
        return buf.decode(encoding)
    except UnicodeDecodeError as exc:
        raise PromptDecodeError("decode line", exc, bytes(buf)) from exc


# ---------------------------------------------------------------------------
# Prompt combinators
# ---------------------------------------------------------------------------


def write_or_exit(stream: TextIO, name: str, text: Optional[str]) -> None:
    """Write ``text`` (if any) to ``stream`` and flush, exiting on failure."""
    if text is not None:
        try:
            stream.write(text)
        except OSError as exc:
            _fail(f"write {name}", exc)
    flush_or_exit(stream, name)


def prompt(message: Optional[str] = None, *args: Any, **kwargs: Any) -> None:
    """Print ``message`` on stdout without a newline, then flush.

    Format arguments are applied with ``str.format``. With no message only
    the flush happens.
    """
    write_or_exit(sys.stdout, "stdout", _format(message, args, kwargs))


def eprompt(message: Optional[str] = None, *args: Any, **kwargs: Any) -> None:
    """Same as ``prompt`` but on stderr."""
    write_or_exit(sys.stderr, "stderr", _format(message, args, kwargs))


def input_line(message: Optional[str] = None, *args: Any, **kwargs: Any) -> str:
    """Prompt on stdout, then read a line from stdin without its ending."""
    prompt(message, *args, **kwargs)
    return read_line()


def prompt_to(writer: Any, message: Optional[str] = None, *args: Any, **kwargs: Any) -> None:
    """Write ``message`` to ``writer`` and flush it, raising on failure."""
    text = _format(message, args, kwargs)
    if text is not None:
        try:
            writer.write(text)
        except OSError as exc:
            raise PromptIOError("write prompt", exc) from exc
    try_flush(writer)


def ask(
    writer: Any,
    source: BinaryIO,
    message: Optional[str] = None,
    *args: Any,
    encoding: str = "utf-8",
    **kwargs: Any,
) -> str:
    """Prompt on ``writer`` and read one line from ``source``.

    The returned text has its line ending removed. If writing or flushing
    the prompt fails, nothing is read.
    """
    prompt_to(writer, message, *args, **kwargs)
    return strip_line_ending(read_line_from(source, encoding))


__all__ = [
    "ask",
    "eflush",
    "eprompt",
    "flush",
    "input_line",
    "prompt",
    "prompt_to",
    "read_line",
    "read_line_from",
    "strip_line_ending",
    "try_flush",
]
