"""Console I/O object for interactive prompted programs."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .output import colorize
from .streams import flush_or_exit, read_line, write_or_exit

ColorizeFn = Callable[[str, str, bool], str]


@dataclass
class ConsoleIO:
    """Encapsulates console input/output behaviour.

    Streams left as ``None`` resolve to the process streams at call time.
    Every write is followed by a flush, and stream failures end the process
    the same way the module-level helpers do.
    """

    use_color: bool = False
    colorize_fn: ColorizeFn = colorize
    stdin: Optional[TextIO] = None
    stdout: Optional[TextIO] = None
    stderr: Optional[TextIO] = None

    @property
    def out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    def _apply_color(self, text: str, color: Optional[str]) -> str:
        if color:
            return self.colorize_fn(text, color, self.use_color)
        return text

    def write(self, text: str, *, color: Optional[str] = None) -> None:
        """Write ``text`` to stdout as-is and flush."""
        write_or_exit(self.out, "stdout", self._apply_color(text, color))

    def print(self, text: str = "", *, color: Optional[str] = None) -> None:
        """Print a single line to stdout."""
        self.write(self._apply_color(text, color) + "\n")

    def error(self, text: str) -> None:
        write_or_exit(self.err, "stderr", text + "\n")

    def flush(self) -> None:
        flush_or_exit(self.out, "stdout")

    def read_raw(self) -> str:
        """Read one line keeping its ending; ``""`` means end of input."""
        stream = self.stdin if self.stdin is not None else sys.stdin
        try:
            return stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SystemExit(f"Failed to read stdin: {exc}") from exc

    def prompt(self, prompt_text: str, *, color: Optional[str] = None) -> str:
        """Show ``prompt_text``, then read a line without its ending."""
        self.write(prompt_text, color=color)
        return read_line(self.stdin)

    def prompt_raw(self, prompt_text: str, *, color: Optional[str] = None) -> str:
        """Like ``prompt`` but keeps the ending so end of input is visible."""
        self.write(prompt_text, color=color)
        return self.read_raw()

    def confirm(self, prompt_text: str, *, color: Optional[str] = None) -> bool:
        """Ask for Y/N style confirmation."""
        response = self.prompt(prompt_text, color=color).strip().lower()
        return response in {"y", "yes"}


__all__ = ["ColorizeFn", "ConsoleIO"]
