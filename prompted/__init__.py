"""Prompt, flush and read-a-line helpers for interactive console programs."""

from .errors import PromptDecodeError, PromptError, PromptIOError
from .io import ConsoleIO
from .streams import (
    ask,
    eflush,
    eprompt,
    flush,
    input_line,
    prompt,
    prompt_to,
    read_line,
    read_line_from,
    strip_line_ending,
    try_flush,
)

__version__ = "0.3.0"

__all__ = [
    "ConsoleIO",
    "PromptDecodeError",
    "PromptError",
    "PromptIOError",
    "__version__",
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
