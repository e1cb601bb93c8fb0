"""Shared text decoration helpers for the prompted demos."""

from __future__ import annotations

BOX_WIDTH = 40

COLOR_CODES = {
    "red": "\033[0;31m",
    "green": "\033[0;32m",
    "yellow": "\033[1;33m",
    "cyan": "\033[0;36m",
    "white": "\033[1;37m",
    "gray": "\033[0;90m",
    "reset": "\033[0m",
}


def colorize(text: str, color: str, enabled: bool) -> str:
    if not enabled or color not in COLOR_CODES:
        return text
    return f"{COLOR_CODES[color]}{text}{COLOR_CODES['reset']}"


def _box_line(left: str, fill: str, right: str) -> str:
    return f"{left}{fill * BOX_WIDTH}{right}"


def box(title: str) -> str:
    """Frame ``title`` in a three-line box."""
    content = f" {title.strip()} ".ljust(BOX_WIDTH)
    return "\n".join(
        (
            _box_line("╔", "═", "╗"),
            f"║{content}║",
            _box_line("╚", "═", "╝"),
        )
    )


def render_phase(index: int, name: str) -> str:
    return f"{index}: {name}"


__all__ = ["BOX_WIDTH", "COLOR_CODES", "box", "colorize", "render_phase"]
