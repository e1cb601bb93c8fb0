"""Show the phases of a long-running process on a single line."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, List, Mapping, Sequence, Tuple, Union

from prompted.io import ConsoleIO
from prompted.output import render_phase

logger = logging.getLogger(__name__)

Phase = Tuple[str, float]


def parse_phases(raw: Iterable[Union[Mapping[str, object], Sequence[object]]]) -> List[Phase]:
    """Accept ``{"name": ..., "seconds": ...}`` mappings or ``(name, seconds)`` pairs."""
    phases: List[Phase] = []
    for item in raw:
        if isinstance(item, Mapping):
            name, seconds = item.get("name"), item.get("seconds", 0)
        else:
            name, seconds = item
        if not name:
            raise ValueError(f"phase without a name: {item!r}")
        phases.append((str(name), float(seconds)))
    return phases


def run(
    io: ConsoleIO,
    phases: Sequence[Phase],
    sleep: Callable[[float], None] = time.sleep,
) -> List[str]:
    shown: List[str] = []
    last_len = 0
    for index, (name, seconds) in enumerate(phases, start=1):
        message = render_phase(index, name)
        # blank out the previous phase before drawing over it
        io.write(" " * last_len)
        io.write(f"\r{message}")
        logger.debug("phase %s for %.2fs", name, seconds)
        sleep(seconds)
        last_len = len(message)
        io.write("\r")
        shown.append(name)
    io.print()
    return shown
