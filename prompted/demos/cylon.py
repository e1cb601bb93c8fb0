"""ASCII-art "Cylon" eye bouncing back and forth on one terminal line."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator, Optional

from prompted.io import ConsoleIO

logger = logging.getLogger(__name__)

MIN_WIDTH = 2


def frames(width: int) -> Iterator[str]:
    """Yield successive frames of a ``*`` sweeping across ``width`` cells."""
    if width < MIN_WIDTH:
        raise ValueError(f"width must be at least {MIN_WIDTH}, got {width}")
    cells = [" "] * width
    cells[0] = "*"
    position = 0
    direction = -1
    while True:
        cells[position] = " "
        if position == 0 or position == width - 1:
            direction = -direction
        position += direction
        cells[position] = "*"
        yield "".join(cells)


def run(
    io: ConsoleIO,
    width: int = 7,
    delay: float = 0.1,
    cycles: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Draw frames until ``cycles`` have been shown, or forever if ``None``."""
    logger.debug("cylon width=%d delay=%.3f cycles=%s", width, delay, cycles)
    shown = 0
    for frame in frames(width):
        if cycles is not None and shown >= cycles:
            break
        io.write(f"{frame}\r")
        shown += 1
        sleep(delay)
    return shown
