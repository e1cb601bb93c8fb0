"""Number guessing game."""

from __future__ import annotations

import logging
import random
from typing import Optional

from prompted.io import ConsoleIO
from prompted.output import box
from prompted.streams import strip_line_ending

logger = logging.getLogger(__name__)


def run(io: ConsoleIO, upper: int = 100, rng: Optional[random.Random] = None) -> Optional[int]:
    """Play until the secret is found.

    Returns the number of numeric guesses it took, or ``None`` if input ran
    out first. Lines that are not positive whole numbers are skipped silently.
    """
    if upper < 1:
        raise ValueError(f"upper must be at least 1, got {upper}")
    rng = rng or random.Random()
    secret = rng.randint(1, upper)
    logger.debug("secret number chosen in 1..%d", upper)

    io.print(box("Guess the number!"), color="cyan")
    attempts = 0
    while True:
        raw = io.prompt_raw(f"Please input your guess (1-{upper}): ", color="white")
        if raw == "":
            io.print()
            io.print("No more input.", color="gray")
            return None
        try:
            guess = int(strip_line_ending(raw).strip())
        except ValueError:
            continue
        if guess < 1:
            continue
        attempts += 1

        io.print(f"You guessed: {guess}")
        if guess < secret:
            io.print("Too small!", color="yellow")
        elif guess > secret:
            io.print("Too big!", color="yellow")
        else:
            io.print("You win!", color="green")
            return attempts
