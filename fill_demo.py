"""Demonstration entry point for the seeded random fill.

Fills three fixed containers and prints each one as a bracketed line on
standard output. Takes no command-line arguments.
"""

from __future__ import annotations

import logging
import os
import sys
from array import array
from dataclasses import dataclass, field

import numpy as np

from rng_fill import fill_random
from sequence_format import print_sequence

logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    log_level: str = field(default_factory=lambda: os.getenv("RNG_FILL_LOG_LEVEL", "WARNING"))


def main(config: DemoConfig | None = None) -> int:
    config = config or DemoConfig()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # list of ints
    numbers = [0] * 10
    fill_random(numbers, 1, 10, seed=42)
    print_sequence(numbers)

    # fixed-width ints
    fixed = array("i", [0] * 10)
    fill_random(fixed, 1, 10, seed=43)
    print_sequence(fixed)

    # single float32, default seed
    single = np.zeros(1, dtype=np.float32)
    fill_random(single, 1, 100)
    print_sequence(single)

    logger.debug("Demo finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
