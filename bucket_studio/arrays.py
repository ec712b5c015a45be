import re

import numpy as np

from .settings import ARRAY_SIZE, MIN_VALUE
from .steps import DOMAIN_SIZE


def random_values(size=ARRAY_SIZE, seed=None) -> list:
    """Fresh input for a reset: `size` ints drawn from [MIN_VALUE, DOMAIN_SIZE)."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    rng = np.random.default_rng(seed)
    return rng.integers(MIN_VALUE, DOMAIN_SIZE, size=size).tolist()


def parse_values(text: str) -> list:
    """Parse '5, 25 45' style input into a list of ints."""
    out = []
    for tok in re.split(r"[\s,]+", text.strip()):
        if not tok: continue
        try:
            out.append(int(tok))
        except ValueError:
            raise ValueError(f"not an integer: {tok!r}") from None
    return out
