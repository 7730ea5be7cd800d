import math
import random
from typing import Optional, Protocol, Tuple

from .config import MAX_ZERO_DRAWS
from .validators import require_positive


class UniformSource(Protocol):
    """Anything with a ``random()`` returning a float in [0, 1); random.Random fits."""

    def random(self) -> float:
        ...


def make_source(seed: Optional[int] = None) -> UniformSource:
    return random.Random(seed)

def draw_open_unit(rng: UniformSource) -> float:
    """
    Draw R from (0, 1). Exact zeros are redrawn so that ln(R) stays finite.
    """
    for _ in range(MAX_ZERO_DRAWS):
        u = rng.random()
        if u > 0.0:
            return u
    raise RuntimeError(f"uniform source returned 0.0 {MAX_ZERO_DRAWS} times in a row")

def sample_exponential(rate: float, rng: UniformSource) -> Tuple[float, float]:
    """
    Inverse-transform sample of Exp(rate).
    Returns: (R, value) with value = -ln(R) / rate; mean = 1/rate.
    R is kept for traceability (the random-number column of the run table).
    """
    require_positive("rate", rate)
    r = draw_open_unit(rng)
    return r, -math.log(r) / rate
