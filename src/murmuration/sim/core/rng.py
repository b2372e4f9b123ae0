from __future__ import annotations

import random
from typing import Optional


class DeterministicRng:
    def __init__(self, seed: Optional[int]):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``, both ends inclusive."""
        return self._random.randint(low, high)
