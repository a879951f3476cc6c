
"""Uniform piece randomizer"""
import random
from typing import Optional, Sequence


class UniformRandom:
    """Independent, uniform draw over the catalog on every call.

    There is no bag and no repeat rejection: the same variant may come up
    any number of times in a row.
    """
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def choice(self, ids: Sequence[str]) -> str:
        return ids[self._random.randrange(len(ids))]

    def next_variant(self) -> str:
        from ledtris_piece import VARIANT_IDS
        return self.choice(VARIANT_IDS)
