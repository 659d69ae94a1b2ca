import math

import numpy as np

BLOCK_SIZE = 1 << 16


class RandomSource:
    """Uniform random numbers backed by a numpy Generator.

    Floats are pulled from the generator in blocks; calling numpy once per
    draw is far too slow for billion-unit budgets.
    """

    def __init__(self, seed=None, block_size=BLOCK_SIZE):
        if isinstance(seed, np.random.Generator):
            self.rng = seed
        else:
            self.rng = np.random.default_rng(seed)
        self.block_size = block_size
        self._block = []
        self._pos = 0

    def random(self):
        if self._pos >= len(self._block):
            self._block = self.rng.random(self.block_size).tolist()
            self._pos = 0
        value = self._block[self._pos]
        self._pos += 1
        return value

    def randint(self, low, high):
        # Upper bound is exclusive
        low = math.ceil(low)
        high = math.floor(high)
        return math.floor(self.random() * (high - low) + low)

    def index(self, n):
        return math.floor(self.random() * n)

    def spawn(self, n):
        return [RandomSource(child, self.block_size) for child in self.rng.spawn(n)]
