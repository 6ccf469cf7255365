"""
Uniform random source shared by palette generation and clustering.
Pass a seed (or a RandomSource) anywhere an ``rng`` argument is accepted to get
reproducible palettes.
"""
import numpy as np


class RandomSource:
    """Thin wrapper around a numpy Generator exposing the draws we need."""

    def __init__(self, seed=None):
        self._rng = np.random.default_rng(seed)

    def next_float(self):
        """Uniform float in [0, 1)."""
        return float(self._rng.random())

    def next_int(self, n):
        """Uniform integer in [0, n)."""
        if n < 1:
            raise ValueError(f"next_int needs n >= 1, got {n}")
        return int(self._rng.integers(n))

    def choice(self, sequence):
        return sequence[self.next_int(len(sequence))]

    def sample_indices(self, population, k):
        """k distinct indices from range(population)."""
        return [int(i) for i in self._rng.choice(population, size=k, replace=False)]

    def shuffled(self, sequence):
        items = list(sequence)
        order = self._rng.permutation(len(items))
        return [items[i] for i in order]


def resolve_rng(rng=None):
    """Accept None, an int seed, or anything with the RandomSource interface."""
    if rng is None or isinstance(rng, (int, np.integer)):
        return RandomSource(rng)
    return rng
