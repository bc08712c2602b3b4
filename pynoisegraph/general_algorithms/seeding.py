"""
Seed handling for PyNoiseGraph.

Seeds are unsigned 32-bit integers. Composite nodes (fractals, turbulence)
derive the seeds of the nodes they own from their own seed and the index of
the owned node, through a freshly constructed seeded sequence. A derived seed
therefore never depends on how many siblings exist or on construction order.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def normalize_seed(seed) -> int:
    """Reduce any integer to the unsigned 32-bit seed range."""
    return int(seed) & cte.SEED_MASK


def derive_seed(seed: int, index: int) -> int:
    """
    Derive the seed of the index-th owned node from its owner's seed.

    Args:
        seed: Seed of the owning node
        index: Position of the owned node (layer or distorter index)

    Returns:
        int: Unsigned 32-bit seed, a pure function of (seed, index)
    """
    sequence = np.random.SeedSequence(normalize_seed(seed), spawn_key=(int(index),))
    return int(sequence.generate_state(1, dtype=np.uint32)[0])
