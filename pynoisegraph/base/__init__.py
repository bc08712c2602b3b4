"""
Base classes of PyNoiseGraph nodes.

- NoiseFn: evaluation contract (get, get_many, transformed, scaled)
- Seedable: seed capability (seed, with_seed)

Author: B.G.
"""

from .noise_fn import NoiseFn, Seedable

__all__ = ["NoiseFn", "Seedable"]
