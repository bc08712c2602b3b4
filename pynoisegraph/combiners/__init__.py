"""
Combiner nodes for PyNoiseGraph.

Author: B.G.
"""

from .combiners import OPERATIONS, Add, Combiner, Max, Min, Multiply, Power

__all__ = ["OPERATIONS", "Add", "Combiner", "Max", "Min", "Multiply", "Power"]
