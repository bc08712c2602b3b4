"""
Binary combiners for PyNoiseGraph.

A combiner evaluates two sources at the same point and merges the two values
with an arithmetic operation. One generic Combiner carries the operation;
Add, Multiply, Power, Min and Max only pick it.

Author: B.G.
"""

from ..base import NoiseFn
from ..general_algorithms.math_utils import safe_pow
from ..general_algorithms.point import common_dimensions

OPERATIONS = {
    "add": lambda a, b: a + b,
    "multiply": lambda a, b: a * b,
    "power": safe_pow,
    "min": min,
    "max": max,
}


class Combiner(NoiseFn):
    """
    Noise function that outputs operation(source1(p), source2(p)).

    Author: B.G.
    """

    operation_name = None

    def __init__(self, source1, source2, operation=None):
        """
        Args:
            source1: First source noise function
            source2: Second source noise function
            operation: Name from OPERATIONS or a callable taking two floats
                (default: the subclass operation)

        Raises:
            ValueError: If the operation name is unknown
        """
        self.source1 = source1
        self.source2 = source2
        if operation is None:
            operation = self.operation_name
        if callable(operation):
            self._operation = operation
        elif operation in OPERATIONS:
            self._operation = OPERATIONS[operation]
        else:
            raise ValueError(f"operation must be one of {tuple(OPERATIONS)} or callable, got '{operation}'")

    @property
    def dimensions(self):
        return common_dimensions(self.source1, self.source2)

    def with_source1(self, source1):
        return self._evolve(source1=source1)

    def with_source2(self, source2):
        return self._evolve(source2=source2)

    def _get(self, point: tuple) -> float:
        return self._operation(self.source1.get(point), self.source2.get(point))


class Add(Combiner):
    """Outputs the sum of the two source values."""

    operation_name = "add"

    def __init__(self, source1, source2):
        super().__init__(source1, source2)


class Multiply(Combiner):
    """Outputs the product of the two source values."""

    operation_name = "multiply"

    def __init__(self, source1, source2):
        super().__init__(source1, source2)


class Power(Combiner):
    """Outputs source1 raised to the power of source2."""

    operation_name = "power"

    def __init__(self, source1, source2):
        super().__init__(source1, source2)


class Min(Combiner):
    """Outputs the smaller of the two source values."""

    operation_name = "min"

    def __init__(self, source1, source2):
        super().__init__(source1, source2)


class Max(Combiner):
    """Outputs the larger of the two source values."""

    operation_name = "max"

    def __init__(self, source1, source2):
        super().__init__(source1, source2)
