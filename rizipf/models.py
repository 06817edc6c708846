from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """
    Anything producing uniform floats in [0, 1). `random.Random`,
    `random.SystemRandom` and `numpy.random.Generator` all qualify.
    """

    def random(self) -> float: ...


class ConstructionError(ValueError):
    """
    Base error for invalid Zipf distribution parameters.
    """


class ZeroPopulationError(ConstructionError):
    def __init__(self, num_elements: int) -> None:
        super().__init__(f"num_elements must be at least 1, got {num_elements}")
        self.num_elements = num_elements


class NonPositiveExponentError(ConstructionError):
    def __init__(self, exponent: float) -> None:
        super().__init__(f"exponent must be a positive finite number, got {exponent}")
        self.exponent = exponent
