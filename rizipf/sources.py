from typing import Callable

from typing_extensions import Protocol

# doubles carry 53 bits of mantissa
FLOAT_BITS = 53


class SupportsGetrandbits(Protocol):
    def getrandbits(self, k: int) -> int: ...


class BitSource:
    """
    Adapt a raw unsigned integer generator into a `RandomSource`. Only the top 53 bits
    of each value are kept, so every float in [0, 1) is equally spaced.

    :param next_bits: zero-argument callable returning uniform unsigned integers of `bits` width.
    :param bits: width of the integers returned by next_bits, between 1 and 64.
    """

    def __init__(self, next_bits: Callable[[], int], bits: int = 64):
        if bits < 1 or bits > 64:
            raise ValueError(f"bits must be between 1 and 64, got {bits}")
        self.next_bits = next_bits
        self.bits = bits
        self._shift = max(bits - FLOAT_BITS, 0)
        self._scale = 1.0 / (1 << (bits - self._shift))

    @classmethod
    def from_getrandbits(cls, rng: SupportsGetrandbits, bits: int = 64) -> "BitSource":
        return cls(lambda: rng.getrandbits(bits), bits)

    def random(self) -> float:
        return (self.next_bits() >> self._shift) * self._scale

    def __repr__(self) -> str:
        return f"BitSource({self.next_bits!r}, bits={self.bits})"
