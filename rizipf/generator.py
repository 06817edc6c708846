import random
import sysconfig
from threading import Lock
from typing import Iterator, Optional

from rizipf.models import RandomSource
from rizipf.zipf import ZipfSampler


class Zipf:
    """
    Zipf random number generator, a `ZipfSampler` bound to its own random source.
    Calls are serialized with a lock because the random source is shared state.

    :param num_elements: population size, must be at least 1.
    :param exponent: skew exponent, must be positive.
    :param source: uniform random source. Default is a new `random.Random` seeded with seed.
    :param seed: seed for the default source, ignored when source is given.
    :param nolock: disables thread locking around the random source. Defaults to False. Enable this only if your code does not use multi-threading.
    """

    def __init__(
        self,
        num_elements: int,
        exponent: float,
        source: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        nolock: bool = False,
    ):
        if bool(sysconfig.get_config_var("Py_GIL_DISABLED")):
            nolock = False
        self.sampler = ZipfSampler(num_elements, exponent)
        self.source: RandomSource = source if source is not None else random.Random(seed)
        self.mutex = Lock()
        self.nolock = nolock

    def get(self) -> int:
        try:
            self.nolock or self.mutex.acquire()
            return self.sampler.sample(self.source)
        finally:
            if not self.nolock:
                self.mutex.release()

    def next_u32(self) -> int:
        return self.get() & 0xFFFFFFFF

    def next_u64(self) -> int:
        return self.get()

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.get()

    def __repr__(self) -> str:
        return f"Rejection inversion Zipf deviate [{self.source!r}]"
