from rizipf.generator import Zipf
from rizipf.models import (
    ConstructionError,
    NonPositiveExponentError,
    RandomSource,
    ZeroPopulationError,
)
from rizipf.sources import BitSource
from rizipf.zipf import ZipfSampler

__all__ = [
    "BitSource",
    "ConstructionError",
    "NonPositiveExponentError",
    "RandomSource",
    "ZeroPopulationError",
    "Zipf",
    "ZipfSampler",
]
