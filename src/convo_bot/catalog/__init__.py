"""Characteristic and solution catalogs."""

from .catalog import AffinityRecord, Catalog, CharacteristicRecord, SolutionRecord, build_catalogs
from .loader import load_catalogs, parse_characteristics, parse_solutions

__all__ = [
    "AffinityRecord",
    "Catalog",
    "CharacteristicRecord",
    "SolutionRecord",
    "build_catalogs",
    "load_catalogs",
    "parse_characteristics",
    "parse_solutions",
]
