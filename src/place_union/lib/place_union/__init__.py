"""Place union library -- public API for reading places as a tagged union.

Turns place rows (two nullable references) into ``CityPlace`` or
``CountryPlace`` values and classifies rows that break the exactly-one rule.
"""

from place_union.lib.place_union.reconstruct import classify_place_record, reconstruct_place
from place_union.lib.place_union.types import PlaceIntegrityError, PlaceShape

__all__ = [
    "PlaceIntegrityError",
    "PlaceShape",
    "classify_place_record",
    "reconstruct_place",
]
