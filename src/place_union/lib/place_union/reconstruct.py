"""Reconstruct the City-or-Country tagged union from a stored place row.

The row carries two optional relations. Exactly one is expected to be set,
but nothing in the schema guarantees it, so reconstruction has to decide:

* city set: a ``CityPlace`` with its owning country nested inside;
* only country set: a ``CountryPlace``;
* neither set: ``None``;
* both set: the city wins and the country relation is dropped;
* city set without its country (a dangling ``country_id`` where foreign
  keys are not enforced): the city is skipped and the place's own country,
  if any, is used instead.

Both functions here are pure. Callers that want to report the anomalous
shapes should use ``classify_place_record`` (or ``strict=True``).
"""

from place_union.lib.place_union.types import PlaceIntegrityError, PlaceShape
from place_union.models.place import Place
from place_union.schemas.place import CityPlace, CountryPlace


def classify_place_record(record: Place) -> PlaceShape:
    """Report which references of a place row are populated.

    Args:
        record: A place row with ``city``, ``city.country`` and ``country``
            loaded.

    Returns:
        The shape of the row.
    """
    has_city = record.city is not None
    has_country = record.country is not None
    if has_city and record.city.country is None:
        return PlaceShape.ORPHAN_CITY
    if has_city and has_country:
        return PlaceShape.AMBIGUOUS
    if has_city:
        return PlaceShape.CITY
    if has_country:
        return PlaceShape.COUNTRY
    return PlaceShape.EMPTY


def reconstruct_place(record: Place | None, *, strict: bool = False) -> CityPlace | CountryPlace | None:
    """Convert a place row into the tagged union.

    Args:
        record: A place row with ``city``, ``city.country`` and ``country``
            loaded, or None when the lookup found nothing.
        strict: Raise instead of resolving rows that are ambiguous, empty,
            or point at a city without a country.

    Returns:
        ``CityPlace``, ``CountryPlace``, or None when the row is missing or
        (in lenient mode) resolves to nothing.

    Raises:
        PlaceIntegrityError: In strict mode, when the row is not a valid shape.
    """
    if record is None:
        return None

    shape = classify_place_record(record)
    if strict and not shape.is_valid:
        raise PlaceIntegrityError(record.id, shape)

    if shape in (PlaceShape.CITY, PlaceShape.AMBIGUOUS):
        return CityPlace.model_validate(record.city)
    if record.country is not None:
        return CountryPlace.model_validate(record.country)
    return None
