"""Shapes a stored place row can take and the error raised for invalid ones."""

import enum


class PlaceShape(enum.StrEnum):
    """Which of a place's two optional references are populated."""

    CITY = "city"
    COUNTRY = "country"
    EMPTY = "empty"
    AMBIGUOUS = "ambiguous"
    # City reference set, but the city's country row is missing
    ORPHAN_CITY = "orphan_city"

    @property
    def is_valid(self) -> bool:
        """True when exactly one reference is set and it resolves fully."""
        return self in (PlaceShape.CITY, PlaceShape.COUNTRY)


_DETAILS = {
    PlaceShape.AMBIGUOUS: "references both a city and a country",
    PlaceShape.EMPTY: "references neither a city nor a country",
    PlaceShape.ORPHAN_CITY: "references a city whose country is missing",
}


class PlaceIntegrityError(ValueError):
    """A stored place does not reference exactly one complete city or country."""

    def __init__(self, place_id: int | None, shape: PlaceShape) -> None:
        self.place_id = place_id
        self.shape = shape
        super().__init__(f"Place {place_id} {_DETAILS.get(shape, f'has shape {shape}')}")
