"""Pydantic v2 schemas for the City-or-Country place union.

``TaggedPlace`` is the strictly-typed read model: a ``type`` literal
discriminates ``CityPlace`` from ``CountryPlace``. Only a city carries a
nested ``country``. ``PlaceCreateRequest`` is the matching write payload;
it has no shape with both or neither relation, so invalid places cannot be
requested.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class CountryPlace(BaseModel):
    """A place that is a country."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    type: Literal["country"] = "country"
    id: int
    name: str


class CityPlace(BaseModel):
    """A place that is a city, with its owning country."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    type: Literal["city"] = "city"
    id: int
    name: str
    country_id: int
    country: CountryPlace


TaggedPlace = Annotated[CityPlace | CountryPlace, Field(discriminator="type")]

tagged_place_adapter: TypeAdapter[CityPlace | CountryPlace] = TypeAdapter(TaggedPlace)


class CountryCreate(BaseModel):
    """A new country."""

    name: str = Field(min_length=1)


class CityCreate(BaseModel):
    """A new city, created together with its country."""

    name: str = Field(min_length=1)
    country: CountryCreate


class CityPlaceCreateRequest(BaseModel):
    """Create a place that references a new city."""

    type: Literal["city"] = "city"
    city: CityCreate


class CountryPlaceCreateRequest(BaseModel):
    """Create a place that references a new country directly."""

    type: Literal["country"] = "country"
    country: CountryCreate


PlaceCreateRequest = Annotated[
    CityPlaceCreateRequest | CountryPlaceCreateRequest,
    Field(discriminator="type"),
]

place_create_adapter: TypeAdapter[CityPlaceCreateRequest | CountryPlaceCreateRequest] = TypeAdapter(
    PlaceCreateRequest
)
