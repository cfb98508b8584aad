"""Unit tests for place Pydantic schemas."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from place_union.schemas.place import (
    CityPlace,
    CityPlaceCreateRequest,
    CountryPlace,
    CountryPlaceCreateRequest,
    place_create_adapter,
    tagged_place_adapter,
)


class TestTaggedPlace:
    """Tests for the CityPlace | CountryPlace discriminated union."""

    def test_city_discriminator(self) -> None:
        place = tagged_place_adapter.validate_python(
            {
                "type": "city",
                "id": 1,
                "name": "New York",
                "country_id": 1,
                "country": {"type": "country", "id": 1, "name": "United States"},
            }
        )
        assert isinstance(place, CityPlace)
        assert place.country.name == "United States"

    def test_country_discriminator(self) -> None:
        place = tagged_place_adapter.validate_json('{"type": "country", "id": 3, "name": "France"}')
        assert isinstance(place, CountryPlace)

    def test_unknown_discriminator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            tagged_place_adapter.validate_python({"type": "region", "id": 1, "name": "Europe"})

    def test_city_requires_country(self) -> None:
        with pytest.raises(ValidationError):
            tagged_place_adapter.validate_python({"type": "city", "id": 1, "name": "Berlin", "country_id": 2})

    def test_json_keeps_tag(self) -> None:
        place = CityPlace(id=2, name="Berlin", country_id=2, country=CountryPlace(id=2, name="Germany"))
        assert tagged_place_adapter.validate_json(place.model_dump_json()) == place

    def test_values_are_frozen(self) -> None:
        place = CountryPlace(id=3, name="France")
        with pytest.raises(ValidationError):
            place.name = "Spain"  # type: ignore[misc]

    def test_country_from_attributes(self) -> None:
        """CountryPlace can be hydrated from an ORM-like object without a type attribute."""
        obj = MagicMock(spec=["id", "name"])
        obj.id = 3
        obj.name = "France"
        place = CountryPlace.model_validate(obj)
        assert place == CountryPlace(id=3, name="France")

    def test_city_from_attributes_nests_country(self) -> None:
        """CityPlace hydrates its nested country from the related object."""
        country = SimpleNamespace(id=2, name="Germany")
        city = SimpleNamespace(id=5, name="Berlin", country_id=2, country=country)
        place = CityPlace.model_validate(city)
        assert place.type == "city"
        assert place.country == CountryPlace(id=2, name="Germany")


class TestPlaceCreateRequest:
    """Tests for the creation payload union."""

    def test_city_payload(self) -> None:
        request = place_create_adapter.validate_python(
            {"type": "city", "city": {"name": "New York", "country": {"name": "United States"}}}
        )
        assert isinstance(request, CityPlaceCreateRequest)
        assert request.city.country.name == "United States"

    def test_country_payload(self) -> None:
        request = place_create_adapter.validate_python({"type": "country", "country": {"name": "France"}})
        assert isinstance(request, CountryPlaceCreateRequest)

    def test_city_payload_requires_country(self) -> None:
        with pytest.raises(ValidationError):
            place_create_adapter.validate_python({"type": "city", "city": {"name": "New York"}})

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            place_create_adapter.validate_python({"type": "country", "country": {"name": ""}})

    def test_missing_discriminator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            place_create_adapter.validate_python({"country": {"name": "France"}})
