"""Place service -- create places and look them up as a tagged union."""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from place_union.lib.place_union import classify_place_record, reconstruct_place
from place_union.models.city import City
from place_union.models.country import Country
from place_union.models.place import Place
from place_union.schemas.place import (
    CityPlace,
    CityPlaceCreateRequest,
    CountryPlace,
    CountryPlaceCreateRequest,
)

# Demonstration data loaded by ``seed_places``: (city name, country name),
# with a None city meaning the place is the country itself.
SEED_PLACES: list[tuple[str | None, str]] = [
    ("New York", "United States"),
    ("Berlin", "Germany"),
    (None, "France"),
]


async def find_place(
    session: AsyncSession,
    place_id: int,
    *,
    strict: bool = False,
) -> CityPlace | CountryPlace | None:
    """Look up a place by ID and reconstruct it as a tagged union.

    The place, its city, the city's country and the place's own country are
    fetched in a single query.

    Args:
        session: Database session.
        place_id: Positive place ID.
        strict: Raise for places with both or neither reference set instead
            of resolving them (city wins; neither yields None).

    Returns:
        ``CityPlace`` or ``CountryPlace``, or None if not found.

    Raises:
        ValueError: If place_id is not positive.
        PlaceIntegrityError: In strict mode, if the stored place is invalid.
    """
    if place_id < 1:
        msg = f"place_id must be a positive integer, got {place_id}"
        raise ValueError(msg)

    query = (
        select(Place)
        .options(
            joinedload(Place.city).joinedload(City.country),
            joinedload(Place.country),
        )
        .where(Place.id == place_id)
    )
    result = await session.execute(query)
    record = result.scalar_one_or_none()

    if record is None:
        logger.debug(f"Place {place_id} not found")
        return None

    shape = classify_place_record(record)
    if not shape.is_valid:
        logger.warning(f"Place {place_id} has invalid shape '{shape}' (strict={strict})")

    return reconstruct_place(record, strict=strict)


async def create_city_place(session: AsyncSession, *, city_name: str, country_name: str) -> Place:
    """Create a country, a city in it, and a place referencing the city.

    Args:
        session: Database session.
        city_name: Name of the new city.
        country_name: Name of the new country owning the city.

    Returns:
        The created Place with ``city`` and ``city.country`` set.

    Raises:
        IntegrityError: If a city or country with the same name exists.
    """
    country = Country(name=country_name)
    city = City(name=city_name, country=country)
    place = Place(city=city, country=None)
    await _commit_new(session, place)
    logger.info(f"Created place {place.id} for city {city.id} ({city_name}, {country_name})")
    return place


async def create_country_place(session: AsyncSession, *, country_name: str) -> Place:
    """Create a country and a place referencing it directly.

    Args:
        session: Database session.
        country_name: Name of the new country.

    Returns:
        The created Place with ``country`` set.

    Raises:
        IntegrityError: If a country with the same name exists.
    """
    country = Country(name=country_name)
    place = Place(city=None, country=country)
    await _commit_new(session, place)
    logger.info(f"Created place {place.id} for country {country.id} ({country_name})")
    return place


async def create_place(
    session: AsyncSession,
    request: CityPlaceCreateRequest | CountryPlaceCreateRequest,
) -> Place:
    """Create a place from a validated creation request.

    Args:
        session: Database session.
        request: City or country creation payload.

    Returns:
        The created Place.
    """
    if isinstance(request, CityPlaceCreateRequest):
        return await create_city_place(
            session,
            city_name=request.city.name,
            country_name=request.city.country.name,
        )
    return await create_country_place(session, country_name=request.country.name)


async def seed_places(session: AsyncSession) -> list[Place]:
    """Create the demonstration places.

    Args:
        session: Database session.

    Returns:
        The created places, in creation order.
    """
    places = []
    for city_name, country_name in SEED_PLACES:
        if city_name is None:
            place = await create_country_place(session, country_name=country_name)
        else:
            place = await create_city_place(session, city_name=city_name, country_name=country_name)
        places.append(place)
    logger.info(f"Seeded {len(places)} places")
    return places


async def _commit_new(session: AsyncSession, place: Place) -> None:
    session.add(place)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
