"""Place lookup and creation CLI commands."""

import asyncio

import typer
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from place_union.lib.place_union import PlaceIntegrityError
from place_union.schemas.place import (
    CityCreate,
    CityPlace,
    CityPlaceCreateRequest,
    CountryCreate,
    CountryPlace,
    CountryPlaceCreateRequest,
)

place_app = typer.Typer()


@place_app.command("show")
def show_place(
    place_id: int = typer.Argument(..., min=1, help="Place ID"),
    as_json: bool = typer.Option(False, "--json", help="Print the place as JSON"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on places with both or neither reference set (also enabled by PLACE_STRICT_RECONSTRUCTION)",
    ),
) -> None:
    """Look up a place and print it."""
    asyncio.run(_show_place(place_id, as_json=as_json, strict=strict))


async def _show_place(place_id: int, *, as_json: bool, strict: bool) -> None:
    """Async implementation of place lookup."""
    from place_union.core.config import get_settings
    from place_union.core.database import dispose_engine, get_session_factory, init_engine
    from place_union.services.place_service import find_place

    settings = get_settings()
    try:
        init_engine(settings.database_url, schema=settings.database_schema)
        factory = get_session_factory()
        async with factory() as session:
            place = await find_place(
                session,
                place_id,
                strict=strict or settings.place_strict_reconstruction,
            )
    except (SQLAlchemyError, OSError, PlaceIntegrityError) as e:
        logger.error(f"Lookup of place {place_id} failed: {e}")
        raise typer.Exit(code=1) from e
    finally:
        await dispose_engine()

    if place is None:
        typer.echo("Place not found")
        return
    if as_json:
        typer.echo(place.model_dump_json())
        return
    _echo_place(place)


def _echo_place(place: CityPlace | CountryPlace) -> None:
    typer.echo(place.name)
    typer.echo(place.type)
    # Only cities carry an owning country
    if isinstance(place, CityPlace):
        typer.echo(place.country.name)


@place_app.command("create-city")
def create_city(
    city: str = typer.Option(..., "--city", help="City name"),
    country: str = typer.Option(..., "--country", help="Name of the city's country"),
) -> None:
    """Create a place for a new city in a new country."""
    request = CityPlaceCreateRequest(city=CityCreate(name=city, country=CountryCreate(name=country)))
    asyncio.run(_create(request))


@place_app.command("create-country")
def create_country(
    country: str = typer.Option(..., "--country", help="Country name"),
) -> None:
    """Create a place for a new country."""
    request = CountryPlaceCreateRequest(country=CountryCreate(name=country))
    asyncio.run(_create(request))


async def _create(request: CityPlaceCreateRequest | CountryPlaceCreateRequest) -> None:
    """Async implementation of place creation."""
    from place_union.core.config import get_settings
    from place_union.core.database import dispose_engine, get_session_factory, init_engine
    from place_union.services.place_service import create_place

    settings = get_settings()
    try:
        init_engine(settings.database_url, schema=settings.database_schema)
        factory = get_session_factory()
        async with factory() as session:
            place = await create_place(session, request)
            typer.echo(f"Created place {place.id} ({request.type})")
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Creating {request.type} place failed: {e}")
        raise typer.Exit(code=1) from e
    finally:
        await dispose_engine()
