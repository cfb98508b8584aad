"""CLI command that loads the demonstration places.

Creates New York (United States) and Berlin (Germany) as city places and
France as a country place. Names are unique, so seeding an already-seeded
database fails with a constraint violation and exit status 1.
"""

import asyncio

import typer
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError


def seed() -> None:
    """Create the demonstration places."""
    asyncio.run(_seed())


async def _seed() -> None:
    """Async implementation of seeding."""
    from place_union.core.config import get_settings
    from place_union.core.database import dispose_engine, get_session_factory, init_engine
    from place_union.services.place_service import seed_places

    settings = get_settings()
    try:
        init_engine(settings.database_url, schema=settings.database_schema)
        factory = get_session_factory()
        async with factory() as session:
            places = await seed_places(session)
            for place in places:
                kind = "city" if place.city_id is not None else "country"
                typer.echo(f"Created place {place.id} ({kind})")
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Seeding failed: {e}")
        raise typer.Exit(code=1) from e
    finally:
        await dispose_engine()
