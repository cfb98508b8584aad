"""ORM model registry -- import all models so Alembic autogenerate discovers them."""

from place_union.models.city import City
from place_union.models.country import Country
from place_union.models.place import Place

__all__ = [
    "City",
    "Country",
    "Place",
]
