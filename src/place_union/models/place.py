"""Place model -- a City-or-Country stored as two nullable foreign keys.

A place is meant to reference exactly one of ``city_id`` and ``country_id``.
The schema does not enforce this; ``place_union.lib.place_union`` classifies
and reconstructs rows into the tagged union on read.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from place_union.models.base import Base

if TYPE_CHECKING:
    from place_union.models.city import City
    from place_union.models.country import Country


class Place(Base):
    """A place that is either a city or a country.

    Attributes:
        id: Auto-generated integer primary key.
        city_id: FK to cities, set when the place is a city.
        country_id: FK to countries, set when the place is a country.
    """

    __tablename__ = "places"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    city_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("cities.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
    )
    country_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("countries.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
    )

    # Relationships
    city: Mapped["City | None"] = relationship(back_populates="places", lazy="raise")
    country: Mapped["Country | None"] = relationship(back_populates="places", lazy="raise")

    __table_args__ = (
        Index("ix_places_city_id", "city_id"),
        Index("ix_places_country_id", "country_id"),
    )

    def __repr__(self) -> str:
        return f"Place(id={self.id!r}, city_id={self.city_id!r}, country_id={self.country_id!r})"
