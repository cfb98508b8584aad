"""Country model -- a named country that owns cities and may be a place itself."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from place_union.models.base import Base

if TYPE_CHECKING:
    from place_union.models.city import City
    from place_union.models.place import Place


class Country(Base):
    """A country.

    Attributes:
        id: Auto-generated integer primary key.
        name: Display name. Unique.
    """

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    # Relationships
    cities: Mapped[list["City"]] = relationship(back_populates="country", lazy="raise")
    places: Mapped[list["Place"]] = relationship(back_populates="country", lazy="raise")

    def __repr__(self) -> str:
        return f"Country(id={self.id!r}, name={self.name!r})"
