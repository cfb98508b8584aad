"""City model -- a named city that always belongs to exactly one country."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from place_union.models.base import Base

if TYPE_CHECKING:
    from place_union.models.country import Country
    from place_union.models.place import Place


class City(Base):
    """A city.

    Attributes:
        id: Auto-generated integer primary key.
        name: Display name. Unique.
        country_id: FK to the owning country. Required.
    """

    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    country_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("countries.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=False,
    )

    # Relationships
    country: Mapped["Country"] = relationship(back_populates="cities", lazy="raise")
    places: Mapped[list["Place"]] = relationship(back_populates="city", lazy="raise")

    def __repr__(self) -> str:
        return f"City(id={self.id!r}, name={self.name!r}, country_id={self.country_id!r})"
