"""
Food Places API: FoodPlace SQLAlchemy Model
===========================================

What:  ORM model for the `food_places` table used by the SQL store.
Who:   SqlFoodPlaceStore for CRUD; `create_tables()` for local bootstrap.

Table Design:
    - id: integer identity assigned by the database
    - name: NOT NULL, never blank (check constraint mirrors the API rule)
    - rating: nullable, 0..5 (check constraint mirrors the API rule)
    - created_at: UTC timestamp set at insert, default sort key

    Index on created_at DESC backs the default listing order.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    TIMESTAMP,
    BigInteger,
    CheckConstraint,
    Float,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from foodplaces.database import Base

# SQLite only auto-increments INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer(), "sqlite")


class FoodPlace(Base):
    """
    A restaurant, cafe or stall.

    Lifecycle:
        1. Inserted by POST /api/food-places (id, created_at assigned here)
        2. Fully replaced by PUT /api/food-places/{id}
        3. Removed by DELETE /api/food-places/{id} (hard delete)
    """

    __tablename__ = "food_places"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    cuisine_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Conventionally "$" .. "$$$$"; not constrained
    price_range: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_food_places_name_not_blank"),
        CheckConstraint(
            "rating IS NULL OR (rating >= 0 AND rating <= 5)",
            name="ck_food_places_rating_range",
        ),
        Index("idx_food_places_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<FoodPlace(id={self.id}, name='{self.name}', created_at='{self.created_at}')>"
