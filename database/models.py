"""SQLAlchemy ORM models for the accessory price tables."""

from datetime import datetime
from typing import Optional
from sqlalchemy import String, Float, Boolean, DateTime, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class AccessoryPrice(Base):
    """Unit sale price of one accessory kind for one product type.

    Preset rows come from the seed file; user-entered rows have
    is_preset=False and are left alone by re-seeding.
    """
    __tablename__ = 'accessory_prices'
    __table_args__ = (
        UniqueConstraint('product_type', 'kind', name='uq_accessory_price_product_kind'),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    product_type: Mapped[str] = mapped_column(String(50), nullable=False)
    kind: Mapped[str] = mapped_column(String(20), nullable=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    description: Mapped[Optional[str]] = mapped_column(String(200))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    is_preset: Mapped[bool] = mapped_column(Boolean, default=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, onupdate=datetime.now)

    def __repr__(self):
        return f"<AccessoryPrice({self.product_type}/{self.kind}: {self.unit_price})>"
