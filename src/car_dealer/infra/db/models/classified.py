from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from car_dealer.domain.classified import (
    BodyType,
    ClassifiedStatus,
    Colour,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
    ULEZCompliance,
)
from car_dealer.infra.db.models.base import Base


class ClassifiedRow(Base):
    __tablename__ = "classifieds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # Minor units
    odo_reading: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    doors: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    seats: Mapped[int] = mapped_column(Integer, nullable=False, default=5)

    odo_unit: Mapped[OdoUnit] = mapped_column(
        Enum(OdoUnit, name="odo_unit"), nullable=False, default=OdoUnit.MILES
    )
    currency: Mapped[CurrencyCode] = mapped_column(
        Enum(CurrencyCode, name="currency_code"), nullable=False, default=CurrencyCode.GBP
    )
    transmission: Mapped[Transmission] = mapped_column(
        Enum(Transmission, name="transmission"), nullable=False, default=Transmission.MANUAL
    )
    fuel_type: Mapped[FuelType] = mapped_column(
        Enum(FuelType, name="fuel_type"), nullable=False, default=FuelType.PETROL
    )
    body_type: Mapped[BodyType] = mapped_column(
        Enum(BodyType, name="body_type"), nullable=False, default=BodyType.SEDAN
    )
    colour: Mapped[Colour] = mapped_column(
        Enum(Colour, name="colour"), nullable=False, default=Colour.BLACK
    )
    ulez_compliance: Mapped[ULEZCompliance] = mapped_column(
        Enum(ULEZCompliance, name="ulez_compliance"),
        nullable=False,
        default=ULEZCompliance.EXEMPT,
    )
    status: Mapped[ClassifiedStatus] = mapped_column(
        Enum(ClassifiedStatus, name="classified_status"),
        nullable=False,
        default=ClassifiedStatus.DRAFT,
        index=True,
    )

    make_id: Mapped[int] = mapped_column(ForeignKey("makes.id"), nullable=False, index=True)
    model_id: Mapped[int] = mapped_column(ForeignKey("models.id"), nullable=False, index=True)
    model_variant_id: Mapped[int | None] = mapped_column(
        ForeignKey("model_variants.id"), nullable=True, index=True
    )

    images: Mapped[list[ImageRow]] = relationship(
        back_populates="classified",
        order_by="ImageRow.id",
        cascade="all, delete-orphan",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class ImageRow(Base):
    __tablename__ = "images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    classified_id: Mapped[int] = mapped_column(
        ForeignKey("classifieds.id", ondelete="CASCADE"), nullable=False, index=True
    )
    src: Mapped[str] = mapped_column(Text, nullable=False)
    alt: Mapped[str] = mapped_column(String(255), nullable=False)

    classified: Mapped[ClassifiedRow] = relationship(back_populates="images")
