from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from car_dealer.infra.db.models.base import Base


class MakeRow(Base):
    __tablename__ = "makes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)

    models: Mapped[list[ModelRow]] = relationship(back_populates="make")


class ModelRow(Base):
    __tablename__ = "models"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    make_id: Mapped[int] = mapped_column(
        ForeignKey("makes.id", ondelete="CASCADE"), nullable=False, index=True
    )

    make: Mapped[MakeRow] = relationship(back_populates="models")
    variants: Mapped[list[ModelVariantRow]] = relationship(back_populates="model")


class ModelVariantRow(Base):
    __tablename__ = "model_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    model_id: Mapped[int] = mapped_column(
        ForeignKey("models.id", ondelete="CASCADE"), nullable=False, index=True
    )
    year_start: Mapped[int] = mapped_column(Integer, nullable=False)
    year_end: Mapped[int] = mapped_column(Integer, nullable=False)

    model: Mapped[ModelRow] = relationship(back_populates="variants")
