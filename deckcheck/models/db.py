"""
SQLAlchemy ORM models for persistent storage.

Holds the local copy of the reference card index and the key-value
preferences the application shell restores on startup.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CardDB(Base):
    """
    One printing from the reference card database.

    Rows are replaced wholesale whenever fresh bulk data is synced.
    """

    __tablename__ = "cards"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    set_name: Mapped[str] = mapped_column(String(255), index=True)
    rarity: Mapped[str] = mapped_column(String(50))
    type: Mapped[str] = mapped_column(String(255))
    colors: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Preserves bulk-data order so multi-printing lookups stay deterministic
    position: Mapped[int] = mapped_column(Integer, index=True)

    def __repr__(self) -> str:
        return f"<CardDB(name={self.name}, set={self.set_name})>"


class PreferenceDB(Base):
    """A single preference value (deck text, sort key, display toggles)."""

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<PreferenceDB(key={self.key})>"
