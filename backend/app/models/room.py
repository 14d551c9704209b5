from __future__ import annotations
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, Float, String, Text
from app.db import Base, UTCDateTime, utcnow


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column(String(32), unique=True, index=True, nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    amenities: Mapped[str] = mapped_column(Text(), nullable=False, default="[]")  # JSON array
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="available")  # available|occupied|maintenance
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)
