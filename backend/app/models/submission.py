from __future__ import annotations
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text
from app.db import Base, UTCDateTime, utcnow


class Submission(Base):
    __tablename__ = "submissions"
    # AUTOINCREMENT: ids are never handed out twice
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_name: Mapped[str] = mapped_column(String(200), nullable=False)
    work_type: Mapped[str] = mapped_column(String(32), nullable=False)  # room_request|report|financial_report
    content: Mapped[str] = mapped_column(Text(), nullable=False)  # canonical JSON object
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False, index=True)
