"""SQLAlchemy ORM models for PostgreSQL persistence."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class CalculationSessionRecord(Base):
    __tablename__ = "calculation_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    calculator_type: Mapped[str] = mapped_column(String(32), index=True)  # 'hsa', 'fsa', 'commuter', ...

    # JSON strings exactly as the client sent them
    input_data: Mapped[str] = mapped_column(Text)
    results: Mapped[str] = mapped_column(Text)
