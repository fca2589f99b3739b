"""SQLAlchemy models for the persons store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func

from .session import Base


class PersonRecord(Base):
    __tablename__ = "persons"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    # public identifier; row position in the seed file or max + 1 on create
    person_id = Column(Integer, unique=True, nullable=False, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    zip_code = Column(String(32), nullable=False)
    city = Column(String(255), nullable=False)
    colour = Column(String(32), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
