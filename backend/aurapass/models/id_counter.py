"""Identifier Counter ORM — high-water mark for generated identifiers.

Invariants:
    - value never decreases; it is advanced in the same transaction as the insert
      that consumes the identifier, so a rolled-back insert leaves it unchanged
    - Deleting the record that holds an identifier never lowers the mark
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from aurapass.db.base import Base


class IdCounter(Base):
    __tablename__ = "id_counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
