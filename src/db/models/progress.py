"""
Progress snapshot table.

The snapshot is stored as one JSON document per key; the database is only a
blob store and never queries inside the payload.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ProgressSnapshotRow(Base):
    """One persisted UserProgress snapshot."""

    __tablename__ = "progress_snapshots"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(default=func.now(), onupdate=func.now())
