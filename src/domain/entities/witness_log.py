"""
WitnessLog Entity

Append-only record of actions taken on a court session's summons.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class WitnessLog(SQLModel, table=True):
    """
    WitnessLog entity - immutable audit trail for witness summons.

    Business Rules:
    - Immutable (never updated or deleted)
    - Written best-effort: a failed append never undoes the action it describes
    """

    __tablename__ = "scroll_witness_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    session_id: Optional[str] = Field(default=None, max_length=64)
    user_id: Optional[str] = Field(default=None, max_length=64)

    action: str = Field(max_length=100)  # e.g., "witness_summoned"
    details: Optional[str] = Field(default=None)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_witness_log_session_timestamp", "session_id", "timestamp"),
    )
