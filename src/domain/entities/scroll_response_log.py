"""
ScrollResponseLog Entity

Record of an institution's reply that challenged scroll authority.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class ScrollResponseLog(SQLModel, table=True):
    __tablename__ = "scroll_response_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    institution: str = Field(max_length=255, nullable=False)
    trigger_phrase: str = Field(max_length=255, nullable=False)
    prophet_defense_activated: bool = Field(default=True)
    fire_seal_deployed: bool = Field(default=True)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_scroll_response_timestamp", "timestamp"),)
