"""
WitnessSummons Entity

Invitation of a participant (by email) to a scheduled court session.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import CourtRole, SummonsStatus

SUMMONS_TTL = timedelta(hours=24)


class WitnessSummons(SQLModel, table=True):
    """
    WitnessSummons entity - a token-bearing invitation to a court session.

    Business Rules:
    - Expires exactly 24 hours after invited_at
    - Token is unique for the lifetime of the system and never regenerated
    - session_id, invited_by and role are fixed at creation
    - Only actionable while pending and not yet expired
    - Never deleted by this service
    """

    __tablename__ = "witness_summons"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    session_id: str = Field(max_length=64, nullable=False, index=True)
    invited_email: str = Field(max_length=255, nullable=False)
    invited_by: str = Field(max_length=64, nullable=False)

    role: CourtRole = Field(nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)

    status: SummonsStatus = Field(default=SummonsStatus.pending)
    email_sent: bool = Field(default=False)

    # Timestamps
    invited_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))
    email_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    responded_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    __table_args__ = (
        Index("idx_witness_summons_expires_at", "expires_at"),
        Index("idx_witness_summons_status", "status"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def is_actionable(self, now: datetime) -> bool:
        return self.status == SummonsStatus.pending and not self.is_expired(now)
