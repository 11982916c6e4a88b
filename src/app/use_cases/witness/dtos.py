"""
Witness Summons Use Case DTOs (Data Transfer Objects)

All Response classes for the witness summons domain.
Provides type safety and clear contracts between layers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import WitnessLog, WitnessSummons


# ============================================================================
# Response DTOs
# ============================================================================


class SendInviteResponse(BaseModel):
    """
    Response for send invite use case

    warnings lists degraded steps (audit log, notification) that failed
    without failing the summons itself.
    """

    summons_id: str
    invite_link: str
    status: str
    role: str
    expires_at: str
    notification_sent: bool
    warnings: List[str] = Field(default_factory=list)


class SummonsSummary(BaseModel):
    """Public view of a witness summons"""

    id: str
    session_id: str
    invited_email: str
    invited_by: str
    role: str
    status: str
    invited_at: str
    expires_at: str
    email_sent: bool
    responded_at: Optional[str] = None

    @classmethod
    def from_entity(cls, summons: WitnessSummons) -> "SummonsSummary":
        return cls(
            id=str(summons.id),
            session_id=summons.session_id,
            invited_email=summons.invited_email,
            invited_by=summons.invited_by,
            role=summons.role.value,
            status=summons.status.value,
            invited_at=summons.invited_at.isoformat(),
            expires_at=summons.expires_at.isoformat(),
            email_sent=summons.email_sent,
            responded_at=(
                summons.responded_at.isoformat() if summons.responded_at else None
            ),
        )


class SessionSummonsResponse(BaseModel):
    """Response for list session summons use case"""

    summons: List[SummonsSummary]


class RespondToSummonsResponse(BaseModel):
    """Response for respond to summons use case"""

    status: str
    session_id: str
    role: str


class WitnessLogEntry(BaseModel):
    """Single witness log entry in response"""

    action: str
    user_id: Optional[str]
    details: Optional[str]
    timestamp: str

    @classmethod
    def from_entity(cls, entry: WitnessLog) -> "WitnessLogEntry":
        return cls(
            action=entry.action,
            user_id=entry.user_id,
            details=entry.details,
            timestamp=entry.timestamp.isoformat(),
        )


class WitnessLogsResponse(BaseModel):
    """Response for get witness logs use case"""

    entries: List[WitnessLogEntry]
