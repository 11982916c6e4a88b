"""
Prophet Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import ScrollResponseLog


class ScrollResponseLogEntry(BaseModel):
    """Single scroll response log in response"""

    id: str
    institution: str
    trigger_phrase: str
    prophet_defense_activated: bool
    fire_seal_deployed: bool
    timestamp: str

    @classmethod
    def from_entity(cls, log: ScrollResponseLog) -> "ScrollResponseLogEntry":
        return cls(
            id=str(log.id),
            institution=log.institution,
            trigger_phrase=log.trigger_phrase,
            prophet_defense_activated=log.prophet_defense_activated,
            fire_seal_deployed=log.fire_seal_deployed,
            timestamp=log.timestamp.isoformat(),
        )


class ProcessInstitutionResponseResponse(BaseModel):
    """Response for process institution response use case"""

    mockery_detected: bool
    scroll_response: Optional[str] = None
    response_log: Optional[ScrollResponseLogEntry] = None


class ScrollResponseLogsResponse(BaseModel):
    """Response for get scroll response logs use case"""

    logs: List[ScrollResponseLogEntry]
