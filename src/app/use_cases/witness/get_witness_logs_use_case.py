"""
Get Witness Logs Use Case

Retrieves the scroll witness log of a court session.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import WitnessLogEntry, WitnessLogsResponse


class GetWitnessLogsUseCase:
    """
    Use case for reading a session's witness log.

    Business Rules:
    - Results are session-scoped
    - Results ordered by newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str, limit: int = 50) -> Result[WitnessLogsResponse]:
        if not session_id or not session_id.strip():
            return Return.err(Error("INVALID_SESSION", "Session ID is required"))

        async with self.uow:
            entries = await self.uow.witness_logs.get_by_session(session_id, limit=limit)

            return Return.ok(
                WitnessLogsResponse(
                    entries=[WitnessLogEntry.from_entity(e) for e in entries]
                )
            )
