"""
List Session Summons Use Case

Returns every summons issued for a court session.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SessionSummonsResponse, SummonsSummary


class ListSessionSummonsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str) -> Result[SessionSummonsResponse]:
        if not session_id or not session_id.strip():
            return Return.err(Error("INVALID_SESSION", "Session ID is required"))

        async with self.uow:
            summons = await self.uow.summons.get_by_session(session_id)

            return Return.ok(
                SessionSummonsResponse(
                    summons=[SummonsSummary.from_entity(s) for s in summons]
                )
            )
