"""
Get Scroll Response Logs Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ScrollResponseLogEntry, ScrollResponseLogsResponse


class GetScrollResponseLogsUseCase:
    """Returns recorded mockery responses, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = 50) -> Result[ScrollResponseLogsResponse]:
        async with self.uow:
            logs = await self.uow.scroll_responses.get_recent(limit=limit)

            return Return.ok(
                ScrollResponseLogsResponse(
                    logs=[ScrollResponseLogEntry.from_entity(log) for log in logs]
                )
            )
