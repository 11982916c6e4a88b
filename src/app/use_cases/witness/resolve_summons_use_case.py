"""
Resolve Summons Use Case

Looks up a summons by the token carried in an invite link.
"""

from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import SummonsStatus

from .dtos import SummonsSummary


class ResolveSummonsUseCase:
    """
    Use case for resolving a summons token.

    Business Rules:
    - Unknown tokens are rejected
    - Only pending summons can be resolved
    - Summons past expires_at are rejected (no status change is written)
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[SummonsSummary]:
        if not token:
            return Return.err(Error("INVALID_TOKEN", "Summons token is required"))

        async with self.uow:
            summons = await self.uow.summons.get_by_token(token)

            if summons is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or non-existent summons token")
                )

            if summons.status != SummonsStatus.pending:
                return Return.err(
                    Error(
                        "SUMMONS_ALREADY_RESPONDED",
                        f"This summons has already been {summons.status.value}",
                    )
                )

            if summons.is_expired(self.clock()):
                return Return.err(Error("SUMMONS_EXPIRED", "This summons has expired"))

            return Return.ok(SummonsSummary.from_entity(summons))
