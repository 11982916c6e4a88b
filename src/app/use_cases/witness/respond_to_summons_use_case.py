"""
Respond To Summons Use Case

Handles the invitee accepting or declining a summons.
"""

from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import SummonsStatus, WitnessLog, WitnessLogAction

from .dtos import RespondToSummonsResponse


class RespondToSummonsUseCase:
    """
    Use case for accepting or declining a summons.

    Business Rules:
    - Summons must exist, be pending and not be expired
    - Status moves pending -> accepted | declined exactly once
    - Response and its log entry are committed together
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str, accept: bool) -> Result[RespondToSummonsResponse]:
        """
        Execute respond to summons use case.

        Args:
            token: Summons token from the invite link
            accept: True to accept, False to decline

        Returns:
            Result with RespondToSummonsResponse DTO, or Error
        """
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

            now = self.clock()
            if summons.is_expired(now):
                return Return.err(Error("SUMMONS_EXPIRED", "This summons has expired"))

            if accept:
                new_status = SummonsStatus.accepted
                action = WitnessLogAction.summons_accepted
            else:
                new_status = SummonsStatus.declined
                action = WitnessLogAction.summons_declined

            session_id = summons.session_id
            role = summons.role.value
            email = summons.invited_email

            summons.status = new_status
            summons.responded_at = now

            try:
                await self.uow.summons.update(summons)
                await self.uow.witness_logs.append(
                    WitnessLog(
                        session_id=session_id,
                        user_id=None,
                        action=action.value,
                        details=f"{email} {new_status.value} summons as {role}",
                        timestamp=now,
                    )
                )
                await self.uow.commit()
            except StoreError:
                await self.uow.rollback()
                return Return.err(
                    Error("SUMMONS_UPDATE_FAILED", "Could not record summons response")
                )

            return Return.ok(
                RespondToSummonsResponse(
                    status=new_status.value,
                    session_id=session_id,
                    role=role,
                )
            )
