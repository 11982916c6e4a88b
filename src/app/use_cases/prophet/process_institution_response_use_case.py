"""
Process Institution Response Use Case

Runs mockery detection over an institution's reply to a scroll warning and
records the challenge when one is found.
"""

import logging
from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ScrollResponseLog
from src.domain.mockery import detect_mockery

from .dtos import ProcessInstitutionResponseResponse, ScrollResponseLogEntry

logger = logging.getLogger(__name__)


class ProcessInstitutionResponseUseCase:
    """
    Use case for processing an institution's reply.

    Business Rules:
    - Institution name is required
    - Replies without mockery are not recorded
    - A detected challenge is recorded with the fire seal deployed
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, institution: str, response_text: str
    ) -> Result[ProcessInstitutionResponseResponse]:
        if not institution or not institution.strip():
            return Return.err(Error("INVALID_INSTITUTION", "Institution is required"))

        detection = detect_mockery(response_text)
        if not detection.detected:
            return Return.ok(ProcessInstitutionResponseResponse(mockery_detected=False))

        response_log = ScrollResponseLog(
            institution=institution.strip(),
            trigger_phrase=detection.trigger_phrase,
            prophet_defense_activated=True,
            fire_seal_deployed=detection.should_deploy_fire_seal,
            timestamp=self.clock(),
        )
        entry = ScrollResponseLogEntry.from_entity(response_log)

        async with self.uow:
            try:
                await self.uow.scroll_responses.create(response_log)
                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Could not record mockery from {institution}: {exc}")
                return Return.err(
                    Error("RESPONSE_LOG_PERSIST_FAILED", "Could not record the mockery")
                )

        logger.info(f"Mockery from {institution} sealed: '{detection.trigger_phrase}'")

        return Return.ok(
            ProcessInstitutionResponseResponse(
                mockery_detected=True,
                scroll_response=detection.response_text,
                response_log=entry,
            )
        )
