"""
Send Witness Invite Use Case

Handles summoning a participant (by email) to a court session.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from urllib.parse import quote

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateTokenError, StoreError
from src.app.services.notifier import (
    INotifier,
    NotificationError,
    WitnessInvitationNotification,
)
from src.app.services.token_generator import TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    SUMMONS_TTL,
    CourtRole,
    SummonsStatus,
    WitnessLog,
    WitnessLogAction,
    WitnessSummons,
)

from .dtos import SendInviteResponse

logger = logging.getLogger(__name__)

AUDIT_LOG_FAILED = "AUDIT_LOG_FAILED"
NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


def build_invite_link(site_url: str, token: str) -> str:
    return f"{site_url.rstrip('/')}/witness-invitation?token={quote(token, safe='')}"


class SendInviteUseCase:
    """
    Use case for summoning a participant to a court session.

    Business Rules:
    - Email must be non-empty; its format is not checked here
    - Role must be one of judge/advocate/witness/steward/observer
    - Summons expires exactly 24 hours after it is issued
    - Steps run in order: persist -> audit log -> notify
    - Only a persistence failure fails the operation; audit and
      notification failures are reported as warnings
    - Duplicate tokens are reported, never retried here
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: INotifier,
        site_url: str,
        token_generator: Optional[TokenGenerator] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.notifier = notifier
        self.site_url = site_url
        self.token_generator = token_generator or TokenGenerator()
        self.clock = clock

    async def execute(
        self, email: str, role: str, session_id: str, invited_by: str
    ) -> Result[SendInviteResponse]:
        """
        Execute send invite use case.

        Args:
            email: Invitee contact address
            role: Court role to assign
            session_id: Court session being summoned to
            invited_by: User ID of the person sending the summons

        Returns:
            Result with SendInviteResponse DTO, or Error
        """
        # Reject caller input errors before any side effect
        if not email or not email.strip():
            return Return.err(Error("INVALID_EMAIL", "Email is required"))

        try:
            court_role = CourtRole(role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {role}. Must be one of: "
                    + ", ".join(r.value for r in CourtRole),
                )
            )

        if not session_id or not session_id.strip():
            return Return.err(Error("INVALID_SESSION", "Session ID is required"))

        if not invited_by or not invited_by.strip():
            return Return.err(Error("INVALID_INVITER", "Inviter ID is required"))

        email = email.strip()
        token = self.token_generator.generate()
        invited_at = self.clock()

        summons = WitnessSummons(
            session_id=session_id,
            invited_email=email,
            invited_by=invited_by,
            invited_at=invited_at,
            status=SummonsStatus.pending,
            role=court_role,
            token=token,
            expires_at=invited_at + SUMMONS_TTL,
        )
        summons_id = str(summons.id)
        expires_at = summons.expires_at
        warnings = []

        async with self.uow:
            try:
                await self.uow.summons.create(summons)
                await self.uow.commit()
            except DuplicateTokenError:
                logger.warning(f"Duplicate summons token for session {session_id}")
                return Return.err(
                    Error(
                        "DUPLICATE_TOKEN",
                        "Summons token already in use, retry to generate a new one",
                    )
                )
            except StoreError as exc:
                logger.error(f"Could not persist summons for session {session_id}: {exc}")
                return Return.err(
                    Error("SUMMONS_PERSIST_FAILED", "Could not create witness summons")
                )

            invite_link = build_invite_link(self.site_url, token)

            try:
                await self.uow.witness_logs.append(
                    WitnessLog(
                        session_id=session_id,
                        user_id=invited_by,
                        action=WitnessLogAction.witness_summoned.value,
                        details=f"Summoned {email} as {court_role.value}",
                        timestamp=self.clock(),
                    )
                )
                await self.uow.commit()
            except StoreError as exc:
                await self.uow.rollback()
                logger.warning(f"Audit log append failed for summons {summons_id}: {exc}")
                warnings.append(AUDIT_LOG_FAILED)
            except Exception:
                await self.uow.rollback()
                logger.exception(f"Unexpected error appending audit log for summons {summons_id}")
                warnings.append(AUDIT_LOG_FAILED)

            notification_sent = await self._notify(
                WitnessInvitationNotification(
                    email=email,
                    role=court_role.value,
                    session_id=session_id,
                    token=token,
                    invite_link=invite_link,
                ),
                summons_id,
            )
            if notification_sent:
                try:
                    await self.uow.summons.mark_email_sent(token, self.clock())
                    await self.uow.commit()
                except StoreError as exc:
                    await self.uow.rollback()
                    logger.warning(f"Could not flag summons {summons_id} as notified: {exc}")
                except Exception:
                    await self.uow.rollback()
                    logger.exception(f"Unexpected error flagging summons {summons_id} as notified")
            else:
                warnings.append(NOTIFICATION_FAILED)

        return Return.ok(
            SendInviteResponse(
                summons_id=summons_id,
                invite_link=invite_link,
                status=SummonsStatus.pending.value,
                role=court_role.value,
                expires_at=expires_at.isoformat(),
                notification_sent=notification_sent,
                warnings=warnings,
            )
        )

    async def _notify(
        self, notification: WitnessInvitationNotification, summons_id: str
    ) -> bool:
        try:
            await self.notifier.send(notification)
        except NotificationError as exc:
            logger.warning(f"Failed to send invitation email for summons {summons_id}: {exc}")
            return False
        except Exception:
            logger.exception(f"Unexpected error sending invitation email for summons {summons_id}")
            return False
        return True
