"""
Logging Witness Notifier

Used when no mail function is configured: renders the invitation email and
writes it to the log instead of sending it.
"""

import logging
from typing import Tuple

from src.app.services.notifier import INotifier, WitnessInvitationNotification

logger = logging.getLogger(__name__)

INVITATION_SUBJECT = "You've Been Summoned to a Sacred Court Session"


def render_invitation_email(notification: WitnessInvitationNotification) -> Tuple[str, str]:
    body = (
        f"You have been summoned to participate as a {notification.role} "
        f"in court session {notification.session_id}. "
        f"Click the link to respond to this summon: {notification.invite_link}\n"
        "This summons expires in 24 hours."
    )
    return INVITATION_SUBJECT, body


class LoggingNotifier(INotifier):
    async def send(self, notification: WitnessInvitationNotification) -> None:
        subject, body = render_invitation_email(notification)
        logger.info(f"Email invitation would be sent to: {notification.email}")
        logger.info(f"Subject: {subject}")
        logger.info(f"Body: {body}")
