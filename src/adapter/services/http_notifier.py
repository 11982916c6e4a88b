"""
HTTP Witness Notifier

Delivers invitations by POSTing them to the mail-sending function.
"""

import logging
from typing import Optional

import httpx

from src.app.services.notifier import (
    INotifier,
    NotificationError,
    WitnessInvitationNotification,
)

logger = logging.getLogger(__name__)


class HttpWitnessNotifier(INotifier):
    """
    Notifier backed by an HTTP mail function.

    The function receives {email, role, sessionId, token, inviteLink} and
    answers {"success": bool, "message"|"error": str}.
    """

    def __init__(
        self,
        url: str,
        api_key: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def send(self, notification: WitnessInvitationNotification) -> None:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "email": notification.email,
            "role": notification.role,
            "sessionId": notification.session_id,
            "token": notification.token,
            "inviteLink": notification.invite_link,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(self.url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NotificationError(f"Mail function request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if isinstance(body, dict) and body.get("success") is False:
            raise NotificationError(body.get("error") or "Mail function reported failure")

        logger.info(f"Invitation sent to {notification.email} for session {notification.session_id}")
