from abc import ABC, abstractmethod

from pydantic import BaseModel


class WitnessInvitationNotification(BaseModel):
    """Payload handed to the notification dispatcher"""

    email: str
    role: str
    session_id: str
    token: str
    invite_link: str


class NotificationError(Exception):
    """Raised when an invitation could not be dispatched"""


class INotifier(ABC):
    """Notification dispatcher interface - application layer"""

    @abstractmethod
    async def send(self, notification: WitnessInvitationNotification) -> None:
        """
        Dispatch an invitation.

        Raises:
            NotificationError: the dispatch failed
        """
        pass
