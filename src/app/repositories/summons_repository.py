from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import WitnessSummons


class ISummonsRepository(ABC):
    """Witness summons repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, summons_id: UUID) -> Optional[WitnessSummons]:
        """Get summons by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[WitnessSummons]:
        """Get summons by token"""
        pass

    @abstractmethod
    async def get_by_session(self, session_id: str) -> List[WitnessSummons]:
        """Get all summons for a court session, newest first"""
        pass

    @abstractmethod
    async def create(self, summons: WitnessSummons) -> WitnessSummons:
        """
        Create a new summons.

        Raises:
            DuplicateTokenError: token already used by another summons
            StoreError: any other persistence failure
        """
        pass

    @abstractmethod
    async def update(self, summons: WitnessSummons) -> WitnessSummons:
        """Update existing summons"""
        pass

    @abstractmethod
    async def mark_email_sent(self, token: str, sent_at: datetime) -> None:
        """Flag the summons with this token as notified"""
        pass
