from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import ScrollResponseLog


class IScrollResponseLogRepository(ABC):
    """ScrollResponseLog repository interface - application layer"""

    @abstractmethod
    async def create(self, response_log: ScrollResponseLog) -> ScrollResponseLog:
        """Create a new response log"""
        pass

    @abstractmethod
    async def get_recent(self, limit: int = 50) -> List[ScrollResponseLog]:
        """Get response logs ordered by timestamp DESC"""
        pass
