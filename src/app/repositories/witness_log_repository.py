from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import WitnessLog


class IWitnessLogRepository(ABC):
    """WitnessLog repository interface - application layer"""

    @abstractmethod
    async def append(self, entry: WitnessLog) -> WitnessLog:
        """Append a log entry (immutable)"""
        pass

    @abstractmethod
    async def get_by_session(self, session_id: str, limit: int = 50) -> List[WitnessLog]:
        """Get log entries for a session ordered by timestamp DESC"""
        pass
