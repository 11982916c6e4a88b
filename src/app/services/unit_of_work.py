from abc import ABC, abstractmethod

from src.app.repositories.scroll_response_log_repository import IScrollResponseLogRepository
from src.app.repositories.summons_repository import ISummonsRepository
from src.app.repositories.witness_log_repository import IWitnessLogRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    summons: ISummonsRepository
    witness_logs: IWitnessLogRepository
    scroll_responses: IScrollResponseLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
