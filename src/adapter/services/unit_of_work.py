from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.scroll_response_log_repository import ScrollResponseLogRepository
from src.adapter.repositories.summons_repository import SummonsRepository
from src.adapter.repositories.witness_log_repository import WitnessLogRepository
from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.summons = SummonsRepository(self.session)
        self.witness_logs = WitnessLogRepository(self.session)
        self.scroll_responses = ScrollResponseLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    async def rollback(self):
        await self.session.rollback()
