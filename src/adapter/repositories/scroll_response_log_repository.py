from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import StoreError
from src.app.repositories.scroll_response_log_repository import IScrollResponseLogRepository
from src.domain.entities import ScrollResponseLog


class ScrollResponseLogRepository(IScrollResponseLogRepository):
    """ScrollResponseLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, response_log: ScrollResponseLog) -> ScrollResponseLog:
        """Create a new response log"""
        self.session.add(response_log)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        return response_log

    async def get_recent(self, limit: int = 50) -> List[ScrollResponseLog]:
        """Get response logs ordered by timestamp DESC"""
        stmt = (
            select(ScrollResponseLog)
            .order_by(ScrollResponseLog.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
