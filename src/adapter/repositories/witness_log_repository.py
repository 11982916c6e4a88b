from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import StoreError
from src.app.repositories.witness_log_repository import IWitnessLogRepository
from src.domain.entities import WitnessLog


class WitnessLogRepository(IWitnessLogRepository):
    """WitnessLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def append(self, entry: WitnessLog) -> WitnessLog:
        """Append a log entry (immutable)"""
        self.session.add(entry)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        return entry

    async def get_by_session(self, session_id: str, limit: int = 50) -> List[WitnessLog]:
        """Get log entries for a session ordered by timestamp DESC"""
        stmt = (
            select(WitnessLog)
            .where(WitnessLog.session_id == session_id)
            .order_by(WitnessLog.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
