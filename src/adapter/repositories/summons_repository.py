from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateTokenError, StoreError
from src.app.repositories.summons_repository import ISummonsRepository
from src.domain.entities import WitnessSummons


class SummonsRepository(ISummonsRepository):
    """Witness summons repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, summons_id: UUID) -> Optional[WitnessSummons]:
        """Get summons by ID"""
        stmt = select(WitnessSummons).where(WitnessSummons.id == summons_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_token(self, token: str) -> Optional[WitnessSummons]:
        """Get summons by token"""
        stmt = select(WitnessSummons).where(WitnessSummons.token == token)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_session(self, session_id: str) -> List[WitnessSummons]:
        """Get all summons for a court session, newest first"""
        stmt = (
            select(WitnessSummons)
            .where(WitnessSummons.session_id == session_id)
            .order_by(WitnessSummons.invited_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, summons: WitnessSummons) -> WitnessSummons:
        """Create a new summons"""
        self.session.add(summons)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if "token" in str(exc.orig):
                raise DuplicateTokenError(str(exc.orig)) from exc
            raise StoreError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        await self.session.refresh(summons)
        return summons

    async def update(self, summons: WitnessSummons) -> WitnessSummons:
        """Update existing summons"""
        self.session.add(summons)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        await self.session.refresh(summons)
        return summons

    async def mark_email_sent(self, token: str, sent_at: datetime) -> None:
        """Flag the summons with this token as notified"""
        stmt = (
            update(WitnessSummons)
            .where(WitnessSummons.token == token)
            .values(email_sent=True, email_sent_at=sent_at)
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
