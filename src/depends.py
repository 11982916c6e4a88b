from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.http_notifier import HttpWitnessNotifier
from src.adapter.services.logging_notifier import LoggingNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.notifier import INotifier

engine = create_async_engine(
    ApplicationConfig.DB_URI,
    echo=False,
    future=True,
    connect_args={"timeout": ApplicationConfig.DB_LOCK_TIMEOUT},
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier() -> INotifier:
    """
    Notification dispatcher for witness invitations.

    Falls back to logging the email when no mail function URL is configured.
    """
    if ApplicationConfig.NOTIFIER_URL:
        return HttpWitnessNotifier(
            url=ApplicationConfig.NOTIFIER_URL,
            api_key=ApplicationConfig.NOTIFIER_API_KEY,
            timeout=ApplicationConfig.NOTIFIER_TIMEOUT,
        )
    return LoggingNotifier()


def get_site_url() -> str:
    return ApplicationConfig.SITE_URL


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and role

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload
