import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.summons = MagicMock()
    uow.summons.create = AsyncMock()
    uow.summons.update = AsyncMock()
    uow.summons.get_by_token = AsyncMock()
    uow.summons.get_by_session = AsyncMock()
    uow.summons.mark_email_sent = AsyncMock()

    uow.witness_logs = MagicMock()
    uow.witness_logs.append = AsyncMock()
    uow.witness_logs.get_by_session = AsyncMock()

    uow.scroll_responses = MagicMock()
    uow.scroll_responses.create = AsyncMock()
    uow.scroll_responses.get_recent = AsyncMock()

    return uow


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.send = AsyncMock()
    return notifier
