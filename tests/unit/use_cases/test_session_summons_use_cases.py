from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.witness import GetWitnessLogsUseCase, ListSessionSummonsUseCase
from src.domain.entities import CourtRole, SummonsStatus, WitnessLog, WitnessSummons


@pytest.mark.asyncio
async def test_list_session_summons(mock_uow):
    invited_at = datetime(2026, 5, 1, 10, 0, 0)
    mock_uow.summons.get_by_session.return_value = [
        WitnessSummons(
            id=uuid4(),
            session_id="session-1",
            invited_email=f"p{i}@example.org",
            invited_by="user-1",
            invited_at=invited_at,
            status=SummonsStatus.pending,
            role=CourtRole.observer,
            token=f"token-{i}",
            expires_at=invited_at + timedelta(hours=24),
        )
        for i in range(2)
    ]
    use_case = ListSessionSummonsUseCase(mock_uow)

    result = await use_case.execute("session-1")

    assert result.is_ok()
    assert [s.invited_email for s in result.value.summons] == [
        "p0@example.org",
        "p1@example.org",
    ]
    assert result.value.summons[0].expires_at == "2026-05-02T10:00:00"
    mock_uow.summons.get_by_session.assert_called_once_with("session-1")


@pytest.mark.asyncio
async def test_list_session_summons_requires_session(mock_uow):
    use_case = ListSessionSummonsUseCase(mock_uow)

    result = await use_case.execute(" ")

    assert result.is_err()
    assert result.error.code == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_get_witness_logs(mock_uow):
    mock_uow.witness_logs.get_by_session.return_value = [
        WitnessLog(
            session_id="session-1",
            user_id="user-1",
            action="witness_summoned",
            details="Summoned a@example.org as judge",
            timestamp=datetime(2026, 5, 1, 10, 0, 0),
        )
    ]
    use_case = GetWitnessLogsUseCase(mock_uow)

    result = await use_case.execute("session-1", limit=10)

    assert result.is_ok()
    entry = result.value.entries[0]
    assert entry.action == "witness_summoned"
    assert entry.user_id == "user-1"
    assert entry.timestamp == "2026-05-01T10:00:00"
    mock_uow.witness_logs.get_by_session.assert_called_once_with("session-1", limit=10)
