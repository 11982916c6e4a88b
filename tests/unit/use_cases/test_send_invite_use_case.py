from datetime import datetime, timedelta

import pytest

from src.app.repositories.errors import DuplicateTokenError, StoreError
from src.app.services.notifier import NotificationError
from src.app.use_cases.witness.send_invite_use_case import SendInviteUseCase
from src.domain.entities import CourtRole, SummonsStatus

SITE_URL = "https://example.org"
FIXED_NOW = datetime(2026, 3, 14, 9, 26, 53)


class FixedTokenGenerator:
    def __init__(self, token: str):
        self.token = token

    def generate(self) -> str:
        return self.token


def make_use_case(mock_uow, mock_notifier, token="abc123", now=FIXED_NOW):
    return SendInviteUseCase(
        mock_uow,
        mock_notifier,
        SITE_URL,
        token_generator=FixedTokenGenerator(token),
        clock=lambda: now,
    )


@pytest.mark.asyncio
async def test_successful_summons(mock_uow, mock_notifier):
    """Summons is persisted, logged and dispatched, in that order"""
    # Arrange
    calls = []
    mock_uow.summons.create.side_effect = lambda s: calls.append("persist")
    mock_uow.witness_logs.append.side_effect = lambda e: calls.append("audit")
    mock_notifier.send.side_effect = lambda n: calls.append("notify")

    use_case = make_use_case(mock_uow, mock_notifier)

    # Act
    result = await use_case.execute(
        "witness@example.org", "witness", "session-1", "user-1"
    )

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.invite_link == "https://example.org/witness-invitation?token=abc123"
    assert response.status == "pending"
    assert response.role == "witness"
    assert response.notification_sent is True
    assert response.warnings == []
    assert len(response.summons_id) == 36
    assert calls == ["persist", "audit", "notify"]

    created = mock_uow.summons.create.call_args[0][0]
    assert created.invited_email == "witness@example.org"
    assert created.session_id == "session-1"
    assert created.invited_by == "user-1"
    assert created.role == CourtRole.witness
    assert created.status == SummonsStatus.pending
    assert created.token == "abc123"

    log_entry = mock_uow.witness_logs.append.call_args[0][0]
    assert log_entry.action == "witness_summoned"
    assert log_entry.session_id == "session-1"
    assert log_entry.user_id == "user-1"
    assert log_entry.details == "Summoned witness@example.org as witness"

    notification = mock_notifier.send.call_args[0][0]
    assert notification.email == "witness@example.org"
    assert notification.role == "witness"
    assert notification.session_id == "session-1"
    assert notification.token == "abc123"
    assert notification.invite_link == response.invite_link

    mock_uow.summons.mark_email_sent.assert_called_once_with("abc123", FIXED_NOW)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "invited_at",
    [
        datetime(2026, 1, 1, 0, 0, 0),
        datetime(2026, 2, 28, 23, 59, 59),
        datetime(2028, 2, 29, 12, 30, 1),
        datetime(2026, 12, 31, 23, 0, 0),
    ],
)
async def test_expiry_is_exactly_24_hours(mock_uow, mock_notifier, invited_at):
    use_case = make_use_case(mock_uow, mock_notifier, now=invited_at)

    result = await use_case.execute("a@example.org", "judge", "session-1", "user-1")

    assert result.is_ok()
    created = mock_uow.summons.create.call_args[0][0]
    assert created.invited_at == invited_at
    assert created.expires_at - created.invited_at == timedelta(hours=24)
    assert result.value.expires_at == (invited_at + timedelta(hours=24)).isoformat()


@pytest.mark.asyncio
async def test_invite_link_strips_trailing_slash(mock_uow, mock_notifier):
    use_case = SendInviteUseCase(
        mock_uow,
        mock_notifier,
        "https://example.org/",
        token_generator=FixedTokenGenerator("abc123"),
    )

    result = await use_case.execute("a@example.org", "steward", "session-1", "user-1")

    assert result.value.invite_link == "https://example.org/witness-invitation?token=abc123"


@pytest.mark.asyncio
async def test_notification_failure_is_not_fatal(mock_uow, mock_notifier):
    """Dispatch failure still returns the link with the summons persisted as pending"""
    mock_notifier.send.side_effect = NotificationError("mail function down")
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "advocate", "session-1", "user-1")

    assert result.is_ok()
    response = result.value
    assert response.invite_link == "https://example.org/witness-invitation?token=abc123"
    assert response.notification_sent is False
    assert response.warnings == ["NOTIFICATION_FAILED"]

    mock_uow.summons.create.assert_called_once()
    assert mock_uow.summons.create.call_args[0][0].status == SummonsStatus.pending
    mock_uow.summons.mark_email_sent.assert_not_called()


@pytest.mark.asyncio
async def test_audit_failure_is_not_fatal(mock_uow, mock_notifier):
    mock_uow.witness_logs.append.side_effect = StoreError("log table unavailable")
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "observer", "session-1", "user-1")

    assert result.is_ok()
    assert result.value.warnings == ["AUDIT_LOG_FAILED"]
    assert result.value.notification_sent is True
    mock_uow.rollback.assert_called_once()
    # Notification still goes out after a failed audit append
    mock_notifier.send.assert_called_once()


@pytest.mark.asyncio
async def test_persistence_failure_is_fatal(mock_uow, mock_notifier):
    """No audit entry and no notification when the summons is not persisted"""
    mock_uow.summons.create.side_effect = StoreError("store unreachable")
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "witness", "session-1", "user-1")

    assert result.is_err()
    assert result.error.code == "SUMMONS_PERSIST_FAILED"
    mock_uow.witness_logs.append.assert_not_called()
    mock_notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_commit_failure_is_fatal(mock_uow, mock_notifier):
    mock_uow.commit.side_effect = StoreError("commit failed")
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "witness", "session-1", "user-1")

    assert result.is_err()
    assert result.error.code == "SUMMONS_PERSIST_FAILED"
    mock_uow.witness_logs.append.assert_not_called()
    mock_notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_token_is_reported(mock_uow, mock_notifier):
    mock_uow.summons.create.side_effect = DuplicateTokenError("token exists")
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "witness", "session-1", "user-1")

    assert result.is_err()
    assert result.error.code == "DUPLICATE_TOKEN"
    # Not retried by the use case
    mock_uow.summons.create.assert_called_once()
    mock_notifier.send.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, role, session_id, invited_by, code",
    [
        ("", "witness", "session-1", "user-1", "INVALID_EMAIL"),
        ("   ", "witness", "session-1", "user-1", "INVALID_EMAIL"),
        (None, "witness", "session-1", "user-1", "INVALID_EMAIL"),
        ("a@example.org", "bailiff", "session-1", "user-1", "INVALID_ROLE"),
        ("a@example.org", "", "session-1", "user-1", "INVALID_ROLE"),
        ("a@example.org", "witness", "", "user-1", "INVALID_SESSION"),
        ("a@example.org", "witness", "session-1", "", "INVALID_INVITER"),
    ],
)
async def test_input_errors_have_no_side_effects(
    mock_uow, mock_notifier, email, role, session_id, invited_by, code
):
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute(email, role, session_id, invited_by)

    assert result.is_err()
    assert result.error.code == code
    mock_uow.summons.create.assert_not_called()
    mock_uow.witness_logs.append.assert_not_called()
    mock_notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_email_format_is_not_validated(mock_uow, mock_notifier):
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("not-an-email", "witness", "session-1", "user-1")

    assert result.is_ok()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [r.value for r in CourtRole])
async def test_every_court_role_is_accepted(mock_uow, mock_notifier, role):
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", role, "session-1", "user-1")

    assert result.is_ok()
    assert result.value.role == role


@pytest.mark.asyncio
async def test_each_invite_gets_a_fresh_token(mock_uow, mock_notifier):
    use_case = SendInviteUseCase(mock_uow, mock_notifier, SITE_URL)

    first = await use_case.execute("a@example.org", "witness", "session-1", "user-1")
    second = await use_case.execute("a@example.org", "witness", "session-1", "user-1")

    tokens = [c[0][0].token for c in mock_uow.summons.create.call_args_list]
    assert tokens[0] != tokens[1]
    assert first.value.invite_link != second.value.invite_link


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [ConnectionResetError("peer reset"), RuntimeError("notifier bug")],
)
async def test_unexpected_notifier_error_is_not_fatal(mock_uow, mock_notifier, error):
    """Any dispatch error still yields the invite link for the persisted summons"""
    mock_notifier.send.side_effect = error
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "witness", "s-1", "u-1")

    assert result.is_ok()
    assert result.value.invite_link == "https://example.org/witness-invitation?token=abc123"
    assert result.value.notification_sent is False
    assert result.value.warnings == ["NOTIFICATION_FAILED"]
    mock_uow.summons.create.assert_called_once()
    mock_uow.summons.mark_email_sent.assert_not_called()


@pytest.mark.asyncio
async def test_unexpected_audit_error_is_not_fatal(mock_uow, mock_notifier):
    mock_uow.witness_logs.append.side_effect = RuntimeError("log adapter bug")
    use_case = make_use_case(mock_uow, mock_notifier)

    result = await use_case.execute("a@example.org", "witness", "s-1", "u-1")

    assert result.is_ok()
    assert result.value.warnings == ["AUDIT_LOG_FAILED"]
    mock_uow.rollback.assert_called_once()
    mock_notifier.send.assert_called_once()
