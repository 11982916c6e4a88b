"""
Summons API Routes

Handles summoning participants to a court session and reading the
session's summons and witness log.
"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.notifier import INotifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.witness import (
    GetWitnessLogsUseCase,
    ListSessionSummonsUseCase,
    SendInviteResponse,
    SendInviteUseCase,
    SessionSummonsResponse,
    WitnessLogsResponse,
)
from src.depends import get_current_user, get_notifier, get_site_url, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Summons"])

INPUT_ERROR_CODES = ("INVALID_EMAIL", "INVALID_ROLE", "INVALID_SESSION", "INVALID_INVITER")


class SendInviteRequest(BaseModel):
    """
    Send invite HTTP request payload

    The email is only required to be non-empty; its format is checked by the
    invitee's own reply flow.
    """

    email: str = Field(..., description="Email address to summon")
    role: str = Field(
        ..., description="Court role (judge/advocate/witness/steward/observer)"
    )


@router.post(
    "/{session_id}/summons",
    status_code=status.HTTP_201_CREATED,
    response_model=SendInviteResponse,
)
async def send_invite(
    session_id: str,
    request: SendInviteRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotifier = Depends(get_notifier),
    site_url: str = Depends(get_site_url),
):
    """
    Summon a participant to a court session.

    The summons is created even when the invitation email cannot be sent;
    such degraded steps are listed in the response's warnings.

    Raises:
        - 400 Bad Request: INVALID_EMAIL, INVALID_ROLE, INVALID_SESSION, INVALID_INVITER
        - 401 Unauthorized: Invalid or expired JWT
        - 409 Conflict: DUPLICATE_TOKEN (retry to issue a new token)
        - 500 Internal Server Error: SUMMONS_PERSIST_FAILED
    """
    use_case = SendInviteUseCase(uow, notifier, site_url)
    result = await use_case.execute(
        email=request.email,
        role=request.role,
        session_id=session_id,
        invited_by=str(current_user["user_id"]),
    )

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code in INPUT_ERROR_CODES:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "DUPLICATE_TOKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get(
    "/{session_id}/summons",
    status_code=status.HTTP_200_OK,
    response_model=SessionSummonsResponse,
)
async def list_session_summons(
    session_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListSessionSummonsUseCase(uow)
    result = await use_case.execute(session_id)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_SESSION":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get(
    "/{session_id}/witness-logs",
    status_code=status.HTTP_200_OK,
    response_model=WitnessLogsResponse,
)
async def get_witness_logs(
    session_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of entries to return"),
):
    """
    Get the witness log of a session, newest first.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = GetWitnessLogsUseCase(uow)
    result = await use_case.execute(session_id, limit=limit)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_SESSION":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
