"""
Witness Invitation API Routes

Endpoints behind the invite link: resolving a summons token and recording
the invitee's answer.
"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.witness import (
    ResolveSummonsUseCase,
    RespondToSummonsResponse,
    RespondToSummonsUseCase,
    SummonsSummary,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/witness-invitation", tags=["Witness Invitation"])


def _raise_for(error):
    if error.code == "INVALID_TOKEN":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "SUMMONS_ALREADY_RESPONDED":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "SUMMONS_EXPIRED":
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    raise ServerError(error)


class RespondToSummonsRequest(BaseModel):
    """Respond to summons HTTP request payload"""

    token: str = Field(..., description="Summons token from the invite link")
    accept: bool = Field(..., description="True to accept, False to decline")


@router.get("", status_code=status.HTTP_200_OK, response_model=SummonsSummary)
async def resolve_summons(
    token: str = Query(..., description="Summons token"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resolve a summons token.

    Raises:
        - 404 Not Found: INVALID_TOKEN
        - 409 Conflict: SUMMONS_ALREADY_RESPONDED
        - 410 Gone: SUMMONS_EXPIRED
    """
    use_case = ResolveSummonsUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post(
    "/respond",
    status_code=status.HTTP_200_OK,
    response_model=RespondToSummonsResponse,
)
async def respond_to_summons(
    request: RespondToSummonsRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept or decline a summons.

    Raises:
        - 404 Not Found: INVALID_TOKEN
        - 409 Conflict: SUMMONS_ALREADY_RESPONDED
        - 410 Gone: SUMMONS_EXPIRED
        - 500 Internal Server Error: SUMMONS_UPDATE_FAILED
    """
    use_case = RespondToSummonsUseCase(uow)
    result = await use_case.execute(request.token, request.accept)

    if result.is_err():
        _raise_for(result.error)

    return result.value
