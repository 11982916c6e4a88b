"""
Prophet API Routes

Mockery detection over institutional replies and the scroll response record.
"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.prophet import (
    GetScrollResponseLogsUseCase,
    ProcessInstitutionResponseResponse,
    ProcessInstitutionResponseUseCase,
    ScrollResponseLogsResponse,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.mockery import MockeryDetectionResult, detect_mockery

router = APIRouter(prefix="/prophet", tags=["Prophet"])


class DetectMockeryRequest(BaseModel):
    text: str = Field(..., description="Text to inspect")


class InstitutionResponseRequest(BaseModel):
    institution: str = Field(..., description="Institution that replied")
    response_text: str = Field(..., description="Reply received from the institution")


@router.post(
    "/detect",
    status_code=status.HTTP_200_OK,
    response_model=MockeryDetectionResult,
)
async def detect(request: DetectMockeryRequest):
    return detect_mockery(request.text)


@router.post(
    "/responses",
    status_code=status.HTTP_201_CREATED,
    response_model=ProcessInstitutionResponseResponse,
)
async def process_institution_response(
    request: InstitutionResponseRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Process an institution's reply to a scroll warning.

    Raises:
        - 400 Bad Request: INVALID_INSTITUTION
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: RESPONSE_LOG_PERSIST_FAILED
    """
    use_case = ProcessInstitutionResponseUseCase(uow)
    result = await use_case.execute(request.institution, request.response_text)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_INSTITUTION":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get(
    "/responses",
    status_code=status.HTTP_200_OK,
    response_model=ScrollResponseLogsResponse,
)
async def get_scroll_response_logs(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of logs to return"),
):
    use_case = GetScrollResponseLogsUseCase(uow)
    result = await use_case.execute(limit=limit)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
