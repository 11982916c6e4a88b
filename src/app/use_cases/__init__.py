"""
Use Cases

Organized into domain folders:
- witness/: Witness summons flow
- prophet/: Mockery detection and scroll responses
"""

from .prophet import (
    GetScrollResponseLogsUseCase,
    ProcessInstitutionResponseUseCase,
)
from .witness import (
    GetWitnessLogsUseCase,
    ListSessionSummonsUseCase,
    ResolveSummonsUseCase,
    RespondToSummonsUseCase,
    SendInviteUseCase,
)

__all__ = [
    # Witness
    "SendInviteUseCase",
    "ResolveSummonsUseCase",
    "RespondToSummonsUseCase",
    "ListSessionSummonsUseCase",
    "GetWitnessLogsUseCase",
    # Prophet
    "ProcessInstitutionResponseUseCase",
    "GetScrollResponseLogsUseCase",
]
