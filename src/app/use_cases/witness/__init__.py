"""
Witness Summons Use Cases

All summons-related business logic.
"""

from .dtos import (
    RespondToSummonsResponse,
    SendInviteResponse,
    SessionSummonsResponse,
    SummonsSummary,
    WitnessLogEntry,
    WitnessLogsResponse,
)
from .get_witness_logs_use_case import GetWitnessLogsUseCase
from .list_session_summons_use_case import ListSessionSummonsUseCase
from .resolve_summons_use_case import ResolveSummonsUseCase
from .respond_to_summons_use_case import RespondToSummonsUseCase
from .send_invite_use_case import SendInviteUseCase, build_invite_link

__all__ = [
    "SendInviteUseCase",
    "ResolveSummonsUseCase",
    "RespondToSummonsUseCase",
    "ListSessionSummonsUseCase",
    "GetWitnessLogsUseCase",
    "build_invite_link",
    "SendInviteResponse",
    "SummonsSummary",
    "SessionSummonsResponse",
    "RespondToSummonsResponse",
    "WitnessLogEntry",
    "WitnessLogsResponse",
]
