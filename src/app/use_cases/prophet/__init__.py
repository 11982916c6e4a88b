"""
Prophet Use Cases

Mockery detection and the scroll response record.
"""

from .dtos import (
    ProcessInstitutionResponseResponse,
    ScrollResponseLogEntry,
    ScrollResponseLogsResponse,
)
from .get_scroll_response_logs_use_case import GetScrollResponseLogsUseCase
from .process_institution_response_use_case import ProcessInstitutionResponseUseCase

__all__ = [
    "ProcessInstitutionResponseUseCase",
    "GetScrollResponseLogsUseCase",
    "ProcessInstitutionResponseResponse",
    "ScrollResponseLogEntry",
    "ScrollResponseLogsResponse",
]
