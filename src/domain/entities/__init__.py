"""
Witness Summons Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    CourtRole,
    SummonsStatus,
    WitnessLogAction,
)

# Export all entities
from .witness_summons import SUMMONS_TTL, WitnessSummons
from .witness_log import WitnessLog
from .scroll_response_log import ScrollResponseLog

__all__ = [
    # Enums
    "CourtRole",
    "SummonsStatus",
    "WitnessLogAction",
    # Entities
    "SUMMONS_TTL",
    "WitnessSummons",
    "WitnessLog",
    "ScrollResponseLog",
]
