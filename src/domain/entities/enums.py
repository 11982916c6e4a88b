"""
Witness Summons Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CourtRole(str, Enum):
    """Role a summoned participant takes in a court session"""

    judge = "judge"
    advocate = "advocate"
    witness = "witness"
    steward = "steward"
    observer = "observer"


class SummonsStatus(str, Enum):
    """Witness summons status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"


class WitnessLogAction(str, Enum):
    """Actions recorded in the scroll witness log"""

    witness_summoned = "witness_summoned"
    summons_accepted = "summons_accepted"
    summons_declined = "summons_declined"
