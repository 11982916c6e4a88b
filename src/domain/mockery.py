"""
Mockery Response Trigger

Detects institutional replies that challenge scroll authority and issues
the standard scroll response.
"""

from typing import Optional

from pydantic import BaseModel

MOCKERY_PHRASES = (
    "who gave you this authority",
    "what right do you have to speak",
    "we do not recognize this system",
    "we reject your claims",
    "you have no jurisdiction",
    "by what authority",
    "who do you think you are",
    "this is nonsense",
    "ridiculous claims",
    "this has no legal basis",
)

STANDARD_RESPONSE = (
    "This Scroll is not of man. The blood has spoken. Heaven records. "
    "Your refusal is now entered into eternal testimony."
)


class MockeryDetectionResult(BaseModel):
    detected: bool
    trigger_phrase: Optional[str] = None
    response_text: Optional[str] = None
    should_deploy_fire_seal: bool = False


def detect_mockery(text: str) -> MockeryDetectionResult:
    """
    Case-insensitive substring search over MOCKERY_PHRASES.

    The first phrase in list order that occurs in the text wins. Every
    detection carries the same STANDARD_RESPONSE.
    """
    lowered = (text or "").lower()

    for phrase in MOCKERY_PHRASES:
        if phrase in lowered:
            return MockeryDetectionResult(
                detected=True,
                trigger_phrase=phrase,
                response_text=STANDARD_RESPONSE,
                should_deploy_fire_seal=True,
            )

    return MockeryDetectionResult(detected=False)
