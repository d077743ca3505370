"""Intent classifier configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

IntentClassifierType = Literal["keyword", "mock"]


def default_calendar_intents() -> dict[str, list[str]]:
    return {
        "Calendar.Add": ["add", "create", "schedule", "new", "event", "appointment", "meeting"],
        "Calendar.Find": ["show", "find", "what", "when", "calendar", "tomorrow", "today"],
    }


class IntentClassifierConfig(BaseModel):
    """Configuration for one named intent classifier."""

    provider: IntentClassifierType = Field(
        default="keyword",
        description="Classifier implementation",
    )
    intents: dict[str, list[str]] = Field(
        default_factory=default_calendar_intents,
        description="Intent label -> trigger keywords",
    )
    min_score: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Scores below this report no intent",
    )


class IntentsConfig(BaseModel):
    """Named intent classifiers and which one the dispatcher reports with."""

    default_classifier: str = Field(
        default="skyride",
        description="Classifier key the dispatcher requires",
    )
    classifiers: dict[str, IntentClassifierConfig] = Field(
        default_factory=lambda: {"skyride": IntentClassifierConfig()},
        description="Named classifiers",
    )
