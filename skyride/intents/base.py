"""Intent classification interface, result model and error type."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from skyride.errors import SkyRideError

# Label a classifier uses when it recognizes no intent
NO_INTENT = "None"


class IntentResult(BaseModel):
    """Top scoring intent for an utterance."""

    label: str = Field(..., description="Intent label")
    score: float = Field(..., ge=0.0, le=1.0, description="Confidence score")

    @property
    def is_none(self) -> bool:
        return self.label == NO_INTENT


class IntentClassificationError(SkyRideError):
    """The classifier could not produce a result."""

    pass


class IntentClassifier(ABC):
    """Classifies an utterance into one intent label.

    Results are informational only; they never decide how a turn is routed.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the classifier name."""
        pass

    @abstractmethod
    async def classify(self, utterance: str) -> IntentResult | None:
        """Return the top scoring intent, or None when nothing matched."""
        pass
