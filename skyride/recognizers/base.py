"""Recognition result model, error type and capability interfaces.

Recognizers turn free text into candidate resolutions. They never judge
whether a candidate is acceptable; that is the validators' job.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from skyride.errors import SkyRideError


class ModelResult(BaseModel):
    """One recognized span of the input text."""

    text: str = Field(..., description="Matched text")
    start: int = Field(..., ge=0, description="Start offset in the input")
    end: int = Field(..., ge=0, description="End offset (inclusive)")
    type_name: str = Field(..., description="Kind of entity recognized")
    resolution: dict[str, Any] = Field(
        default_factory=dict, description="Resolved value(s)"
    )


class RecognitionError(SkyRideError):
    """A recognizer could not process its input."""

    pass


class NumberRecognizer(ABC):
    """Recognizes cardinal numbers written as digits or words.

    Each result carries ``resolution["value"]`` as a numeric string.
    """

    @abstractmethod
    def recognize(self, text: str, culture: str = "en-us") -> list[ModelResult]:
        """Return candidate numbers in the order they appear."""
        pass


class DateTimeRecognizer(ABC):
    """Recognizes dates, times and date ranges.

    Each result carries ``resolution["values"]``: a list of dicts holding
    either a ``value`` or a ``start``/``end`` pair of date-time strings.
    """

    @abstractmethod
    def recognize(self, text: str, culture: str = "en-us") -> list[ModelResult]:
        """Return candidate date-times in the order they appear."""
        pass
