"""Recognition capabilities used by the slot validators.

Abstract interfaces for number and date-time recognition, default
rule-based implementations and mocks for tests.
"""

from skyride.recognizers.base import (
    DateTimeRecognizer,
    ModelResult,
    NumberRecognizer,
    RecognitionError,
)
from skyride.recognizers.dates import DefaultDateTimeRecognizer
from skyride.recognizers.mock import MockDateTimeRecognizer, MockNumberRecognizer
from skyride.recognizers.number import DefaultNumberRecognizer

__all__ = [
    # Interfaces
    "NumberRecognizer",
    "DateTimeRecognizer",
    "ModelResult",
    "RecognitionError",
    # Defaults
    "DefaultNumberRecognizer",
    "DefaultDateTimeRecognizer",
    # Testing
    "MockNumberRecognizer",
    "MockDateTimeRecognizer",
]
