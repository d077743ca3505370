"""Intent classification capability.

The dispatcher reports the top scoring intent of each idle-state message.
"""

from skyride.intents.base import (
    NO_INTENT,
    IntentClassificationError,
    IntentClassifier,
    IntentResult,
)
from skyride.intents.factory import create_classifier, create_classifiers
from skyride.intents.keyword import KeywordIntentClassifier
from skyride.intents.mock import MockIntentClassifier

__all__ = [
    "NO_INTENT",
    "IntentClassificationError",
    "IntentClassifier",
    "IntentResult",
    "KeywordIntentClassifier",
    "MockIntentClassifier",
    "create_classifier",
    "create_classifiers",
]
