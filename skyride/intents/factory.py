"""Build intent classifiers from configuration."""

from skyride.config.models.intents import IntentClassifierConfig, IntentsConfig
from skyride.intents.base import IntentClassifier
from skyride.intents.keyword import KeywordIntentClassifier
from skyride.intents.mock import MockIntentClassifier
from skyride.observability.logging import get_logger

logger = get_logger(__name__)


def create_classifier(name: str, config: IntentClassifierConfig) -> IntentClassifier:
    """Create one classifier from its configuration."""
    if config.provider == "mock":
        return MockIntentClassifier(name=name)
    return KeywordIntentClassifier(
        intents=config.intents,
        min_score=config.min_score,
        name=name,
    )


def create_classifiers(config: IntentsConfig) -> dict[str, IntentClassifier]:
    """Create every named classifier in the intents configuration."""
    classifiers = {
        name: create_classifier(name, classifier_config)
        for name, classifier_config in config.classifiers.items()
    }
    logger.debug("intent_classifiers_created", names=sorted(classifiers))
    return classifiers
