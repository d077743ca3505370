"""Configuration model exports.

    from skyride.config.models import RegistrationConfig, IntentsConfig
"""

from skyride.config.models.api import APIConfig
from skyride.config.models.intents import IntentClassifierConfig, IntentsConfig
from skyride.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from skyride.config.models.registration import RegistrationConfig
from skyride.config.models.storage import StorageConfig

__all__ = [
    "APIConfig",
    "IntentClassifierConfig",
    "IntentsConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "RegistrationConfig",
    "StorageConfig",
]
