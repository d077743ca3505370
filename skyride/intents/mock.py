"""Mock intent classifier for testing."""

from typing import Any

from skyride.intents.base import IntentClassifier, IntentResult


class MockIntentClassifier(IntentClassifier):
    """Returns configured results without any real classification."""

    def __init__(
        self,
        results: dict[str, IntentResult | None] | None = None,
        default: IntentResult | None = None,
        error: Exception | None = None,
        name: str = "mock",
    ) -> None:
        """Initialize mock classifier.

        Args:
            results: Dict mapping utterances to results
            default: Result for utterances not in ``results``
            error: Raised on every call when set
            name: Classifier name
        """
        self._results = results or {}
        self._default = default
        self._error = error
        self._name = name
        self._call_history: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_history(self) -> list[dict[str, Any]]:
        """Return history of calls for testing assertions."""
        return self._call_history

    def set_result(self, utterance: str, result: IntentResult | None) -> None:
        self._results[utterance] = result

    async def classify(self, utterance: str) -> IntentResult | None:
        self._call_history.append({"utterance": utterance})
        if self._error is not None:
            raise self._error
        return self._results.get(utterance, self._default)
