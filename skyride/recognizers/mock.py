"""Mock recognizers for testing."""

from typing import Any

from skyride.recognizers.base import (
    DateTimeRecognizer,
    ModelResult,
    NumberRecognizer,
)


def number_result(value: int | float | str, text: str | None = None) -> ModelResult:
    """Build a number result resolving to ``value``."""
    text = text or str(value)
    return ModelResult(
        text=text,
        start=0,
        end=max(len(text) - 1, 0),
        type_name="number",
        resolution={"value": str(value)},
    )


def datetime_result(*values: dict[str, str], text: str = "") -> ModelResult:
    """Build a date-time result carrying the given resolution values."""
    return ModelResult(
        text=text,
        start=0,
        end=max(len(text) - 1, 0),
        type_name="datetimeV2.datetime",
        resolution={"values": list(values)},
    )


class _MockRecognizer:
    def __init__(
        self,
        results: dict[str, list[ModelResult]] | None = None,
        default: list[ModelResult] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize mock recognizer.

        Args:
            results: Dict mapping input text to the results to return
            default: Results for any input not in ``results``
            error: Raised on every call when set
        """
        self._results = results or {}
        self._default = default or []
        self._error = error
        self._call_history: list[dict[str, Any]] = []

    @property
    def call_history(self) -> list[dict[str, Any]]:
        """Return history of calls for testing assertions."""
        return self._call_history

    def set_results(self, text: str, results: list[ModelResult]) -> None:
        self._results[text] = results

    def fail_with(self, error: Exception | None) -> None:
        self._error = error

    def recognize(self, text: str, culture: str = "en-us") -> list[ModelResult]:
        self._call_history.append({"text": text, "culture": culture})
        if self._error is not None:
            raise self._error
        return list(self._results.get(text, self._default))


class MockNumberRecognizer(_MockRecognizer, NumberRecognizer):
    """Number recognizer returning configured results."""

    pass


class MockDateTimeRecognizer(_MockRecognizer, DateTimeRecognizer):
    """Date-time recognizer returning configured results."""

    pass
