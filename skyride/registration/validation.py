"""Slot validators for the registration flow.

Each validator takes the trimmed text of the user's answer and returns a
ValidationOutcome: Accepted with the normalized value, or Rejected with the
message to reprompt with. Bad input is never signalled by raising; a
recognizer that raises is logged and turned into a Rejected outcome.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Generic, TypeVar

from dateutil import parser as dateparser

from skyride.observability.logging import get_logger
from skyride.observability.metrics import RECOGNIZER_FAILURES
from skyride.recognizers.base import DateTimeRecognizer, NumberRecognizer
from skyride.registration import prompts

logger = get_logger(__name__)

T = TypeVar("T")


class RejectionReason(str, Enum):
    """Why an answer was rejected. Used for logs and metrics only."""

    EMPTY = "empty"
    OUT_OF_RANGE = "out_of_range"
    UNRECOGNIZED = "unrecognized"
    TOO_SOON = "too_soon"
    RECOGNIZER_ERROR = "recognizer_error"


@dataclass(frozen=True)
class Accepted(Generic[T]):
    """The answer was valid; ``value`` is its normalized form."""

    value: T


@dataclass(frozen=True)
class Rejected:
    """The answer was not valid; ``message`` is shown to the user."""

    message: str
    reason: RejectionReason


ValidationOutcome = Accepted[T] | Rejected


def validate_name(text: str) -> ValidationOutcome[str]:
    """Accept any name with at least one non-space character."""
    name = (text or "").strip()
    if not name:
        return Rejected(prompts.NAME_REQUIRED, RejectionReason.EMPTY)
    return Accepted(name)


def _as_int(value: Any) -> int | None:
    """Convert a resolved number to int, or None if it is not integral."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


class AgeValidator:
    """Accepts the first recognized number inside [min_age, max_age].

    Works for "25" as well as "twenty five" or "two dozen".
    """

    def __init__(
        self,
        recognizer: NumberRecognizer,
        min_age: int = 18,
        max_age: int = 120,
        culture: str = "en-us",
    ) -> None:
        self._recognizer = recognizer
        self.min_age = min_age
        self.max_age = max_age
        self._culture = culture

    def __call__(self, text: str) -> ValidationOutcome[int]:
        try:
            results = self._recognizer.recognize(text, self._culture)
        except Exception as e:
            logger.warning(
                "recognizer_failed",
                capability="number",
                error=str(e),
                error_type=type(e).__name__,
            )
            RECOGNIZER_FAILURES.labels(capability="number").inc()
            return Rejected(
                prompts.age_uninterpretable(self.min_age, self.max_age),
                RejectionReason.RECOGNIZER_ERROR,
            )

        for result in results:
            age = _as_int(result.resolution.get("value"))
            if age is not None and self.min_age <= age <= self.max_age:
                return Accepted(age)

        reason = RejectionReason.OUT_OF_RANGE if results else RejectionReason.UNRECOGNIZED
        return Rejected(prompts.age_out_of_range(self.min_age, self.max_age), reason)


class DateValidator:
    """Accepts the first recognized date-time at least ``min_lead`` from now.

    Candidates are taken in recognizer order; for each resolution the
    ``value`` is used when present, otherwise the range ``start``. The
    accepted date is normalized with ``date_format`` and loses its time.
    """

    def __init__(
        self,
        recognizer: DateTimeRecognizer,
        min_lead: timedelta = timedelta(hours=1),
        date_format: str = "%m/%d/%Y",
        culture: str = "en-us",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._recognizer = recognizer
        self.min_lead = min_lead
        self._date_format = date_format
        self._culture = culture
        self._clock = clock

    @property
    def _lead_minutes(self) -> int:
        return int(self.min_lead.total_seconds() // 60)

    def __call__(self, text: str) -> ValidationOutcome[str]:
        try:
            results = self._recognizer.recognize(text, self._culture)
            earliest = self._clock() + self.min_lead
            parsed_any = False
            for result in results:
                for resolution in result.resolution.get("values", []):
                    candidate = self._parse(resolution.get("value") or resolution.get("start"))
                    if candidate is None:
                        continue
                    parsed_any = True
                    if candidate > earliest:
                        return Accepted(candidate.strftime(self._date_format))
        except Exception as e:
            logger.warning(
                "recognizer_failed",
                capability="datetime",
                error=str(e),
                error_type=type(e).__name__,
            )
            RECOGNIZER_FAILURES.labels(capability="datetime").inc()
            return Rejected(
                prompts.date_uninterpretable(self._lead_minutes),
                RejectionReason.RECOGNIZER_ERROR,
            )

        reason = RejectionReason.TOO_SOON if parsed_any else RejectionReason.UNRECOGNIZED
        return Rejected(prompts.date_too_soon(self._lead_minutes), reason)

    def _parse(self, raw: str | None) -> datetime | None:
        if not raw:
            return None
        try:
            candidate = dateparser.parse(raw)
        except (ValueError, OverflowError):
            return None
        if candidate.tzinfo is not None:
            candidate = candidate.astimezone().replace(tzinfo=None)
        return candidate
