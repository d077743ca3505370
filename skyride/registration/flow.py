"""Conversation flow state machine for the registration dialog.

Questions are asked strictly in the order name, age, date. Each call to
``advance`` performs exactly one transition: the idle state asks the first
question without consuming the input, every other state consumes the input
as the answer to the pending question. A rejected answer leaves state and
profile untouched and reprompts.
"""

from collections.abc import Callable
from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from skyride.config.models.registration import RegistrationConfig
from skyride.conversation.models import FlowState, PendingQuestion, Profile
from skyride.observability.logging import get_logger
from skyride.observability.metrics import REGISTRATIONS_COMPLETED, SLOT_REJECTIONS
from skyride.recognizers.base import DateTimeRecognizer, NumberRecognizer
from skyride.registration import prompts
from skyride.registration.validation import (
    AgeValidator,
    DateValidator,
    Rejected,
    ValidationOutcome,
    validate_name,
)

logger = get_logger(__name__)


class FlowResult(BaseModel):
    """Outcome of one flow transition."""

    flow: FlowState
    profile: Profile
    messages: list[str] = Field(default_factory=list)
    completed: Profile | None = Field(
        default=None,
        description="Filled profile on the turn that finished registration",
    )


class RegistrationFlow:
    """Drives the name → age → date question sequence."""

    def __init__(
        self,
        age_validator: Callable[[str], ValidationOutcome[int]],
        date_validator: Callable[[str], ValidationOutcome[str]],
        name_validator: Callable[[str], ValidationOutcome[str]] = validate_name,
    ) -> None:
        self._validate_name = name_validator
        self._validate_age = age_validator
        self._validate_date = date_validator
        self._handlers: dict[
            PendingQuestion, Callable[[FlowState, Profile, str], FlowResult]
        ] = {
            PendingQuestion.NONE: self._start,
            PendingQuestion.NAME: self._answer_name,
            PendingQuestion.AGE: self._answer_age,
            PendingQuestion.DATE: self._answer_date,
        }

    @classmethod
    def from_config(
        cls,
        config: RegistrationConfig,
        number_recognizer: NumberRecognizer,
        datetime_recognizer: DateTimeRecognizer,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "RegistrationFlow":
        """Build a flow whose validators follow the registration settings."""
        return cls(
            age_validator=AgeValidator(
                number_recognizer,
                min_age=config.min_age,
                max_age=config.max_age,
                culture=config.culture,
            ),
            date_validator=DateValidator(
                datetime_recognizer,
                min_lead=timedelta(minutes=config.min_lead_minutes),
                date_format=config.date_format,
                culture=config.culture,
                clock=clock,
            ),
        )

    def advance(self, flow: FlowState, profile: Profile, text: str | None) -> FlowResult:
        """Apply one transition for the user's latest message.

        The inputs are not modified; the result carries updated copies.
        """
        handler = self._handlers[flow.pending_question]
        return handler(flow.model_copy(), profile.model_copy(), (text or "").strip())

    def _start(self, flow: FlowState, profile: Profile, text: str) -> FlowResult:
        flow.pending_question = PendingQuestion.NAME
        logger.info("registration_started")
        return FlowResult(flow=flow, profile=Profile(), messages=[prompts.START])

    def _answer_name(self, flow: FlowState, profile: Profile, text: str) -> FlowResult:
        outcome = self._validate_name(text)
        if isinstance(outcome, Rejected):
            return self._reprompt(flow, profile, outcome)

        profile.name = outcome.value
        flow.pending_question = PendingQuestion.AGE
        return FlowResult(
            flow=flow,
            profile=profile,
            messages=[prompts.greeting(profile.name), prompts.ASK_AGE],
        )

    def _answer_age(self, flow: FlowState, profile: Profile, text: str) -> FlowResult:
        outcome = self._validate_age(text)
        if isinstance(outcome, Rejected):
            return self._reprompt(flow, profile, outcome)

        profile.age = outcome.value
        flow.pending_question = PendingQuestion.DATE
        return FlowResult(
            flow=flow,
            profile=profile,
            messages=[prompts.age_confirmation(profile.age), prompts.ASK_DATE],
        )

    def _answer_date(self, flow: FlowState, profile: Profile, text: str) -> FlowResult:
        outcome = self._validate_date(text)
        if isinstance(outcome, Rejected):
            return self._reprompt(flow, profile, outcome)

        profile.travel_date = outcome.value
        flow.pending_question = PendingQuestion.NONE
        REGISTRATIONS_COMPLETED.inc()
        logger.info("registration_completed", has_name=profile.name is not None)
        return FlowResult(
            flow=flow,
            profile=Profile(),
            messages=[
                prompts.schedule_confirmation(profile.travel_date),
                prompts.thanks(profile.name or ""),
                prompts.RESTART_HINT,
            ],
            completed=profile,
        )

    def _reprompt(self, flow: FlowState, profile: Profile, outcome: Rejected) -> FlowResult:
        slot = flow.pending_question.value
        SLOT_REJECTIONS.labels(slot=slot, reason=outcome.reason.value).inc()
        logger.info("slot_rejected", slot=slot, reason=outcome.reason.value)
        return FlowResult(
            flow=flow,
            profile=profile,
            messages=[outcome.message or prompts.DIDNT_UNDERSTAND],
        )

