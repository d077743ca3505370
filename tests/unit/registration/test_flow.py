"""Tests for the registration flow state machine."""

import pytest

from skyride.config.models.registration import RegistrationConfig
from skyride.conversation.models import FlowState, PendingQuestion, Profile
from skyride.recognizers.base import RecognitionError
from skyride.recognizers.mock import (
    MockDateTimeRecognizer,
    MockNumberRecognizer,
    datetime_result,
    number_result,
)
from skyride.recognizers.number import DefaultNumberRecognizer
from skyride.registration.flow import RegistrationFlow
from skyride.registration.validation import Accepted, Rejected, RejectionReason


def state(question: PendingQuestion) -> FlowState:
    return FlowState(pending_question=question)


@pytest.fixture
def flow(
    registration_config: RegistrationConfig,
    datetime_recognizer: MockDateTimeRecognizer,
    clock,
) -> RegistrationFlow:
    datetime_recognizer.set_results(
        "tomorrow", [datetime_result({"value": "2030-01-03"})]
    )
    datetime_recognizer.set_results(
        "in 30 minutes", [datetime_result({"value": "2030-01-02 10:30:00"})]
    )
    return RegistrationFlow.from_config(
        registration_config,
        number_recognizer=DefaultNumberRecognizer(),
        datetime_recognizer=datetime_recognizer,
        clock=clock,
    )


class TestStart:
    """Tests for the idle state."""

    def test_asks_for_name_without_consuming_input(self, flow: RegistrationFlow) -> None:
        result = flow.advance(FlowState(), Profile(), "Ada")

        assert result.flow.pending_question == PendingQuestion.NAME
        assert result.profile == Profile()
        assert result.messages == ["Let's get started. What is your name?"]
        assert result.completed is None

    def test_clears_leftover_profile(self, flow: RegistrationFlow) -> None:
        result = flow.advance(FlowState(), Profile(name="Old", age=50), "register")
        assert result.profile.is_empty()

    def test_missing_text_treated_as_empty(self, flow: RegistrationFlow) -> None:
        result = flow.advance(FlowState(), Profile(), None)
        assert result.flow.pending_question == PendingQuestion.NAME


class TestNameAnswer:
    """Tests for answering the name question."""

    def test_valid_name_advances_to_age(self, flow: RegistrationFlow) -> None:
        result = flow.advance(state(PendingQuestion.NAME), Profile(), "  Ada  ")

        assert result.flow.pending_question == PendingQuestion.AGE
        assert result.profile.name == "Ada"
        assert result.messages == ["Hi Ada.", "How old are you?"]

    def test_blank_name_reprompts(self, flow: RegistrationFlow) -> None:
        result = flow.advance(state(PendingQuestion.NAME), Profile(), "   ")

        assert result.flow.pending_question == PendingQuestion.NAME
        assert result.profile.name is None
        assert result.messages == [
            "Please enter a name that contains at least one character."
        ]


class TestAgeAnswer:
    """Tests for answering the age question."""

    def test_valid_age_advances_to_date(self, flow: RegistrationFlow) -> None:
        result = flow.advance(state(PendingQuestion.AGE), Profile(name="Ada"), "25")

        assert result.flow.pending_question == PendingQuestion.DATE
        assert result.profile == Profile(name="Ada", age=25)
        assert result.messages == ["I have your age as 25.", "When is your flight?"]

    @pytest.mark.parametrize("text", ["12", "121", "twelve", "no idea"])
    def test_rejected_age_keeps_state(self, flow: RegistrationFlow, text: str) -> None:
        profile = Profile(name="Ada")
        result = flow.advance(state(PendingQuestion.AGE), profile, text)

        assert result.flow.pending_question == PendingQuestion.AGE
        assert result.profile == profile
        assert result.messages == ["Please enter an age between 18 and 120."]


class TestDateAnswer:
    """Tests for answering the date question."""

    def test_valid_date_completes_registration(self, flow: RegistrationFlow) -> None:
        result = flow.advance(
            state(PendingQuestion.DATE), Profile(name="Ada", age=25), "tomorrow"
        )

        assert result.flow.pending_question == PendingQuestion.NONE
        assert result.profile.is_empty()
        assert result.completed == Profile(name="Ada", age=25, travel_date="01/03/2030")
        assert result.messages == [
            "Your cab ride to the airport is scheduled for 01/03/2030.",
            "Thanks for completing the booking Ada.",
            "Type anything to run the bot again.",
        ]

    def test_too_soon_reprompts(self, flow: RegistrationFlow) -> None:
        profile = Profile(name="Ada", age=25)
        result = flow.advance(state(PendingQuestion.DATE), profile, "in 30 minutes")

        assert result.flow.pending_question == PendingQuestion.DATE
        assert result.profile == profile
        assert result.completed is None
        assert result.messages == [
            "I'm sorry, please enter a date at least an hour out."
        ]

    def test_recognizer_failure_reprompts(
        self, flow: RegistrationFlow, datetime_recognizer: MockDateTimeRecognizer
    ) -> None:
        datetime_recognizer.fail_with(RecognitionError("offline"))
        result = flow.advance(
            state(PendingQuestion.DATE), Profile(name="Ada", age=25), "tomorrow"
        )

        assert result.flow.pending_question == PendingQuestion.DATE
        assert result.messages[0].startswith("I'm sorry, I could not interpret")


class TestTransitionInvariants:
    """Properties that hold for every transition."""

    def test_inputs_not_mutated(self, flow: RegistrationFlow) -> None:
        flow_state = state(PendingQuestion.NAME)
        profile = Profile()

        flow.advance(flow_state, profile, "Ada")

        assert flow_state.pending_question == PendingQuestion.NAME
        assert profile.name is None

    def test_one_question_per_turn(self, flow: RegistrationFlow) -> None:
        current, profile = FlowState(), Profile()
        seen = []
        for text in ["register", "Ada", "30", "tomorrow"]:
            result = flow.advance(current, profile, text)
            seen.append(result.flow.pending_question)
            current, profile = result.flow, result.profile

        assert seen == [
            PendingQuestion.NAME,
            PendingQuestion.AGE,
            PendingQuestion.DATE,
            PendingQuestion.NONE,
        ]

    def test_filled_slots_match_progress(self, flow: RegistrationFlow) -> None:
        current, profile = FlowState(), Profile()
        for text in ["register", "Ada", "30"]:
            result = flow.advance(current, profile, text)
            current, profile = result.flow, result.profile
            if current.pending_question == PendingQuestion.AGE:
                assert profile.name is not None and profile.age is None
            if current.pending_question == PendingQuestion.DATE:
                assert profile.name is not None and profile.age is not None
            assert profile.travel_date is None

    def test_restart_after_completion(self, flow: RegistrationFlow) -> None:
        done = flow.advance(
            state(PendingQuestion.DATE), Profile(name="Ada", age=25), "tomorrow"
        )
        again = flow.advance(done.flow, done.profile, "anything")
        assert again.flow.pending_question == PendingQuestion.NAME
        assert again.messages == ["Let's get started. What is your name?"]


class TestCustomValidators:
    """The flow accepts any callables returning validation outcomes."""

    def test_rejection_without_message_uses_fallback(self) -> None:
        flow = RegistrationFlow(
            age_validator=lambda text: Rejected("", RejectionReason.UNRECOGNIZED),
            date_validator=lambda text: Accepted("01/01/2031"),
        )
        result = flow.advance(state(PendingQuestion.AGE), Profile(name="Ada"), "x")
        assert result.messages == ["I'm sorry, I didn't understand that."]

    def test_from_config_uses_age_bounds(self, clock) -> None:
        flow = RegistrationFlow.from_config(
            RegistrationConfig(min_age=21, max_age=65),
            number_recognizer=MockNumberRecognizer(default=[number_result(19)]),
            datetime_recognizer=MockDateTimeRecognizer(),
            clock=clock,
        )
        result = flow.advance(state(PendingQuestion.AGE), Profile(name="Ada"), "19")
        assert result.messages == ["Please enter an age between 21 and 65."]


class TestEveryState:
    """Each pending question has a transition."""

    @pytest.mark.parametrize("question", list(PendingQuestion))
    def test_advance_handles_state(self, flow: RegistrationFlow, question) -> None:
        result = flow.advance(state(question), Profile(name="Ada", age=30), "tomorrow")
        assert result.messages
