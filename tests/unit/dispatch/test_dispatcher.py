"""Tests for TurnDispatcher."""

import pytest

from skyride.config.settings import Settings
from skyride.conversation.models import (
    ConversationSession,
    FlowState,
    PendingQuestion,
    Profile,
    TurnRoute,
)
from skyride.dispatch import TurnDispatcher
from skyride.dispatch import replies
from skyride.errors import ConfigurationError
from skyride.intents import IntentClassificationError, IntentResult, MockIntentClassifier
from skyride.recognizers.mock import datetime_result
from skyride.recognizers.number import DefaultNumberRecognizer
from skyride.registration.flow import RegistrationFlow

START = "Let's get started. What is your name?"


@pytest.fixture
def flow(registration_config, datetime_recognizer, clock) -> RegistrationFlow:
    datetime_recognizer.set_results(
        "tomorrow", [datetime_result({"value": "2030-01-03"})]
    )
    return RegistrationFlow.from_config(
        registration_config,
        DefaultNumberRecognizer(),
        datetime_recognizer,
        clock=clock,
    )


@pytest.fixture
def dispatcher(flow, intent_classifier) -> TurnDispatcher:
    return TurnDispatcher(flow, {"skyride": intent_classifier})


@pytest.fixture
def session() -> ConversationSession:
    return ConversationSession(conversation_id="conv-1", welcomed=True)


class TestConstruction:
    """Tests for dispatcher construction."""

    def test_missing_classifier_key_is_fatal(self, flow, intent_classifier):
        with pytest.raises(ConfigurationError, match="skyride"):
            TurnDispatcher(flow, {"other": intent_classifier})

    def test_custom_classifier_key(self, flow, intent_classifier):
        dispatcher = TurnDispatcher(
            flow, {"calendar": intent_classifier}, classifier_key="calendar"
        )
        assert dispatcher.commands == ["hi", "spongebob", "buttons", "register"]

    def test_from_settings_builds_default_capabilities(self, clock):
        dispatcher = TurnDispatcher.from_settings(Settings(), clock=clock)
        assert isinstance(dispatcher, TurnDispatcher)

    def test_from_settings_requires_configured_key(self, intent_classifier):
        with pytest.raises(ConfigurationError):
            TurnDispatcher.from_settings(
                Settings(), classifiers={"other": intent_classifier}
            )


class TestSideEffects:
    """Side effects applied before routing."""

    @pytest.mark.asyncio
    async def test_turn_counter_increments(self, dispatcher, session):
        first = await dispatcher.process_turn(session, "hello")
        second = await dispatcher.process_turn(first.session, "hello")
        assert first.session.turn_count == 1
        assert second.session.turn_count == 2

    @pytest.mark.asyncio
    async def test_input_session_not_mutated(self, dispatcher, session):
        await dispatcher.process_turn(session, "register")
        assert session.turn_count == 0
        assert session.flow.pending_question == PendingQuestion.NONE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text, color", [("Red", "red"), ("  blue ", "blue")])
    async def test_color_captured(self, dispatcher, session, text, color):
        result = await dispatcher.process_turn(session, text)
        assert result.session.favorite_color == color

    @pytest.mark.asyncio
    async def test_other_text_keeps_color(self, dispatcher, session):
        session.favorite_color = "yellow"
        result = await dispatcher.process_turn(session, "green")
        assert result.session.favorite_color == "yellow"

    @pytest.mark.asyncio
    async def test_color_captured_during_registration(self, dispatcher, session):
        session.flow = FlowState(pending_question=PendingQuestion.NAME)
        result = await dispatcher.process_turn(session, "Red")
        assert result.session.favorite_color == "red"
        assert result.session.profile.name == "Red"


class TestWelcome:
    """Tests for the welcome-once side effect."""

    @pytest.mark.asyncio
    async def test_welcome_sent_once(self, dispatcher):
        session = ConversationSession(conversation_id="new")

        first = await dispatcher.process_turn(session, "hello")
        second = await dispatcher.process_turn(first.session, "hello")

        assert first.texts[0] == replies.WELCOME
        assert first.session.welcomed is True
        assert replies.WELCOME not in second.texts

    @pytest.mark.asyncio
    async def test_welcome_members_skips_bot(self, dispatcher):
        session = ConversationSession(conversation_id="new")

        updated, messages = dispatcher.welcome_members(
            session, ["skyride-bot", "user-1"], bot_id="skyride-bot"
        )

        assert [m.text for m in messages] == [replies.WELCOME, replies.JOIN_NOTICE]
        assert updated.welcomed is True
        assert session.welcomed is False

    @pytest.mark.asyncio
    async def test_welcome_members_only_bot(self, dispatcher):
        session = ConversationSession(conversation_id="new")
        updated, messages = dispatcher.welcome_members(
            session, ["skyride-bot"], bot_id="skyride-bot"
        )
        assert messages == []
        assert updated.welcomed is False


class TestIntentReport:
    """Tests for the informational intent report."""

    @pytest.mark.asyncio
    async def test_report_precedes_command_reply(self, dispatcher, session):
        result = await dispatcher.process_turn(session, "Add Event")

        assert result.texts == [
            "==> Top scoring intent: Calendar.Add, score: 0.91",
            "Turn 1: You sent 'Add Event'",
        ]
        assert result.intent.label == "Calendar.Add"

    @pytest.mark.asyncio
    async def test_no_intent_help(self, dispatcher, session):
        result = await dispatcher.process_turn(session, "hello")
        assert result.texts[0] == replies.NO_INTENT_HELP
        assert result.intent is None

    @pytest.mark.asyncio
    async def test_none_label_treated_as_no_intent(self, flow, session):
        classifier = MockIntentClassifier(
            default=IntentResult(label="None", score=0.8), name="skyride"
        )
        dispatcher = TurnDispatcher(flow, {"skyride": classifier})
        result = await dispatcher.process_turn(session, "hello")
        assert result.texts[0] == replies.NO_INTENT_HELP

    @pytest.mark.asyncio
    async def test_classifier_failure_does_not_fail_turn(self, flow, session):
        classifier = MockIntentClassifier(
            error=IntentClassificationError("timeout"), name="skyride"
        )
        dispatcher = TurnDispatcher(flow, {"skyride": classifier})

        result = await dispatcher.process_turn(session, "hi")

        assert result.texts == [replies.NO_INTENT_HELP, replies.GREETING]

    @pytest.mark.asyncio
    async def test_classifier_not_called_during_registration(
        self, dispatcher, session, intent_classifier
    ):
        session.flow = FlowState(pending_question=PendingQuestion.NAME)
        result = await dispatcher.process_turn(session, "Add Event")

        assert intent_classifier.call_history == []
        assert result.intent is None


class TestCommands:
    """Tests for the command vocabulary."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["hi", "HI", "  Hi  "])
    async def test_greeting(self, dispatcher, session, text):
        result = await dispatcher.process_turn(session, text)
        assert result.texts[-1] == replies.GREETING
        assert result.route == TurnRoute.COMMAND

    @pytest.mark.asyncio
    async def test_image(self, dispatcher, session):
        result = await dispatcher.process_turn(session, "SpongeBob")
        attachment = result.messages[-1].attachments[0]
        assert attachment.content_type == "image/jpg"
        assert attachment.content_url.startswith("https://www.telegraph.co.uk/")

    @pytest.mark.asyncio
    async def test_buttons(self, dispatcher, session):
        result = await dispatcher.process_turn(session, "buttons")
        message = result.messages[-1]
        assert message.text == "What is your favorite color?"
        assert [a.title for a in message.suggested_actions] == ["Red", "Yellow", "Blue"]

    @pytest.mark.asyncio
    async def test_register_starts_flow(self, dispatcher, session):
        result = await dispatcher.process_turn(session, "Register")

        assert result.texts[-1] == START
        assert result.session.flow.pending_question == PendingQuestion.NAME
        assert result.route == TurnRoute.COMMAND

    @pytest.mark.asyncio
    async def test_echo_keeps_original_text(self, dispatcher, session):
        session.turn_count = 4
        result = await dispatcher.process_turn(session, "What's New?")
        assert result.texts[-1] == "Turn 5: You sent 'What's New?'"

    @pytest.mark.asyncio
    async def test_exactly_one_command_reply(self, dispatcher, session):
        result = await dispatcher.process_turn(session, "hi")
        assert len(result.messages) == 2


class TestRegistrationRouting:
    """While a question is pending the flow owns the turn."""

    @pytest.mark.asyncio
    async def test_command_words_are_answers(self, dispatcher, session):
        session.flow = FlowState(pending_question=PendingQuestion.NAME)
        result = await dispatcher.process_turn(session, "hi")

        assert result.route == TurnRoute.REGISTRATION
        assert result.session.profile.name == "hi"
        assert result.texts == ["Hi hi.", "How old are you?"]

    @pytest.mark.asyncio
    async def test_no_welcome_during_registration(self, dispatcher):
        session = ConversationSession(
            conversation_id="c", flow=FlowState(pending_question=PendingQuestion.NAME)
        )
        result = await dispatcher.process_turn(session, "Ada")
        assert replies.WELCOME not in result.texts
        assert result.session.welcomed is False

    @pytest.mark.asyncio
    async def test_completion_reported(self, dispatcher, session):
        session.flow = FlowState(pending_question=PendingQuestion.DATE)
        session.profile = Profile(name="Ada", age=25)

        result = await dispatcher.process_turn(session, "tomorrow")

        assert result.completed_profile == Profile(
            name="Ada", age=25, travel_date="01/03/2030"
        )
        assert result.session.profile.is_empty()
        assert result.session.flow.pending_question == PendingQuestion.NONE

    @pytest.mark.asyncio
    async def test_full_registration(self, dispatcher, session):
        texts = []
        for message in ["register", "Ada", "twenty five", "tomorrow"]:
            result = await dispatcher.process_turn(session, message)
            session = result.session
            texts.append(result.texts)

        assert texts[1] == ["Hi Ada.", "How old are you?"]
        assert texts[2] == ["I have your age as 25.", "When is your flight?"]
        assert texts[3][0] == "Your cab ride to the airport is scheduled for 01/03/2030."
        assert session.turn_count == 4
