"""Turn dispatcher: the single entry point the host calls per message.

A turn first applies its side effects (turn counter, favourite colour).
While a registration question is pending, the message goes to the flow
state machine and nothing else. Otherwise the user gets the one-time
welcome, an intent report, and the reply of exactly one command.
"""

from collections.abc import Callable, Mapping
from datetime import datetime

from skyride.config.settings import Settings
from skyride.conversation.models import (
    ConversationSession,
    OutboundMessage,
    TurnRoute,
)
from skyride.dispatch import replies
from skyride.dispatch.results import TurnResult
from skyride.errors import ConfigurationError
from skyride.intents.base import IntentClassifier, IntentResult
from skyride.intents.factory import create_classifiers
from skyride.observability.logging import get_logger
from skyride.observability.metrics import INTENT_CLASSIFIER_FAILURES, TURNS_PROCESSED
from skyride.recognizers.base import DateTimeRecognizer, NumberRecognizer
from skyride.recognizers.dates import DefaultDateTimeRecognizer
from skyride.recognizers.number import DefaultNumberRecognizer
from skyride.registration.flow import FlowResult, RegistrationFlow

logger = get_logger(__name__)

CommandHandler = Callable[[ConversationSession, str], list[OutboundMessage]]


class TurnDispatcher:
    """Routes one user message and returns the updated conversation state."""

    def __init__(
        self,
        flow: RegistrationFlow,
        classifiers: Mapping[str, IntentClassifier],
        classifier_key: str = "skyride",
    ) -> None:
        """Initialize the dispatcher.

        Args:
            flow: Registration flow state machine
            classifiers: Named intent classifiers
            classifier_key: Which classifier reports intents

        Raises:
            ConfigurationError: If ``classifier_key`` is not in ``classifiers``
        """
        if classifier_key not in classifiers:
            raise ConfigurationError(
                f"Intent classifier '{classifier_key}' is not configured; "
                f"available: {sorted(classifiers) or 'none'}"
            )
        self._flow = flow
        self._classifier = classifiers[classifier_key]
        self._commands: dict[str, CommandHandler] = {
            "hi": self._greet,
            "spongebob": self._show_image,
            "buttons": self._offer_colors,
            "register": self._start_registration,
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        number_recognizer: NumberRecognizer | None = None,
        datetime_recognizer: DateTimeRecognizer | None = None,
        classifiers: Mapping[str, IntentClassifier] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "TurnDispatcher":
        """Build a dispatcher from settings, using default capabilities
        wherever none is supplied."""
        flow = RegistrationFlow.from_config(
            settings.registration,
            number_recognizer or DefaultNumberRecognizer(),
            datetime_recognizer or DefaultDateTimeRecognizer(clock=clock),
            clock=clock,
        )
        if classifiers is None:
            classifiers = create_classifiers(settings.intents)
        return cls(flow, classifiers, settings.intents.default_classifier)

    @property
    def commands(self) -> list[str]:
        return list(self._commands)

    async def process_turn(self, session: ConversationSession, text: str) -> TurnResult:
        """Handle one user message.

        The given session is not modified; the result carries the updated
        copy for the host to persist.
        """
        session = session.model_copy(deep=True)
        text = text or ""
        command = text.strip().lower()

        session.turn_count += 1
        if command in replies.COLOR_CHOICES:
            session.favorite_color = command

        if session.flow.in_progress:
            result = self._flow.advance(session.flow, session.profile, text)
            self._apply(session, result)
            turn = TurnResult(
                session=session,
                messages=[OutboundMessage.of(m) for m in result.messages],
                route=TurnRoute.REGISTRATION,
                completed_profile=result.completed,
            )
        else:
            messages = self._welcome(session)
            intent = await self._classify(text)
            messages.append(self._intent_message(intent))
            handler = self._commands.get(command, self._echo)
            messages.extend(handler(session, text))
            turn = TurnResult(
                session=session,
                messages=messages,
                route=TurnRoute.COMMAND,
                intent=intent,
            )

        TURNS_PROCESSED.labels(route=turn.route.value).inc()
        logger.info(
            "turn_processed",
            turn=session.turn_count,
            route=turn.route.value,
            pending_question=session.flow.pending_question.value,
            message_count=len(turn.messages),
        )
        return turn

    def welcome_members(
        self,
        session: ConversationSession,
        member_ids: list[str],
        bot_id: str,
    ) -> tuple[ConversationSession, list[OutboundMessage]]:
        """Greet members who joined the conversation, skipping the bot."""
        session = session.model_copy(deep=True)
        messages: list[OutboundMessage] = []
        for member_id in member_ids:
            if member_id == bot_id:
                continue
            messages.extend(self._welcome(session))
            messages.append(OutboundMessage.of(replies.JOIN_NOTICE))
        return session, messages

    def _welcome(self, session: ConversationSession) -> list[OutboundMessage]:
        if session.welcomed:
            return []
        session.welcomed = True
        return [OutboundMessage.of(replies.WELCOME)]

    async def _classify(self, text: str) -> IntentResult | None:
        try:
            return await self._classifier.classify(text)
        except Exception as e:
            logger.warning(
                "intent_classifier_failed",
                classifier=self._classifier.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            INTENT_CLASSIFIER_FAILURES.labels(classifier=self._classifier.name).inc()
            return None

    def _intent_message(self, intent: IntentResult | None) -> OutboundMessage:
        if intent is None or intent.is_none:
            return OutboundMessage.of(replies.NO_INTENT_HELP)
        return OutboundMessage.of(replies.intent_report(intent.label, intent.score))

    def _apply(self, session: ConversationSession, result: FlowResult) -> None:
        session.flow = result.flow
        session.profile = result.profile

    def _greet(self, session: ConversationSession, text: str) -> list[OutboundMessage]:
        return [OutboundMessage.of(replies.GREETING)]

    def _show_image(self, session: ConversationSession, text: str) -> list[OutboundMessage]:
        return [replies.image_message()]

    def _offer_colors(self, session: ConversationSession, text: str) -> list[OutboundMessage]:
        return [replies.color_choice_message()]

    def _start_registration(
        self, session: ConversationSession, text: str
    ) -> list[OutboundMessage]:
        result = self._flow.advance(session.flow, session.profile, text)
        self._apply(session, result)
        return [OutboundMessage.of(m) for m in result.messages]

    def _echo(self, session: ConversationSession, text: str) -> list[OutboundMessage]:
        return [OutboundMessage.of(replies.echo(session.turn_count, text))]
