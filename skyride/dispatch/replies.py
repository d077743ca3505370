"""Replies for the command vocabulary and the idle-state side effects."""

from skyride.conversation.models import Attachment, OutboundMessage, SuggestedAction

WELCOME = "Hi, welcome to SkyRide :)\nWhat's up?"
JOIN_NOTICE = (
    "You are seeing this message because the bot received a conversation "
    "update saying that you joined the conversation."
)
GREETING = "Hi, how may I help you today?"
COLOR_QUESTION = "What is your favorite color?"

NO_INTENT_HELP = (
    "No intents were found.\n"
    "This sample identifies two user intents:\n"
    "'Calendar.Add'\n"
    "'Calendar.Find'\n"
    "Try typing 'Add Event' or 'Show me tomorrow'."
)

SPONGEBOB_IMAGE = Attachment(
    content_url=(
        "https://www.telegraph.co.uk/content/dam/TV/2015-09/30sep/"
        "spongebob-squarepants.jpg?imwidth=1400"
    ),
    content_type="image/jpg",
    name="Spongebob",
)

# Favorite colours a user can pick, in the order they are offered
COLOR_CHOICES: tuple[str, ...] = ("red", "yellow", "blue")


def intent_report(label: str, score: float) -> str:
    return f"==> Top scoring intent: {label}, score: {score:.2f}"


def echo(turn_count: int, text: str) -> str:
    return f"Turn {turn_count}: You sent '{text}'"


def image_message() -> OutboundMessage:
    return OutboundMessage(attachments=[SPONGEBOB_IMAGE.model_copy()])


def color_choice_message() -> OutboundMessage:
    return OutboundMessage(
        text=COLOR_QUESTION,
        suggested_actions=[
            SuggestedAction(title=color.title(), value=color.title(), text=str(position))
            for position, color in enumerate(COLOR_CHOICES, start=1)
        ],
    )
