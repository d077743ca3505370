"""User-facing text for the registration flow."""

START = "Let's get started. What is your name?"
ASK_AGE = "How old are you?"
ASK_DATE = "When is your flight?"
RESTART_HINT = "Type anything to run the bot again."

# Used when a rejection carries no message of its own
DIDNT_UNDERSTAND = "I'm sorry, I didn't understand that."

NAME_REQUIRED = "Please enter a name that contains at least one character."


def greeting(name: str) -> str:
    return f"Hi {name}."


def age_confirmation(age: int) -> str:
    return f"I have your age as {age}."


def schedule_confirmation(travel_date: str) -> str:
    return f"Your cab ride to the airport is scheduled for {travel_date}."


def thanks(name: str) -> str:
    return f"Thanks for completing the booking {name}."


def age_out_of_range(min_age: int, max_age: int) -> str:
    return f"Please enter an age between {min_age} and {max_age}."


def age_uninterpretable(min_age: int, max_age: int) -> str:
    return (
        "I'm sorry, I could not interpret that as an age. "
        f"Please enter an age between {min_age} and {max_age}."
    )


def lead_time_phrase(minutes: int) -> str:
    """Spell a lead time the way the prompts say it ("an hour", "90 minutes")."""
    if minutes == 60:
        return "an hour"
    if minutes and minutes % 60 == 0:
        return f"{minutes // 60} hours"
    if minutes == 1:
        return "a minute"
    return f"{minutes} minutes"


def date_too_soon(lead_minutes: int) -> str:
    return f"I'm sorry, please enter a date at least {lead_time_phrase(lead_minutes)} out."


def date_uninterpretable(lead_minutes: int) -> str:
    return (
        "I'm sorry, I could not interpret that as an appropriate date. "
        f"Please enter a date at least {lead_time_phrase(lead_minutes)} out."
    )
