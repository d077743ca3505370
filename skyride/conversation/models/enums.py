"""Enums for conversation domain."""

from enum import Enum


class PendingQuestion(str, Enum):
    """Which registration question, if any, is awaiting an answer.

    NONE is both the idle state and the state a completed registration
    returns to. The others are visited strictly in declaration order.
    """

    NONE = "none"
    NAME = "name"
    AGE = "age"
    DATE = "date"


class TurnRoute(str, Enum):
    """How the dispatcher handled a turn."""

    REGISTRATION = "registration"
    COMMAND = "command"
