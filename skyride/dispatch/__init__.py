"""Turn dispatching: command vocabulary, side effects and routing."""

from skyride.dispatch.dispatcher import TurnDispatcher
from skyride.dispatch.results import TurnResult

__all__ = ["TurnDispatcher", "TurnResult"]
