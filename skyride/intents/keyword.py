"""Keyword-overlap intent classifier."""

import re

from skyride.intents.base import IntentClassifier, IntentResult

TOKEN_PATTERN = re.compile(r"[a-z0-9']+")


class KeywordIntentClassifier(IntentClassifier):
    """Scores each intent by the share of utterance tokens among its keywords.

    The highest score wins; ties go to the intent declared first. Scores
    below ``min_score`` count as no intent.
    """

    def __init__(
        self,
        intents: dict[str, list[str]],
        min_score: float = 0.1,
        name: str = "keyword",
    ) -> None:
        self._intents = {
            label: frozenset(keyword.lower() for keyword in keywords)
            for label, keywords in intents.items()
        }
        self._min_score = min_score
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def classify(self, utterance: str) -> IntentResult | None:
        tokens = TOKEN_PATTERN.findall(utterance.lower())
        if not tokens:
            return None

        best: IntentResult | None = None
        for label, keywords in self._intents.items():
            hits = sum(1 for token in tokens if token in keywords)
            score = hits / len(tokens)
            if best is None or score > best.score:
                best = IntentResult(label=label, score=round(score, 4))

        if best is None or best.score == 0 or best.score < self._min_score:
            return None
        return best
