"""Default number recognizer: digit literals and English number words."""

import re

from word2number import w2n

from skyride.recognizers.base import ModelResult, NumberRecognizer

DIGITS_PATTERN = re.compile(r"(?<![\d.,])[-+]?\d+(?:,\d{3})*(?:\.\d+)?")
WORD_PATTERN = re.compile(r"[A-Za-z]+")

NUMBER_WORDS: frozenset[str] = frozenset({
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty", "thirty",
    "forty", "fifty", "sixty", "seventy", "eighty", "ninety", "hundred",
    "thousand", "million", "billion",
})
DOZEN_WORDS: frozenset[str] = frozenset({"dozen", "dozens"})
HALF_WORDS: frozenset[str] = frozenset({"half"})
# Decimal separator, as in "eighteen point five"
POINT_WORDS: frozenset[str] = frozenset({"point"})
FILLER_WORDS: frozenset[str] = frozenset({"a", "and"})

UNIT_WORDS: frozenset[str] = frozenset({
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
})
TENS_WORDS: frozenset[str] = frozenset({
    "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
})
SMALL_WORDS: frozenset[str] = UNIT_WORDS | TENS_WORDS | frozenset({
    "zero", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
})
RUN_WORDS: frozenset[str] = (
    NUMBER_WORDS | DOZEN_WORDS | HALF_WORDS | POINT_WORDS | FILLER_WORDS
)

SUPPORTED_CULTURES: frozenset[str] = frozenset({"en-us", "en-gb", "en"})


def _format_number(raw: str) -> str:
    cleaned = raw.replace(",", "").lstrip("+")
    number = float(cleaned)
    if number.is_integer():
        return str(int(number))
    return str(number)


class DefaultNumberRecognizer(NumberRecognizer):
    """Finds numbers such as "25", "1,200", "twenty five" or "a dozen".

    Word runs are resolved with word2number; "dozen" multiplies whatever
    number precedes it (one when nothing does). "and a half" and "point"
    give fractional values, which callers wanting whole numbers must skip.
    """

    def recognize(self, text: str, culture: str = "en-us") -> list[ModelResult]:
        if culture.lower() not in SUPPORTED_CULTURES:
            return []

        results = [
            ModelResult(
                text=match.group(),
                start=match.start(),
                end=match.end() - 1,
                type_name="number",
                resolution={"value": _format_number(match.group())},
            )
            for match in DIGITS_PATTERN.finditer(text)
        ]

        for run in self._word_runs(text):
            value = self._resolve_words([word for word, _, _ in run])
            if value is None:
                continue
            start, end = run[0][1], run[-1][2]
            results.append(
                ModelResult(
                    text=text[start:end],
                    start=start,
                    end=end - 1,
                    type_name="number",
                    resolution={"value": _format_number(str(value))},
                )
            )

        results.sort(key=lambda r: r.start)
        return results

    def _word_runs(self, text: str) -> list[list[tuple[str, int, int]]]:
        """Group adjacent number words, allowing "a" and "and" between them."""
        runs: list[list[tuple[str, int, int]]] = []
        current: list[tuple[str, int, int]] = []

        def flush() -> None:
            while current and current[-1][0] in FILLER_WORDS | POINT_WORDS:
                current.pop()
            while current and current[0][0] == "and":
                current.pop(0)
            if any(word not in FILLER_WORDS for word, _, _ in current):
                runs.append(list(current))
            current.clear()

        for match in WORD_PATTERN.finditer(text):
            word = match.group().lower()
            if current and text[current[-1][2]:match.start()].strip(" -") != "":
                flush()
            if word in RUN_WORDS:
                current.append((word, match.start(), match.end()))
            else:
                flush()
        flush()
        return runs

    def _resolve_words(self, words: list[str]) -> int | float | None:
        """Resolve a run of number words, or None when it is not one number."""
        numbers = [word for word in words if word not in FILLER_WORDS]
        if not numbers or not self._well_formed(numbers):
            return None
        try:
            if any(word in DOZEN_WORDS for word in numbers):
                index = next(i for i, word in enumerate(numbers) if word in DOZEN_WORDS)
                if numbers[index + 1:]:
                    return None
                multiplier = self._resolve_words(numbers[:index]) if index else 1
                return None if multiplier is None else multiplier * 12
            if numbers[-1] in HALF_WORDS:
                whole = numbers[:-1]
                return (w2n.word_to_num(" ".join(whole)) if whole else 0) + 0.5
            return w2n.word_to_num(" ".join(numbers))
        except ValueError:
            return None

    @staticmethod
    def _well_formed(numbers: list[str]) -> bool:
        """Reject runs such as "twenty twenty" that read as two numbers."""
        for index, word in enumerate(numbers):
            if word in HALF_WORDS and not all(
                rest in DOZEN_WORDS for rest in numbers[index + 1:]
            ):
                return False

        whole = numbers[: numbers.index("point")] if "point" in numbers else numbers
        for previous, word in zip(whole, whole[1:]):
            if previous in SMALL_WORDS and word in SMALL_WORDS:
                if not (previous in TENS_WORDS and word in UNIT_WORDS):
                    return False
        return True
