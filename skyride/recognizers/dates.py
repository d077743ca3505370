"""Default date-time recognizer.

Handles the phrasing people use when asked for a travel date: relative days
("tomorrow", "in 3 days"), weekdays ("Sunday at 5pm", "next friday"), short
ranges ("next week", "this weekend") and explicit dates, which are parsed
with python-dateutil.
"""

import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta

from dateutil import parser as dateparser
from dateutil.relativedelta import relativedelta

from skyride.recognizers.base import DateTimeRecognizer, ModelResult

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

RELATIVE_DAYS = {
    "day after tomorrow": 2,
    "tomorrow": 1,
    "today": 0,
    "tonight": 0,
    "yesterday": -1,
}

OFFSET_UNITS = {
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}

SMALL_COUNTS = {"a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5}

NOW_PATTERN = re.compile(r"\b(right now|now)\b")
RELATIVE_DAY_PATTERN = re.compile(r"\b(day after tomorrow|tomorrow|today|tonight|yesterday)\b")
OFFSET_PATTERN = re.compile(
    r"\bin\s+(\d+|an?|one|two|three|four|five)\s+(minute|hour|day|week)s?\b"
)
WEEKDAY_PATTERN = re.compile(
    r"\b(?:(next|this|last)\s+)?(" + "|".join(WEEKDAYS) + r")\b"
)
RANGE_PATTERN = re.compile(r"\b(next|this)\s+(week|weekend|month)\b")
TIME_PATTERN = re.compile(
    r"\b(?:at\s+)?(\d{1,2})(?::(\d{2}))?\s*(am|pm|a\.m\.|p\.m\.)"
    r"|\b(?:at\s+)?(\d{1,2}):(\d{2})\b"
    r"|\b(noon|midnight)\b"
)
EXPLICIT_HINT_PATTERN = re.compile(
    r"\d{1,4}[/\-]\d{1,2}"
    # Dotted dates need all three parts; "12.25" is a decimal, not a date
    r"|\b\d{1,2}\.\d{1,2}\.\d{2,4}\b"
    r"|\b(jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?\s+\d"
    r"|\b\d{1,2}(?:st|nd|rd|th)?\s+(jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)"
)

# Default hour for "tonight" when no time is given
EVENING_HOUR = 20


def _find_time(text: str) -> tuple[time, re.Match[str]] | None:
    """Locate a time of day such as "5pm", "at 17:30" or "noon"."""
    for match in TIME_PATTERN.finditer(text):
        if match.group(6):
            return (time(12) if match.group(6) == "noon" else time(0)), match

        if match.group(1):
            hour, minute = int(match.group(1)), int(match.group(2) or 0)
            meridiem = match.group(3).replace(".", "")
            if not 1 <= hour <= 12 or minute > 59:
                continue
            hour = hour % 12 + (12 if meridiem == "pm" else 0)
        else:
            hour, minute = int(match.group(4)), int(match.group(5))
            if hour > 23 or minute > 59:
                continue
        return time(hour, minute), match
    return None


def _date_entry(day: date, at: time | None) -> dict[str, str]:
    if at is None:
        return {"type": "date", "timex": day.strftime(DATE_FORMAT), "value": day.strftime(DATE_FORMAT)}
    moment = datetime.combine(day, at)
    return {
        "type": "datetime",
        "timex": moment.strftime("%Y-%m-%dT%H:%M"),
        "value": moment.strftime(DATETIME_FORMAT),
    }


def _range_entry(start: date, end: date, timex: str) -> dict[str, str]:
    return {
        "type": "daterange",
        "timex": timex,
        "start": start.strftime(DATE_FORMAT),
        "end": end.strftime(DATE_FORMAT),
    }


class DefaultDateTimeRecognizer(DateTimeRecognizer):
    """Rule-based recognizer for English date and time expressions.

    Relative phrases are resolved against the injected clock. A bare
    weekday resolves to two values, the most recent past occurrence and
    the coming one, leaving the choice to the caller.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def recognize(self, text: str, culture: str = "en-us") -> list[ModelResult]:
        lowered = text.lower().strip()
        if not lowered or not culture.lower().startswith("en"):
            return []

        now = self._clock()
        found = _find_time(lowered)
        at = found[0] if found else None

        results: list[ModelResult] = []
        for matcher in (
            self._match_now,
            self._match_offset,
            self._match_relative_day,
            self._match_weekday,
            self._match_range,
        ):
            result = matcher(lowered, now, at)
            if result is not None:
                results.append(result)

        if not results:
            explicit = self._match_explicit(text, now, at)
            if explicit is not None:
                results.append(explicit)
            elif found is not None:
                # A bare time of day means today at that time
                match = found[1]
                results.append(
                    self._result(match, "datetime", [_date_entry(now.date(), at)])
                )

        results.sort(key=lambda r: r.start)
        return results

    def _result(
        self, match: re.Match[str], kind: str, values: list[dict[str, str]]
    ) -> ModelResult:
        return ModelResult(
            text=match.group(),
            start=match.start(),
            end=match.end() - 1,
            type_name=f"datetimeV2.{kind}",
            resolution={"values": values},
        )

    def _match_now(self, text: str, now: datetime, at: time | None) -> ModelResult | None:
        match = NOW_PATTERN.search(text)
        if match is None:
            return None
        return self._result(
            match,
            "datetime",
            [{"type": "datetime", "timex": "PRESENT_REF", "value": now.strftime(DATETIME_FORMAT)}],
        )

    def _match_offset(self, text: str, now: datetime, at: time | None) -> ModelResult | None:
        match = OFFSET_PATTERN.search(text)
        if match is None:
            return None
        count_text, unit = match.group(1), match.group(2)
        count = int(count_text) if count_text.isdigit() else SMALL_COUNTS[count_text]
        moment = now + OFFSET_UNITS[unit] * count
        return self._result(
            match,
            "datetime",
            [{
                "type": "datetime",
                "timex": moment.strftime("%Y-%m-%dT%H:%M:%S"),
                "value": moment.strftime(DATETIME_FORMAT),
            }],
        )

    def _match_relative_day(
        self, text: str, now: datetime, at: time | None
    ) -> ModelResult | None:
        match = RELATIVE_DAY_PATTERN.search(text)
        if match is None:
            return None
        phrase = match.group(1)
        if phrase == "tonight" and at is None:
            at = time(EVENING_HOUR)
        day = now.date() + timedelta(days=RELATIVE_DAYS[phrase])
        kind = "date" if at is None else "datetime"
        return self._result(match, kind, [_date_entry(day, at)])

    def _match_weekday(self, text: str, now: datetime, at: time | None) -> ModelResult | None:
        match = WEEKDAY_PATTERN.search(text)
        if match is None:
            return None
        modifier, weekday = match.group(1), WEEKDAYS.index(match.group(2))
        today = now.date()
        ahead = (weekday - today.weekday()) % 7
        coming = today + timedelta(days=ahead)
        previous = today - timedelta(days=(today.weekday() - weekday) % 7 or 7)

        if modifier == "next":
            days = [coming if ahead else coming + timedelta(days=7)]
        elif modifier == "this":
            days = [coming]
        elif modifier == "last":
            days = [previous]
        else:
            days = [previous, coming]

        kind = "date" if at is None else "datetime"
        return self._result(match, kind, [_date_entry(day, at) for day in days])

    def _match_range(self, text: str, now: datetime, at: time | None) -> ModelResult | None:
        match = RANGE_PATTERN.search(text)
        if match is None:
            return None
        modifier, unit = match.group(1), match.group(2)
        today = now.date()
        shift = 1 if modifier == "next" else 0

        if unit == "month":
            start = (today.replace(day=1) + relativedelta(months=shift))
            end = start + relativedelta(months=1)
            timex = start.strftime("%Y-%m")
        elif unit == "week":
            start = today - timedelta(days=today.weekday()) + timedelta(weeks=shift)
            end = start + timedelta(weeks=1)
            timex = start.strftime("%G-W%V")
        else:
            monday = today - timedelta(days=today.weekday()) + timedelta(weeks=shift)
            start = monday + timedelta(days=5)
            end = monday + timedelta(days=7)
            timex = start.strftime("%G-W%V-WE")

        return self._result(match, "daterange", [_range_entry(start, end, timex)])

    def _match_explicit(self, text: str, now: datetime, at: time | None) -> ModelResult | None:
        hint = EXPLICIT_HINT_PATTERN.search(text.lower())
        if hint is None:
            return None
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            parsed = dateparser.parse(text, default=midnight, fuzzy=True)
        except (ValueError, OverflowError):
            return None

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)

        has_time = at is not None or parsed.time() != time(0)
        entry = _date_entry(parsed.date(), parsed.time() if has_time else None)

        start = hint.start()
        end = len(text.rstrip()) - 1
        return ModelResult(
            text=text[start:end + 1],
            start=start,
            end=end,
            type_name=f"datetimeV2.{entry['type']}",
            resolution={"values": [entry]},
        )
