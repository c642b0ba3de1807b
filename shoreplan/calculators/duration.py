"""
Time-of-day arithmetic for a single operating day.

Every calculation works in minutes since local midnight so that no date or
timezone handling is involved. Windows whose end is numerically before
their start are understood to cross midnight (``mod 1440``).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, time
from typing import Union

from shoreplan.utils.defaults import (
    HHMM_PATTERN,
    HHMMSS_PATTERN,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from shoreplan.validation.exceptions import AmbiguousDurationError, ValidationError

logger = logging.getLogger(__name__)

TimeLike = Union[str, time, datetime, int, float]


@dataclass(frozen=True)
class CountdownState:
    """Remaining time until a deadline, or the terminal elapsed state."""

    hours: int
    minutes: int
    seconds: int
    elapsed: bool = False

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds


ELAPSED = CountdownState(0, 0, 0, elapsed=True)


def parse_hhmm(text: str) -> int:
    """
    Parse a 24h ``HH:MM`` string into minutes since midnight.

    Raises
    ------
    ValidationError
        If the string is malformed or out of range.

    Examples
    --------
    >>> parse_hhmm("08:30")
    510
    """
    if not isinstance(text, str):
        raise ValidationError(f"Expected an 'HH:MM' string, got {text!r}")
    match = HHMM_PATTERN.match(text.strip())
    if not match:
        raise ValidationError(f"Malformed time '{text}', expected 24h 'HH:MM'")
    return int(match.group(1)) * MINUTES_PER_HOUR + int(match.group(2))


def to_minutes_of_day(value: TimeLike) -> float:
    """
    Convert a clock reading into (fractional) minutes since midnight.

    Accepts ``HH:MM`` or ``HH:MM:SS`` strings, ``datetime.time``,
    ``datetime.datetime`` or a number of minutes. Seconds and microseconds
    become the fractional part.
    """
    if isinstance(value, datetime):
        value = value.time()
    if isinstance(value, time):
        return (
            value.hour * MINUTES_PER_HOUR
            + value.minute
            + (value.second + value.microsecond / 1e6) / SECONDS_PER_MINUTE
        )
    if isinstance(value, bool):
        raise ValidationError(f"Expected a time of day, got {value!r}")
    if isinstance(value, (int, float)):
        if not 0 <= value < MINUTES_PER_DAY:
            raise ValidationError(f"Minutes of day must be in [0, 1440), got {value}")
        return float(value)
    if isinstance(value, str):
        match = HHMMSS_PATTERN.match(value.strip())
        if not match:
            raise ValidationError(f"Malformed time '{value}', expected 'HH:MM[:SS]'")
        hours, minutes, seconds = match.group(1), match.group(2), match.group(3)
        return (
            int(hours) * MINUTES_PER_HOUR
            + int(minutes)
            + int(seconds or 0) / SECONDS_PER_MINUTE
        )
    raise ValidationError(f"Expected a time of day, got {value!r}")


def _window_minutes(start: TimeLike, end: TimeLike) -> float:
    """Length of the start -> end window in minutes, wrapping at midnight."""
    return (to_minutes_of_day(end) - to_minutes_of_day(start)) % MINUTES_PER_DAY


def duration(start: str, end: str) -> int:
    """
    Length of an activity in minutes, ``(end - start) mod 1440``.

    Raises
    ------
    AmbiguousDurationError
        If start equals end (zero length and full day are indistinguishable).

    Examples
    --------
    >>> duration("22:30", "01:00")
    150
    """
    start_min, end_min = parse_hhmm(start), parse_hhmm(end)
    if start_min == end_min:
        raise AmbiguousDurationError(
            f"Window {start}-{end} is ambiguous: zero length or a full day"
        )
    return (end_min - start_min) % MINUTES_PER_DAY


def gap(prev_end: str, next_start: str) -> int:
    """
    Waiting time in minutes between the end of one activity and the start
    of the next. A negative raw difference is a midnight crossing.

    Examples
    --------
    >>> gap("23:50", "00:10")
    20
    >>> gap("09:00", "09:00")
    0
    """
    return (parse_hhmm(next_start) - parse_hhmm(prev_end)) % MINUTES_PER_DAY


def is_within(now: TimeLike, start: TimeLike, end: TimeLike) -> bool:
    """Whether ``now`` falls inside the half-open window [start, end)."""
    into_window = (to_minutes_of_day(now) - to_minutes_of_day(start)) % MINUTES_PER_DAY
    return into_window < _window_minutes(start, end)


def progress(now: TimeLike, start: TimeLike, end: TimeLike) -> float:
    """
    Fraction of the start -> end window that has passed at ``now``.

    Clamped to [0, 1]: 0 before start, 1 at or after end, linear in
    between. Not cached; ``now`` changes on every tick.

    For a window that crosses midnight, the idle stretch between ``end``
    and the next ``start`` is split halfway: the first half counts as
    after the window, the second half as before it.

    Examples
    --------
    >>> progress("00:30", "22:00", "01:00")
    0.8333333333333334
    >>> progress("02:00", "22:00", "01:00")
    1.0
    """
    now_min = to_minutes_of_day(now)
    start_min = to_minutes_of_day(start)
    span = _window_minutes(start, end)

    into_window = (now_min - start_min) % MINUTES_PER_DAY
    if into_window < span:
        return min(1.0, max(0.0, into_window / span))

    end_min = start_min + span
    if end_min < MINUTES_PER_DAY:
        return 0.0 if now_min < start_min else 1.0

    idle = MINUTES_PER_DAY - span
    since_end = (now_min - (end_min - MINUTES_PER_DAY)) % MINUTES_PER_DAY
    return 1.0 if since_end < idle / 2 else 0.0


def _seconds_of_day(value: TimeLike) -> int:
    # Truncate to whole seconds so repeated calls within a second agree
    return int(round(to_minutes_of_day(value) * SECONDS_PER_MINUTE, 6))


def countdown(now: TimeLike, deadline: TimeLike) -> CountdownState:
    """
    Time left until ``deadline`` on the operating date.

    Returns the terminal ``ELAPSED`` state once ``now >= deadline``.

    Examples
    --------
    >>> countdown("18:00:00", "18:30")
    CountdownState(hours=0, minutes=30, seconds=0, elapsed=False)
    >>> countdown("18:30:01", "18:30").elapsed
    True
    """
    remaining = _seconds_of_day(deadline) - _seconds_of_day(now)
    if remaining <= 0:
        return ELAPSED

    hours, rest = divmod(remaining, 3600)
    minutes, seconds = divmod(rest, 60)
    return CountdownState(hours, minutes, seconds)


class BoardingCountdown:
    """
    Countdown to a fixed deadline that stays elapsed once it has run out.

    The latch covers clock readings that wrap past midnight later in the
    same session.
    """

    def __init__(self, deadline: TimeLike):
        self.deadline = deadline
        # Fail early on a malformed deadline
        to_minutes_of_day(deadline)
        self._elapsed = False

    @property
    def elapsed(self) -> bool:
        return self._elapsed

    def tick(self, now: TimeLike) -> CountdownState:
        """Recompute the countdown for ``now``."""
        if self._elapsed:
            return ELAPSED

        state = countdown(now, self.deadline)
        if state.elapsed:
            logger.info(f"Boarding deadline {self.deadline} reached")
            self._elapsed = True
        return state
