import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

from elapsed.config import DEFAULT_CONFIG, Config
from elapsed.divisions import TimeDivision
from elapsed.errors import InvalidArgumentError, UnreachableError
from elapsed.translations import EPSILON_KEY, PLACEHOLDER

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def divide(duration_ms: int, top: TimeDivision) -> dict[TimeDivision, int]:
    """Split a duration into whole counts of `top` and every division below it.

    The counts always add back up to the duration:
    ``sum(count * division.millis) == duration_ms``.

    Example:
        >>> {d.name: n for d, n in divide(61_500, minute).items()}
        {'minute': 1, 'second': 1, 'millisecond': 500}

    Raises:
        InvalidArgumentError: If the duration is negative.
    """
    if duration_ms < 0:
        raise InvalidArgumentError(
            f"Cannot divide a negative duration, got {duration_ms}ms."
        )
    counts: dict[TimeDivision, int] = {}
    remaining = duration_ms
    division: TimeDivision | None = top
    while division is not None:
        counts[division], remaining = divmod(remaining, division.millis)
        division = division.sub_division
    return counts


def _select(
    counts: dict[TimeDivision, int], top: TimeDivision
) -> tuple[TimeDivision, TimeDivision | None, int]:
    """Return (division, super_candidate, value) for the largest non-zero count.

    When every count is zero the smallest division is returned with value 0.
    """
    candidate: TimeDivision | None = None
    division: TimeDivision | None = top
    while division is not None:
        value = counts[division]
        if value or division.sub_division is None:
            return division, candidate, value
        candidate = division
        division = division.sub_division
    raise UnreachableError(
        f"Unable to pick a division for counts {counts} starting at {top}."
    )


def format_duration(duration: int | timedelta, config: Config | None = None) -> str:
    """Describe an elapsed duration, e.g. "2 days ago" or "Moments ago".

    Args:
        duration: Elapsed time as integer milliseconds or a `timedelta`.
        config: Rendering options. Defaults to `DEFAULT_CONFIG`.

    Returns:
        The localized phrase.

    Raises:
        InvalidArgumentError: If the duration is negative.
        MissingTranslationError: If the string table lacks a needed template.
        TypeError: If the duration is not an int or a timedelta.

    Example:
        >>> format_duration(46_000)
        '1 minute ago'
        >>> format_duration(timedelta(days=3), Config(locale="fr"))
        'Il y a 3 jours'
    """
    if config is None:
        config = DEFAULT_CONFIG
    duration_ms = _coerce_duration(duration)
    if duration_ms < 0:
        raise InvalidArgumentError(
            f"Duration must be non-negative, got {duration_ms}ms.\n"
            f"Hint: for timestamps use format_between(start, end) with start <= end."
        )

    counts = divide(duration_ms, config.max_division)
    division, candidate, value = _select(counts, config.max_division)

    sub = division.sub_division
    if candidate is not None and value >= division.threshold:
        logger.debug("Promoting %d %s to 1 %s", value, division, candidate)
        division, value = candidate, 1
    elif sub is not None and duration_ms % division.millis >= sub.threshold_millis:
        logger.debug("Rounding %d %s up past the %s threshold", value, division, sub)
        value += 1

    table = config.table
    if value == 0 or division.is_below(config.min_division):
        logger.debug("%dms is below %s, using epsilon", duration_ms, config.min_division)
        return table.lookup(config.locale, EPSILON_KEY)

    key = division.plural_key if value > 1 else division.singular_key
    return table.lookup(config.locale, key).replace(PLACEHOLDER, str(value))


def format_between(
    start: int | datetime,
    end: int | datetime | None = None,
    config: Config | None = None,
) -> str:
    """Describe the time elapsed from `start` to `end` (default: now).

    Args:
        start: Unix timestamp in milliseconds or a timezone-aware datetime.
        end: Same types as `start`. None means the current time.
        config: Rendering options. Defaults to `DEFAULT_CONFIG`.

    Raises:
        InvalidArgumentError: If `end` is earlier than `start`.
        TypeError: If a bound is a naive datetime or an unsupported type.

    Example:
        >>> posted = datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)
        >>> format_between(posted, posted + timedelta(hours=3))
        '3 hours ago'
    """
    start_ms = _coerce_timestamp(start, "start")
    end_ms = time.time_ns() // 1_000_000 if end is None else _coerce_timestamp(end, "end")
    if end_ms < start_ms:
        raise InvalidArgumentError(
            f"End timestamp ({end_ms}) is earlier than start timestamp ({start_ms}).\n"
            f"Hint: pass the older timestamp first: format_between(older, newer)"
        )
    return format_duration(end_ms - start_ms, config)


def _coerce_duration(duration: Any) -> int:
    if isinstance(duration, bool):
        raise TypeError(f"Duration must be int or timedelta, got bool: {duration!r}")
    if isinstance(duration, int):
        return duration
    if isinstance(duration, timedelta):
        return duration // _ONE_MS
    raise TypeError(
        f"Duration must be int (milliseconds) or timedelta.\n"
        f"Got {type(duration).__name__!r}: {duration!r}\n"
        f"Examples:\n"
        f"  format_duration(90_000)\n"
        f"  format_duration(timedelta(minutes=90))"
    )


def _coerce_timestamp(value: Any, edge: Literal["start", "end"]) -> int:
    """Convert a timestamp to integer milliseconds since the Unix epoch.

    Accepts:
    - int: Passed through as-is (Unix milliseconds)
    - datetime: Must be timezone-aware

    Raises:
        TypeError: If value is an unsupported type or naive datetime
    """
    if isinstance(value, bool):
        raise TypeError(f"{edge} timestamp must be int or datetime, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"{edge} timestamp must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return (value - _EPOCH) // _ONE_MS
    raise TypeError(
        f"{edge} timestamp must be int (Unix milliseconds) or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )
