"""The ladder of time divisions used to describe an elapsed duration.

Each division knows its length in milliseconds and its promotion threshold:
the count at which a value is close enough to be shown as one unit of the
next larger division (46 seconds reads as "1 minute ago").
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

from typing_extensions import override

from elapsed.util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, YEAR

_SUFFIX = "_ago"


@dataclass(frozen=True, kw_only=True)
class TimeDivision:
    name: str
    millis: int
    threshold: int
    index: int = field(default=0, compare=False)
    ladder: "Ladder | None" = field(default=None, compare=False, repr=False)

    @property
    def threshold_millis(self) -> int:
        return self.threshold * self.millis

    @property
    def singular_key(self) -> str:
        return f"{self.name}{_SUFFIX}"

    @property
    def plural_key(self) -> str:
        return f"{self.name}s{_SUFFIX}"

    @property
    def sub_division(self) -> "TimeDivision | None":
        """The next smaller division, or None for the smallest one."""
        if self.ladder is None or self.index == 0:
            return None
        return self.ladder[self.index - 1]

    @property
    def super_division(self) -> "TimeDivision | None":
        """The next larger division, or None for the largest one."""
        if self.ladder is None or self.index == len(self.ladder) - 1:
            return None
        return self.ladder[self.index + 1]

    def iter_below(self) -> Iterator["TimeDivision"]:
        """Yield every division reachable through repeated `sub_division`."""
        current = self.sub_division
        while current is not None:
            yield current
            current = current.sub_division

    def is_below(self, other: "TimeDivision") -> bool:
        """True if this division sits anywhere under `other` in the ladder."""
        return any(division == self for division in other.iter_below())

    @override
    def __str__(self) -> str:
        return self.name


class Ladder(Sequence[TimeDivision]):
    """An immutable chain of divisions ordered from smallest to largest.

    Rows are ``(name, millis, threshold)`` tuples. Neighbour links are derived
    from the position of each division, so the chain is fixed once built.
    """

    def __init__(self, rows: Iterable[tuple[str, int, int]]):
        self._divisions: tuple[TimeDivision, ...] = tuple(
            TimeDivision(
                name=name, millis=millis, threshold=threshold, index=i, ladder=self
            )
            for i, (name, millis, threshold) in enumerate(rows)
        )
        self._by_name: dict[str, TimeDivision] = {d.name: d for d in self._divisions}
        self._validate()

    def _validate(self) -> None:
        if not self._divisions:
            raise ValueError("Ladder requires at least one division.")

        if len(self._by_name) != len(self._divisions):
            names = [d.name for d in self._divisions]
            raise ValueError(f"Ladder division names must be unique, got {names}")

        for division in self._divisions:
            is_largest = division.super_division is None
            if is_largest and division.threshold != 0:
                raise ValueError(
                    f"Largest division {division.name!r} has nothing to promote "
                    f"into, its threshold must be 0 (got {division.threshold})."
                )
            if not is_largest and division.threshold <= 0:
                raise ValueError(
                    f"Division {division.name!r} threshold must be a positive "
                    f"integer, got {division.threshold}"
                )

            sub = division.sub_division
            if sub is None:
                if division.millis <= 0:
                    raise ValueError(
                        f"Division {division.name!r} must last at least 1ms, "
                        f"got {division.millis}"
                    )
                continue
            if division.millis <= sub.millis:
                raise ValueError(
                    f"Ladder must be strictly increasing: {division.name!r} "
                    f"({division.millis}ms) is not larger than {sub.name!r} "
                    f"({sub.millis}ms)."
                )
            if division.millis % sub.millis:
                raise ValueError(
                    f"Division {division.name!r} ({division.millis}ms) is not an "
                    f"exact multiple of {sub.name!r} ({sub.millis}ms)."
                )

    @overload
    def __getitem__(self, index: int) -> TimeDivision: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[TimeDivision]: ...

    @override
    def __getitem__(
        self, index: int | slice
    ) -> TimeDivision | Sequence[TimeDivision]:
        return self._divisions[index]

    @override
    def __len__(self) -> int:
        return len(self._divisions)

    @override
    def __iter__(self) -> Iterator[TimeDivision]:
        return iter(self._divisions)

    @property
    def smallest(self) -> TimeDivision:
        return self._divisions[0]

    @property
    def largest(self) -> TimeDivision:
        return self._divisions[-1]

    def named(self, name: str) -> TimeDivision:
        """Return the division called `name` (case-insensitive)."""
        try:
            return self._by_name[name.lower()]
        except KeyError:
            valid = ", ".join(self._by_name)
            raise ValueError(
                f"Unknown time division {name!r}. Valid divisions: {valid}"
            ) from None


LADDER = Ladder(
    [
        ("millisecond", MILLISECOND, 750),
        ("second", SECOND, 45),
        ("minute", MINUTE, 45),
        ("hour", HOUR, 22),
        ("day", DAY, 26),
        ("month", MONTH, 11),  # 30 days
        ("year", YEAR, 0),  # 12 months
    ]
)

millisecond: TimeDivision = LADDER.named("millisecond")
second: TimeDivision = LADDER.named("second")
minute: TimeDivision = LADDER.named("minute")
hour: TimeDivision = LADDER.named("hour")
day: TimeDivision = LADDER.named("day")
month: TimeDivision = LADDER.named("month")
year: TimeDivision = LADDER.named("year")
