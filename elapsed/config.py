from dataclasses import dataclass
from typing import Any

from elapsed.divisions import LADDER, TimeDivision, second, year
from elapsed.errors import MissingTranslationError
from elapsed.translations import StringTable, builtin_strings


@dataclass(frozen=True, kw_only=True)
class Config:
    """Options for rendering an elapsed duration.

    Attributes:
        locale: Locale identifier looked up in the string table (e.g. "en").
        min_division: Smallest division worth showing. Anything that would be
            displayed in a smaller division reads as the epsilon phrase.
        max_division: Largest division shown. Decomposition starts here, so
            900 years with ``max_division=day`` reads in days.
        strings: Custom string table. None selects the built-in locales.

    Derive per-call variants with ``dataclasses.replace(DEFAULT_CONFIG, ...)``.
    """

    locale: str = "en"
    min_division: TimeDivision = second
    max_division: TimeDivision = year
    strings: StringTable | None = None

    def __post_init__(self) -> None:
        if self.min_division.millis > self.max_division.millis:
            raise ValueError(
                f"min_division ({self.min_division}) must not be larger than "
                f"max_division ({self.max_division})."
            )
        if not self.table.has_locale(self.locale):
            available = ", ".join(sorted(self.table.locales()))
            raise MissingTranslationError(
                f"No strings for locale {self.locale!r}. "
                f"Available locales: {available}\n"
                f"Hint: pass strings=DictStringTable({{{self.locale!r}: {{...}}}}) "
                f"to supply your own templates.",
                locale=self.locale,
            )

    @property
    def table(self) -> StringTable:
        return self.strings if self.strings is not None else builtin_strings()

    @staticmethod
    def from_dict(data: dict[str, Any], strings: StringTable | None = None) -> "Config":
        """Create a `Config` from a plain mapping.

        Args:
            data: Mapping with optional keys `locale` (str), `min_division` and
                `max_division` (division names such as "second" or "day").
            strings: Optional custom string table.

        Returns:
            A validated `Config`.

        Raises:
            ValueError: If a division name is unknown.
            MissingTranslationError: If the locale has no strings.
        """
        return Config(
            locale=data.get("locale", "en"),
            min_division=LADDER.named(data.get("min_division", "second")),
            max_division=LADDER.named(data.get("max_division", "year")),
            strings=strings,
        )


DEFAULT_CONFIG = Config()
