"""String tables mapping a locale to its "time ago" templates.

Templates use the literal token ``{num}`` where the displayed value goes.
Singular templates usually spell the value out ("1 second ago") and carry
no token at all.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from functools import cache
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType

from typing_extensions import override

from elapsed.divisions import LADDER
from elapsed.errors import MissingTranslationError

logger = logging.getLogger(__name__)

EPSILON_KEY = "epsilon"
PLACEHOLDER = "{num}"

REQUIRED_KEYS: frozenset[str] = frozenset(
    [EPSILON_KEY]
    + [division.singular_key for division in LADDER]
    + [division.plural_key for division in LADDER]
)


class StringTable(ABC):

    @abstractmethod
    def lookup(self, locale: str, key: str) -> str:
        """Return the template for `key` in `locale`.

        Raises:
            MissingTranslationError: If the locale or the key is absent.
        """
        pass

    @abstractmethod
    def locales(self) -> frozenset[str]:
        pass

    def has_locale(self, locale: str) -> bool:
        return locale in self.locales()


class DictStringTable(StringTable):
    """String table backed by nested ``{locale: {key: template}}`` mappings."""

    def __init__(self, texts: Mapping[str, Mapping[str, str]]):
        if not texts:
            raise ValueError(
                "String table requires at least one locale.\n"
                'Example: DictStringTable({"en": {"epsilon": "Moments ago", ...}})'
            )
        self._texts: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {locale: MappingProxyType(dict(keys)) for locale, keys in texts.items()}
        )

    @override
    def lookup(self, locale: str, key: str) -> str:
        try:
            templates = self._texts[locale]
        except KeyError:
            available = ", ".join(sorted(self._texts))
            raise MissingTranslationError(
                f"No strings for locale {locale!r}. Available locales: {available}",
                locale=locale,
            ) from None
        try:
            return templates[key]
        except KeyError:
            raise MissingTranslationError(
                f"Locale {locale!r} has no template for {key!r}",
                locale=locale,
                key=key,
            ) from None

    @override
    def locales(self) -> frozenset[str]:
        return frozenset(self._texts)

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {locale: dict(keys) for locale, keys in self._texts.items()}

    def merged(self, overrides: Mapping[str, Mapping[str, str]]) -> "DictStringTable":
        """Return a new table with `overrides` layered over this one, key by key.

        Example:
            >>> table = builtin_strings().merged({"en": {"epsilon": "Just now"}})
        """
        texts = self.as_dict()
        for locale, keys in overrides.items():
            texts.setdefault(locale, {}).update(keys)
        return DictStringTable(texts)


def _parse(raw: str, source: str) -> dict[str, str]:
    data = json.loads(raw)
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(
            f"Strings file {source} must contain a JSON object of "
            f"string keys to string templates."
        )
    return data


def load_directory(path: str | Path) -> DictStringTable:
    """Build a table from the ``<locale>.json`` files found in `path`.

    Args:
        path: Directory holding one JSON object per locale, e.g. ``en.json``.

    Raises:
        ValueError: If the directory has no strings files or a file is malformed.
        OSError: If a file cannot be read.
    """
    directory = Path(path)
    texts = {
        file.stem: _parse(file.read_text(encoding="utf-8"), str(file))
        for file in sorted(directory.glob("*.json"))
    }
    if not texts:
        raise ValueError(f"No <locale>.json strings files found in {directory}")
    logger.debug("Loaded %d locale(s) from %s", len(texts), directory)
    return DictStringTable(texts)


@cache
def builtin_strings() -> DictStringTable:
    """Return the table of locales bundled with the package (loaded once)."""
    locales_path = files(__package__) / "locales"
    texts = {
        entry.name.removesuffix(".json"): _parse(
            entry.read_text(encoding="utf-8"), entry.name
        )
        for entry in locales_path.iterdir()
        if entry.name.endswith(".json")
    }
    logger.debug("Loaded %d built-in locale(s): %s", len(texts), sorted(texts))
    return DictStringTable(texts)
