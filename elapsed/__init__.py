from .config import DEFAULT_CONFIG, Config
from .core import divide, format_between, format_duration
from .divisions import (
    LADDER,
    Ladder,
    TimeDivision,
    day,
    hour,
    millisecond,
    minute,
    month,
    second,
    year,
)
from .errors import (
    ElapsedError,
    InvalidArgumentError,
    MissingTranslationError,
    UnreachableError,
)
from .translations import (
    REQUIRED_KEYS,
    DictStringTable,
    StringTable,
    builtin_strings,
    load_directory,
)

__all__ = [
    "format_duration",
    "format_between",
    "divide",
    "Config",
    "DEFAULT_CONFIG",
    "TimeDivision",
    "Ladder",
    "LADDER",
    "millisecond",
    "second",
    "minute",
    "hour",
    "day",
    "month",
    "year",
    "StringTable",
    "DictStringTable",
    "REQUIRED_KEYS",
    "builtin_strings",
    "load_directory",
    "ElapsedError",
    "InvalidArgumentError",
    "MissingTranslationError",
    "UnreachableError",
]
