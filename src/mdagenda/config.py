"""Configuration management for mdagenda."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

MDAGENDA_HOME = Path(os.environ.get("MDAGENDA_HOME", Path.home() / ".config" / "mdagenda"))
CONFIG_FILE = MDAGENDA_HOME / "mdagenda.conf"

# Documents larger than this are skipped
MAX_FILE_SIZE = 10 * 1024 * 1024

# Scanning stops after this many tasks
MAX_TASKS = 10_000

# Built-in weekday tables. Full names come before abbreviations so that a
# short token never rewrites part of a longer one.
LOCALE_WEEKDAYS: dict[str, list[tuple[str, str]]] = {
    "en": [],
    "ru": [
        ("Понедельник", "Monday"),
        ("Вторник", "Tuesday"),
        ("Среда", "Wednesday"),
        ("Четверг", "Thursday"),
        ("Пятница", "Friday"),
        ("Суббота", "Saturday"),
        ("Воскресенье", "Sunday"),
        ("Пн", "Mon"),
        ("Вт", "Tue"),
        ("Ср", "Wed"),
        ("Чт", "Thu"),
        ("Пт", "Fri"),
        ("Сб", "Sat"),
        ("Вс", "Sun"),
    ],
    "de": [
        ("Montag", "Monday"),
        ("Dienstag", "Tuesday"),
        ("Mittwoch", "Wednesday"),
        ("Donnerstag", "Thursday"),
        ("Freitag", "Friday"),
        ("Samstag", "Saturday"),
        ("Sonntag", "Sunday"),
        ("Mo.", "Mon"),
        ("Di.", "Tue"),
        ("Mi.", "Wed"),
        ("Do.", "Thu"),
        ("Fr.", "Fri"),
        ("Sa.", "Sat"),
        ("So.", "Sun"),
    ],
}


@dataclass
class Config:
    """mdagenda configuration."""

    timezone: str = "UTC"
    locale: str = "en"
    weekday_mappings: list[tuple[str, str]] = field(default_factory=list)
    glob: str = "*.md"
    max_file_size: int = MAX_FILE_SIZE
    max_tasks: int = MAX_TASKS

    def mappings(self) -> list[tuple[str, str]]:
        """Explicit mappings first, then the built-in table for the locale."""
        builtin = LOCALE_WEEKDAYS.get(self.locale)
        if builtin is None:
            logger.warning(f"Unknown locale '{self.locale}', no built-in weekday names")
            builtin = []
        return [*self.weekday_mappings, *builtin]


def parse_weekday_mappings(value: str) -> list[tuple[str, str]]:
    """Parse "Пн:Mon,Вт:Tue" into ordered pairs."""
    pairs = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if ":" not in entry:
            logger.warning(f"Ignoring weekday mapping without ':': {entry}")
            continue
        localized, english = entry.split(":", 1)
        pairs.append((localized.strip(), english.strip()))
    return pairs


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from mdagenda.conf file."""
    path = path or CONFIG_FILE
    config = Config()

    if not path.exists():
        return config

    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "timezone":
                config.timezone = value
            case "locale":
                config.locale = value.lower()
            case "weekday_mappings":
                config.weekday_mappings = parse_weekday_mappings(value)
            case "glob":
                config.glob = value
            case "max_file_size":
                config.max_file_size = _parse_int(key, value, MAX_FILE_SIZE)
            case "max_tasks":
                config.max_tasks = _parse_int(key, value, MAX_TASKS)
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
