# utils.py
import logging
import sys
from datetime import datetime, timezone

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_LOG_LEVEL = logging.INFO

_logger_names = set()
_current_level = DEFAULT_LOG_LEVEL


def resolve_log_level(value) -> int:
    """Map a level name such as "debug" to its number, INFO when unset or unknown."""
    if not value:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def setup_logger(name: str = "slack_data_collector") -> logging.Logger:
    logger = logging.getLogger(name)
    if name not in _logger_names:
        logger.setLevel(_current_level)
        _logger_names.add(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s", "%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_log_level(value) -> int:
    """Apply LOG_LEVEL to every logger made by setup_logger; returns the level used."""
    global _current_level
    level = resolve_log_level(value)
    _current_level = level
    for name in _logger_names:
        logging.getLogger(name).setLevel(level)
    return level


def date_to_timestamp(date_string: str) -> int:
    """Convert a YYYY-MM-DD date to the Unix timestamp of its UTC midnight."""
    day = datetime.strptime(date_string, DATE_FORMAT).replace(tzinfo=timezone.utc)
    return int(day.timestamp())


def is_bot_message(message: dict) -> bool:
    """A message is from a bot if it has a bot id, a bot profile or the bot_message subtype."""
    return bool(
        message.get("bot_id")
        or message.get("bot_profile")
        or message.get("subtype") == "bot_message"
    )
