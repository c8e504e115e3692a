import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from utils import date_to_timestamp

MAX_MESSAGES_PER_CHANNEL = 1000
MESSAGES_PER_PAGE = 100
SECONDS_PER_DAY = 86400
DEFAULT_OUTPUT_FILE = "slack_data.json"

# GitHub Actions exposes `with:` inputs as INPUT_* variables
TOKEN_VARS = ("INPUT_SLACK_BOT_TOKEN", "SLACK_BOT_TOKEN")
CHANNEL_VARS = ("INPUT_SLACK_CHANNELS", "SLACK_CHANNELS")


class ConfigError(ValueError):
    """Required configuration is missing or malformed."""


@dataclass(frozen=True)
class CollectorConfig:
    token: str
    channels: Tuple[str, ...]
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    start_ts: Optional[int] = None
    end_ts: Optional[int] = None
    max_messages_per_channel: int = MAX_MESSAGES_PER_CHANNEL
    messages_per_page: int = MESSAGES_PER_PAGE
    output_file: str = DEFAULT_OUTPUT_FILE
    github_output: Optional[str] = None

    @property
    def period(self) -> dict:
        return {
            "start": f"{self.start_date}T00:00:00Z",
            "end": f"{self.end_date}T23:59:59Z",
        }


def _first_set(env: Mapping[str, str], names) -> str:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return ""


def parse_channels(raw: str) -> Tuple[str, ...]:
    return tuple(ch.strip() for ch in raw.split(",") if ch.strip())


def _parse_date(name: str, value: str) -> int:
    try:
        return date_to_timestamp(value)
    except ValueError:
        raise ConfigError(f"{name} must be a YYYY-MM-DD date, got {value!r}")


def load_config(env: Optional[Mapping[str, str]] = None) -> CollectorConfig:
    """
    Build the run configuration from environment values.

    Args:
        env: mapping to read from, defaults to os.environ

    Returns:
        CollectorConfig. `channels` is empty when there is nothing to collect,
        in which case the date fields are left unset.

    Raises:
        ConfigError: token missing, or channels given without a valid date range
    """
    if env is None:
        env = os.environ

    token = _first_set(env, TOKEN_VARS)
    if not token:
        raise ConfigError("SLACK_BOT_TOKEN is required")

    channels = parse_channels(_first_set(env, CHANNEL_VARS))
    output_file = env.get("SLACK_DATA_FILE") or DEFAULT_OUTPUT_FILE
    github_output = env.get("GITHUB_OUTPUT") or None

    if not channels:
        return CollectorConfig(
            token=token,
            channels=(),
            output_file=output_file,
            github_output=github_output,
        )

    start_date = env.get("START_DATE")
    end_date = env.get("END_DATE")
    if not start_date or not end_date:
        raise ConfigError("START_DATE and END_DATE must be set")

    start_ts = _parse_date("START_DATE", start_date)
    end_day_ts = _parse_date("END_DATE", end_date)
    if end_day_ts < start_ts:
        raise ConfigError(f"END_DATE {end_date} is before START_DATE {start_date}")

    raw_limit = env.get("MAX_MESSAGES_PER_CHANNEL")
    max_messages = MAX_MESSAGES_PER_CHANNEL
    if raw_limit:
        try:
            max_messages = int(raw_limit)
        except ValueError:
            raise ConfigError(f"MAX_MESSAGES_PER_CHANNEL must be an integer, got {raw_limit!r}")
        if max_messages <= 0:
            raise ConfigError("MAX_MESSAGES_PER_CHANNEL must be positive")

    return CollectorConfig(
        token=token,
        channels=channels,
        start_date=start_date,
        end_date=end_date,
        start_ts=start_ts,
        # end date is inclusive
        end_ts=end_day_ts + SECONDS_PER_DAY,
        max_messages_per_channel=max_messages,
        output_file=output_file,
        github_output=github_output,
    )
