from slack_sdk.errors import SlackApiError

from config import CollectorConfig
from slack_collector.fetcher import ChannelFetcher
from slack_collector.models import ChannelResult, OutputDocument
from utils import setup_logger

logger = setup_logger("Collector")


def collect_channel(fetcher: ChannelFetcher, channel_id: str, config: CollectorConfig) -> ChannelResult:
    logger.info(f"Collecting messages from channel: {channel_id}")
    try:
        name = fetcher.resolve_channel_name(channel_id)
        messages = fetcher.fetch_messages(channel_id, config.start_ts, config.end_ts)
    except SlackApiError as e:
        error = e.response["error"]
        logger.error(f"Slack API error collecting from channel {channel_id}: {error}")
        return ChannelResult.failed(channel_id, error)
    except Exception as e:
        logger.error(f"Error collecting from channel {channel_id}: {e}")
        return ChannelResult.failed(channel_id, str(e))

    logger.info(f"Collected {len(messages)} messages from {name} (bots filtered out)")
    return ChannelResult(id=channel_id, name=name, messages=messages)


def collect_all(fetcher: ChannelFetcher, config: CollectorConfig) -> OutputDocument:
    """Collect every configured channel, one after another."""
    results = tuple(collect_channel(fetcher, channel_id, config) for channel_id in config.channels)
    return OutputDocument(channels=results, period=config.period)
