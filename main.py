#!/usr/bin/env python3
"""
Collect messages, threads and reactions from Slack channels into slack_data.json.

Environment:
    SLACK_BOT_TOKEN / INPUT_SLACK_BOT_TOKEN   bot token (required)
    SLACK_CHANNELS / INPUT_SLACK_CHANNELS     comma-separated channel ids
    START_DATE, END_DATE                      YYYY-MM-DD, end date inclusive
    GITHUB_OUTPUT                             set by GitHub Actions
    LOG_LEVEL                                 DEBUG, INFO, ... (INFO when unknown)
"""
import os
import sys

from dotenv import find_dotenv, load_dotenv

from config import ConfigError, load_config
from slack_collector.client import SlackClient
from slack_collector.collector import collect_all
from slack_collector.fetcher import ChannelFetcher
from slack_collector.writer import (append_github_output, count_messages, count_replies,
                                    print_summary, write_output)
from utils import set_log_level, setup_logger

logger = setup_logger()


def main(env=None, api=None) -> int:
    """
    Run one collection.

    Args:
        env: environment mapping, defaults to os.environ (with .env merged in)
        api: Slack API capability to use instead of a SlackClient built from the token

    Returns:
        process exit code
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ
    set_log_level(env.get("LOG_LEVEL"))

    try:
        config = load_config(env)
    except ConfigError as e:
        logger.error(f"Error: {e}")
        return 1

    if not config.channels:
        logger.info("No Slack channels specified, skipping Slack data collection")
        return 0

    try:
        logger.info(f"Period: {config.start_date} to {config.end_date}")
        logger.info(f"Channels to process: {len(config.channels)}")
        for channel_id in config.channels:
            logger.info(f"  - {channel_id}")

        if api is None:
            api = SlackClient(config.token)
        fetcher = ChannelFetcher(
            api,
            max_messages=config.max_messages_per_channel,
            messages_per_page=config.messages_per_page
        )

        document = collect_all(fetcher, config)
        write_output(document, config.output_file)

        total_messages = count_messages(document)
        total_replies = count_replies(document)
        print_summary(config.output_file, total_messages, total_replies)

        if config.github_output:
            append_github_output(config.github_output, config.output_file,
                                 total_messages, total_replies)
    except Exception:
        logger.exception("Fatal error during Slack data collection")
        return 1

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
