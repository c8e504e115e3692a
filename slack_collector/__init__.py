"""
Slack history collection for the Slack data collector.
"""

from .client import SlackClient
from .collector import collect_all, collect_channel
from .fetcher import ChannelFetcher
from .models import ChannelResult, Message, OutputDocument, Reaction, Reply

__all__ = [
    'SlackClient',
    'ChannelFetcher',
    'collect_all',
    'collect_channel',
    'ChannelResult',
    'Message',
    'OutputDocument',
    'Reaction',
    'Reply',
]
