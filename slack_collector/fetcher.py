from typing import List, Tuple

from config import MAX_MESSAGES_PER_CHANNEL, MESSAGES_PER_PAGE
from slack_collector.models import Message, Reply
from utils import is_bot_message, setup_logger


class ChannelFetcher:
    def __init__(self, api, max_messages: int = MAX_MESSAGES_PER_CHANNEL,
                 messages_per_page: int = MESSAGES_PER_PAGE):
        """
        Args:
            api: anything with get_channel_info / get_history_page / get_replies_page,
                 normally slack_collector.client.SlackClient
            max_messages: cap on top-level messages kept per channel
            messages_per_page: history page size
        """
        self.api = api
        self.max_messages = max_messages
        self.messages_per_page = messages_per_page
        self.logger = setup_logger("ChannelFetcher")

    def resolve_channel_name(self, channel_id: str) -> str:
        try:
            info = self.api.get_channel_info(channel_id)
            name = info.get("name") or channel_id
            self.logger.info(f"Channel name: {name}")
            return name
        except Exception as e:
            self.logger.warning(f"Could not get channel info for {channel_id}: {e}")
            return channel_id

    def fetch_replies(self, channel_id: str, parent: dict) -> Tuple[Reply, ...]:
        """
        Fetch the thread under `parent` and return its non-bot replies.

        The first record of a thread is the parent itself and is never returned.
        Errors are logged and give an empty tuple.
        """
        parent_ts = parent.get("ts")
        records: List[dict] = []
        cursor = None
        try:
            while True:
                page = self.api.get_replies_page(channel_id, parent_ts, cursor=cursor)
                records.extend(page["messages"])
                cursor = page.get("next_cursor")
                if not cursor:
                    break
        except Exception as e:
            self.logger.warning(f"Could not fetch replies for message {parent_ts}: {e}")
            return ()

        return tuple(
            Reply.from_api(msg)
            for msg in records[1:]
            if msg.get("ts") != parent_ts and not is_bot_message(msg)
        )

    def fetch_messages(self, channel_id: str, start_ts: int, end_ts: int) -> Tuple[Message, ...]:
        """
        Page through channel history in [start_ts, end_ts], dropping bot messages
        and resolving threads, until pagination ends or the cap is reached.

        Hitting the cap drops the rest of the current page and all later pages.
        """
        messages: List[Message] = []
        cursor = None

        while True:
            page = self.api.get_history_page(
                channel_id,
                oldest=start_ts,
                latest=end_ts,
                limit=self.messages_per_page,
                cursor=cursor
            )
            for raw in page["messages"]:
                if is_bot_message(raw):
                    continue

                replies: Tuple[Reply, ...] = ()
                if (raw.get("reply_count") or 0) > 0:
                    replies = self.fetch_replies(channel_id, raw)

                messages.append(Message.from_api(raw, replies))
                if len(messages) >= self.max_messages:
                    self.logger.warning(
                        f"Reached limit of {self.max_messages} messages in {channel_id}, "
                        "remaining messages are skipped"
                    )
                    return tuple(messages)

            cursor = page.get("next_cursor")
            if not cursor:
                break

        return tuple(messages)
