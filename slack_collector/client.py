from typing import Optional

from slack_sdk import WebClient

from utils import setup_logger

logger = setup_logger("SlackClient")


class SlackClient:
    """Read-only access to the three conversations.* endpoints the collector uses."""

    def __init__(self, token: str, client: Optional[WebClient] = None):
        if not token:
            logger.error("Slack bot token not provided")
            raise ValueError("Slack token is missing")

        self.client = client or WebClient(token=token)
        logger.debug("Slack client initialized")

    def get_channel_info(self, channel_id: str) -> dict:
        response = self.client.conversations_info(channel=channel_id)
        return response.get("channel") or {}

    def get_history_page(self, channel_id: str, oldest: int, latest: int,
                         limit: int, cursor: Optional[str] = None) -> dict:
        """Returns {"messages": [...], "next_cursor": str or None} for one page of history."""
        response = self.client.conversations_history(
            channel=channel_id,
            oldest=str(oldest),
            latest=str(latest),
            limit=limit,
            cursor=cursor
        )
        return _page(response)

    def get_replies_page(self, channel_id: str, thread_ts: str,
                         cursor: Optional[str] = None) -> dict:
        logger.debug(f"Fetching replies for thread_ts={thread_ts}")
        response = self.client.conversations_replies(
            channel=channel_id,
            ts=thread_ts,
            cursor=cursor
        )
        return _page(response)


def _page(response) -> dict:
    return {
        "messages": response.get("messages") or [],
        "next_cursor": (response.get("response_metadata") or {}).get("next_cursor") or None,
    }
