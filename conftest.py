import pytest


class FakeSlackApi:
    """
    In-memory stand-in for SlackClient.

    history: {channel_id: [page, page, ...]} where each page is a list of raw messages
    threads: {(channel_id, thread_ts): [page, ...]}
    names:   {channel_id: name}
    failing: set of (operation, key) pairs that raise instead of answering;
             operation is "info", "history" or "replies", key is the channel id
             (or thread ts for "replies")
    """

    def __init__(self, history=None, threads=None, names=None, failing=None):
        self.history = history or {}
        self.threads = threads or {}
        self.names = names or {}
        self.failing = failing or set()
        self.calls = []

    def _check(self, operation, key):
        if (operation, key) in self.failing:
            raise RuntimeError(f"{operation} failed for {key}")

    @staticmethod
    def _serve(pages, cursor):
        index = int(cursor.split("-")[1]) if cursor else 0
        next_cursor = f"page-{index + 1}" if index + 1 < len(pages) else None
        return {"messages": list(pages[index]) if pages else [], "next_cursor": next_cursor}

    def get_channel_info(self, channel_id):
        self.calls.append(("info", channel_id))
        self._check("info", channel_id)
        return {"id": channel_id, "name": self.names.get(channel_id)}

    def get_history_page(self, channel_id, oldest, latest, limit, cursor=None):
        self.calls.append(("history", channel_id, oldest, latest, limit, cursor))
        self._check("history", channel_id)
        return self._serve(self.history.get(channel_id, []), cursor)

    def get_replies_page(self, channel_id, thread_ts, cursor=None):
        self.calls.append(("replies", channel_id, thread_ts, cursor))
        self._check("replies", thread_ts)
        return self._serve(self.threads.get((channel_id, thread_ts), []), cursor)


def make_message(ts, user="U1", text="hello", **extra):
    message = {"type": "message", "ts": ts, "user": user, "text": text}
    message.update(extra)
    return message


@pytest.fixture
def fake_api():
    return FakeSlackApi()


@pytest.fixture
def general_channel():
    """
    Channel "general" with 3 human messages, one bot post, and one thread holding
    2 human replies and 1 bot reply.
    """
    parent = make_message(
        "1704070000.000100",
        text="release notes are up",
        thread_ts="1704070000.000100",
        reply_count=3,
        reactions=[{"name": "thumbsup", "count": 2, "users": ["u1", "u2"]}],
    )
    history = {
        "C_GENERAL": [[
            parent,
            make_message("1704071000.000200", user="U2", text="morning"),
            make_message("1704072000.000300", bot_id="B1", text="deploy finished"),
            make_message("1704073000.000400", user="U3", text=""),
        ]]
    }
    threads = {
        ("C_GENERAL", "1704070000.000100"): [[
            parent,
            make_message("1704070100.000101", user="U2", text="thanks",
                         thread_ts="1704070000.000100"),
            make_message("1704070200.000102", subtype="bot_message", text="auto reply",
                         thread_ts="1704070000.000100"),
            make_message("1704070300.000103", user="U3", text="nice",
                         thread_ts="1704070000.000100"),
        ]]
    }
    return FakeSlackApi(history=history, threads=threads, names={"C_GENERAL": "general"})
