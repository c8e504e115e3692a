from dataclasses import dataclass, field
from typing import Optional, Tuple


def _without_missing_user(data: dict) -> dict:
    # records from integrations or deleted accounts have no user; leave the key out
    if data["user"] is None:
        del data["user"]
    return data


@dataclass(frozen=True)
class Reaction:
    name: str
    count: int
    users: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, raw: dict) -> "Reaction":
        return cls(
            name=raw.get("name"),
            count=raw.get("count"),
            users=tuple(raw.get("users") or ()),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Reaction":
        return cls.from_api(data)

    def to_dict(self) -> dict:
        return {"name": self.name, "count": self.count, "users": list(self.users)}


@dataclass(frozen=True)
class Reply:
    ts: str
    user: Optional[str]
    text: str = ""

    @classmethod
    def from_api(cls, raw: dict) -> "Reply":
        return cls(ts=raw.get("ts"), user=raw.get("user"), text=raw.get("text") or "")

    @classmethod
    def from_dict(cls, data: dict) -> "Reply":
        return cls.from_api(data)

    def to_dict(self) -> dict:
        return _without_missing_user({"ts": self.ts, "user": self.user, "text": self.text})


@dataclass(frozen=True)
class Message:
    ts: str
    user: Optional[str]
    text: str = ""
    thread_ts: Optional[str] = None
    reply_count: int = 0
    replies: Tuple[Reply, ...] = ()
    reactions: Tuple[Reaction, ...] = ()

    @classmethod
    def from_api(cls, raw: dict, replies: Tuple[Reply, ...] = ()) -> "Message":
        """Shape a raw conversations.history record plus its already-resolved replies."""
        return cls(
            ts=raw.get("ts"),
            user=raw.get("user"),
            text=raw.get("text") or "",
            thread_ts=raw.get("thread_ts") or None,
            reply_count=raw.get("reply_count") or 0,
            replies=tuple(replies),
            reactions=tuple(Reaction.from_api(r) for r in raw.get("reactions") or ()),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        return cls.from_api(data, tuple(Reply.from_dict(r) for r in data.get("replies") or ()))

    def to_dict(self) -> dict:
        return _without_missing_user({
            "ts": self.ts,
            "user": self.user,
            "text": self.text,
            "thread_ts": self.thread_ts,
            "reply_count": self.reply_count,
            "replies": [r.to_dict() for r in self.replies],
            "reactions": [r.to_dict() for r in self.reactions],
        })


@dataclass(frozen=True)
class ChannelResult:
    id: str
    name: str
    messages: Tuple[Message, ...] = ()
    error: Optional[str] = None

    @classmethod
    def failed(cls, channel_id: str, error: str) -> "ChannelResult":
        return cls(id=channel_id, name=channel_id, messages=(), error=error)

    @classmethod
    def from_dict(cls, data: dict) -> "ChannelResult":
        return cls(
            id=data["id"],
            name=data["name"],
            messages=tuple(Message.from_dict(m) for m in data.get("messages") or ()),
            error=data.get("error"),
        )

    @property
    def reply_total(self) -> int:
        return sum(len(m.replies) for m in self.messages)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "messages": [m.to_dict() for m in self.messages],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class OutputDocument:
    channels: Tuple[ChannelResult, ...] = ()
    period: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "OutputDocument":
        return cls(
            channels=tuple(ChannelResult.from_dict(c) for c in data.get("channels") or ()),
            period=dict(data.get("period") or {}),
        )

    def to_dict(self) -> dict:
        return {
            "channels": [c.to_dict() for c in self.channels],
            "period": dict(self.period),
        }
