"""Private channel names and their parsing rules.

A private channel is named ``private-{topic}-{id}`` where *topic* selects
the ownership check and *id* is numeric text. Anything that does not match
parses to an empty :class:`ChannelRef`, which no topic check accepts.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel

CHANNEL_PREFIX = "private"

CHANNEL_PATTERN: re.Pattern[str] = re.compile(r"private-(?P<topic>[a-z]+)-(?P<id>[0-9]+)")

CHANNEL_ID_PATTERN: re.Pattern[str] = re.compile(r"[0-9]+")

USER_TOPIC = "user"
CONNECTION_TOPIC = "connection"

RECOGNIZED_TOPICS: frozenset[str] = frozenset({USER_TOPIC, CONNECTION_TOPIC})


class ChannelRef(BaseModel):
    """Parsed components of a channel string. Both are None on mismatch."""

    model_config = {"frozen": True}

    topic: str | None = None
    id: str | None = None

    @property
    def matched(self) -> bool:
        return self.topic is not None


def parse_channel(channel: Any) -> ChannelRef:
    """Split *channel* into topic and id.

    Non-string input and strings outside the private pattern yield an
    empty ``ChannelRef`` instead of raising.
    """
    if not isinstance(channel, str):
        return ChannelRef()
    match = CHANNEL_PATTERN.fullmatch(channel)
    if match is None:
        return ChannelRef()
    return ChannelRef(topic=match.group("topic"), id=match.group("id"))


def is_channel_id(text: str) -> bool:
    """True when *text* is usable as the id part of a channel (ASCII digits only)."""
    return CHANNEL_ID_PATTERN.fullmatch(text) is not None


def channel_name(topic: str, channel_id: str | int) -> str:
    """Build the private channel name for *topic* and *channel_id*."""
    if topic not in RECOGNIZED_TOPICS:
        msg = f"Unknown channel topic {topic!r}; expected one of {sorted(RECOGNIZED_TOPICS)}"
        raise ValueError(msg)
    text = str(channel_id)
    if not is_channel_id(text):
        msg = f"Channel id must be numeric, got {text!r}"
        raise ValueError(msg)
    return f"{CHANNEL_PREFIX}-{topic}-{text}"
