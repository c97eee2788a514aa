"""Raw event content: record schemas and the stores that supply them."""

from team_events.content.schemas import (
    PanelSessionRecord,
    RawEvent,
    RawSession,
    SpeakerSessionRecord,
)
from team_events.content.store import (
    ContentError,
    ContentStore,
    InMemoryContentStore,
    MarkdownContentStore,
    parse_front_matter,
)

__all__ = [
    "ContentError",
    "ContentStore",
    "InMemoryContentStore",
    "MarkdownContentStore",
    "PanelSessionRecord",
    "RawEvent",
    "RawSession",
    "SpeakerSessionRecord",
    "parse_front_matter",
]
