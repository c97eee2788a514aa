"""Facet extraction for the events filter UI.

Each facet is de-duplicated with an insertion-ordered dict keyed by its
identity, then sorted with a locale-independent collation key so output
is stable for identical input.
"""

import unicodedata
from collections.abc import Iterable
from typing import assert_never

from team_events.collections.schemas import (
    EventFacets,
    EventViewModel,
    PanelSessionView,
    SpeakerFacet,
    SpeakerSessionView,
)


def collation_key(value: str) -> tuple[str, str, str]:
    """Sort key approximating default ``localeCompare`` ordering.

    Compares ignoring accents and case first, then case, then raw text.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), value.casefold(), value


def unique_locations(events: Iterable[EventViewModel]) -> list[str]:
    """Distinct event locations, sorted."""
    locations = dict.fromkeys(e.location for e in events)
    return sorted(locations, key=collation_key)


def unique_topics(events: Iterable[EventViewModel]) -> list[str]:
    """Distinct session topics across all events, sorted."""
    topics = dict.fromkeys(
        topic for e in events for s in e.sessions for topic in s.topics
    )
    return sorted(topics, key=collation_key)


def unique_speakers(events: Iterable[EventViewModel]) -> list[SpeakerFacet]:
    """Distinct speakers and panel participants, sorted by title.

    The first occurrence of a handle decides its title.
    """
    speakers: dict[str, SpeakerFacet] = {}
    for event in events:
        for session in event.sessions:
            match session:
                case SpeakerSessionView():
                    people = [session.speaker]
                case PanelSessionView():
                    people = session.participants
                case _:
                    assert_never(session)
            for person in people:
                if person.handle not in speakers:
                    speakers[person.handle] = SpeakerFacet(
                        handle=person.handle, title=person.title
                    )

    return sorted(speakers.values(), key=lambda s: collation_key(s.title))


def extract_facets(events: Iterable[EventViewModel]) -> EventFacets:
    """Compute all three facets from normalized events."""
    events = list(events)
    return EventFacets(
        locations=unique_locations(events),
        speakers=unique_speakers(events),
        topics=unique_topics(events),
    )
