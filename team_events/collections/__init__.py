"""Event collections: normalization pipeline, view models and facets.

This module provides:
- EventCollections: current/past event lists and facets per locale
- EventNormalizer / SessionNormalizer: raw records to view models
- Facet helpers: de-duplicated, sorted locations, speakers and topics
"""

from team_events.collections.facets import (
    collation_key,
    extract_facets,
    unique_locations,
    unique_speakers,
    unique_topics,
)
from team_events.collections.normalizer import EventNormalizer
from team_events.collections.pipeline import (
    EventCollections,
    EventComparator,
    EventFilter,
)
from team_events.collections.schemas import (
    EventFacets,
    EventViewModel,
    PanelSessionView,
    SessionViewModel,
    SpeakerFacet,
    SpeakerSessionView,
)
from team_events.collections.sessions import SessionNormalizer

__all__ = [
    "EventCollections",
    "EventComparator",
    "EventFacets",
    "EventFilter",
    "EventNormalizer",
    "EventViewModel",
    "PanelSessionView",
    "SessionNormalizer",
    "SessionViewModel",
    "SpeakerFacet",
    "SpeakerSessionView",
    "collation_key",
    "extract_facets",
    "unique_locations",
    "unique_speakers",
    "unique_topics",
]
