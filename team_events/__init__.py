"""Events collections for the "meet the team" pages.

Turns raw event content into view models split into past and upcoming
events, with resolved speakers and filter facets.
"""

from team_events.collections import EventCollections, EventFacets, EventViewModel
from team_events.site import build_collections, configure_logging

__all__ = [
    "EventCollections",
    "EventFacets",
    "EventViewModel",
    "build_collections",
    "configure_logging",
]
