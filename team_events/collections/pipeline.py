"""Event collection pipeline: the entry points the events pages consume.

Every call re-reads the content store and re-derives its output. Nothing
is cached between calls, so concurrent calls for different locales are
independent.
"""

from collections.abc import Callable
from datetime import datetime
from functools import cmp_to_key

import structlog

from team_events.collections.facets import extract_facets
from team_events.collections.normalizer import EventNormalizer
from team_events.collections.schemas import EventFacets, EventViewModel
from team_events.content.schemas import RawEvent
from team_events.content.store import ContentStore
from team_events.dates import (
    ascending_by_date,
    descending_by_date,
    is_past_event,
    utc_now,
)

logger = structlog.get_logger()

EventFilter = Callable[[RawEvent], bool]
EventComparator = Callable[[EventViewModel, EventViewModel], int]


class EventCollections:
    """Queries, filters, normalizes and sorts events for a locale."""

    def __init__(
        self,
        store: ContentStore,
        normalizer: EventNormalizer,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize pipeline.

        Args:
            store: Source of raw event records
            normalizer: Turns raw events into view models
            clock: Returns the evaluation instant for past/upcoming split
        """
        self._store = store
        self._normalizer = normalizer
        self._clock = clock

    def query_events(
        self,
        locale: str,
        predicate: EventFilter | None = None,
        comparator: EventComparator | None = None,
        now: datetime | None = None,
    ) -> list[EventViewModel]:
        """Normalize the locale's events, optionally filtered and sorted.

        Args:
            locale: Locale path segment to query
            predicate: Predicate over raw events; False drops the event
            comparator: Comparator over view models; source order when omitted
            now: Evaluation instant (read from the clock when omitted)

        Returns:
            Fully resolved view models

        Raises:
            UnknownAuthorError: If any kept event references an unknown author
        """
        now = now or self._clock()
        raw_events = self._store.get_events_by_locale(locale)

        if predicate is not None:
            kept = [e for e in raw_events if predicate(e)]
        else:
            kept = raw_events

        events = [self._normalizer.normalize(e, locale, now=now) for e in kept]

        if comparator is not None:
            events.sort(key=cmp_to_key(comparator))

        logger.info(
            "events queried",
            locale=locale,
            total=len(raw_events),
            returned=len(events),
        )
        return events

    def current_events(self, locale: str) -> list[EventViewModel]:
        """Upcoming events, soonest first."""
        now = self._clock()
        return self.query_events(
            locale,
            predicate=lambda e: not is_past_event(e, now),
            comparator=ascending_by_date,
            now=now,
        )

    def past_events(self, locale: str) -> list[EventViewModel]:
        """Past events, most recent first."""
        now = self._clock()
        return self.query_events(
            locale,
            predicate=lambda e: is_past_event(e, now),
            comparator=descending_by_date,
            now=now,
        )

    def event_facets(self, locale: str) -> EventFacets:
        """Locations, speakers and topics across all of the locale's events."""
        return extract_facets(self.query_events(locale))
