"""Event normalization: raw event records to event view models."""

from datetime import datetime

from team_events.collections.schemas import EventViewModel
from team_events.collections.sessions import SessionNormalizer
from team_events.content.schemas import RawEvent
from team_events.dates import is_past_event, utc_now
from team_events.images import EVENT_IMAGE_SIZE, ImageBuilder, build_image


class EventNormalizer:
    """Builds event view models, normalizing every session.

    There is no partial result: if one session fails, the event fails.
    """

    def __init__(
        self,
        session_normalizer: SessionNormalizer,
        event_placeholder_img: str,
        image_builder: ImageBuilder = build_image,
    ):
        """Initialize normalizer.

        Args:
            session_normalizer: Normalizes each of the event's sessions
            event_placeholder_img: Cover image for events without one
            image_builder: Produces image descriptors
        """
        self._sessions = session_normalizer
        self._placeholder = event_placeholder_img
        self._build_image = image_builder

    def normalize(
        self,
        event: RawEvent,
        locale: str,
        now: datetime | None = None,
    ) -> EventViewModel:
        """Normalize one raw event for ``locale``.

        Args:
            event: Raw event record
            locale: Locale used for author names and labels
            now: Instant the past/upcoming split is evaluated at

        Raises:
            UnknownAuthorError: If any session references an unknown handle
        """
        sessions = [self._sessions.normalize(s, locale) for s in event.sessions]

        image = self._build_image(
            src=event.image or self._placeholder,
            width=EVENT_IMAGE_SIZE,
            height=EVENT_IMAGE_SIZE,
            alt=event.title,
        )

        return EventViewModel(
            id=event.id,
            title=event.title,
            external_url=event.external_url,
            summary=event.summary,
            location=event.location,
            date=event.date,
            is_past_event=is_past_event(event, now or utc_now()),
            sessions=sessions,
            image=image,
        )
