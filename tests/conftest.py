"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from team_events.authors.directory import AuthorDirectory
from team_events.authors.resolver import AuthorResolver
from team_events.collections.normalizer import EventNormalizer
from team_events.collections.pipeline import EventCollections
from team_events.collections.sessions import SessionNormalizer
from team_events.content.store import InMemoryContentStore
from team_events.i18n import Translator

# Fixed evaluation instant for deterministic past/upcoming splits
NOW = datetime(2023, 1, 1, tzinfo=UTC)

DEFAULT_AVATAR = "image/default-avatar.png"
MULTIPLE_PARTICIPANTS_IMG = "image/chrome.svg"
EVENT_PLACEHOLDER = "image/event-placeholder.png"


@pytest.fixture
def now() -> datetime:
    """Evaluation instant used by the pipeline clock."""
    return NOW


@pytest.fixture
def catalogue() -> dict[str, Any]:
    """i18n catalogue with author names and event labels."""
    return {
        "authors": {
            "alice": {"title": {"en": "Alice Anderson", "es": "Alicia Anderson"}},
            "bob": {"title": {"en": "Bob Brown"}},
            "carol": {"title": {"en": "Carol Clark"}},
            "dave": {"title": {"en": "Dave Davis"}},
        },
        "events": {
            "multiple_participants": {
                "en": "Multiple participants",
                "es": "Varios participantes",
            },
        },
    }


@pytest.fixture
def translator(catalogue: dict[str, Any]) -> Translator:
    """Translator over the test catalogue."""
    return Translator(catalogue, default_locale="en")


@pytest.fixture
def directory() -> AuthorDirectory:
    """Author directory with four authors."""
    return AuthorDirectory(
        {
            "alice": {"image": "image/alice.png", "twitter": "alice"},
            "bob": {"linkedin": "bobbrown"},
            "carol": {},
            "dave": {"image": "image/dave.png"},
        }
    )


@pytest.fixture
def resolver(directory: AuthorDirectory, translator: Translator) -> AuthorResolver:
    """Resolver with the test directory and translator."""
    return AuthorResolver(
        directory=directory,
        translator=translator,
        default_avatar=DEFAULT_AVATAR,
    )


@pytest.fixture
def session_normalizer(
    resolver: AuthorResolver, translator: Translator
) -> SessionNormalizer:
    """Session normalizer with default image builder."""
    return SessionNormalizer(
        resolver=resolver,
        translator=translator,
        multiple_participants_img=MULTIPLE_PARTICIPANTS_IMG,
    )


@pytest.fixture
def event_normalizer(session_normalizer: SessionNormalizer) -> EventNormalizer:
    """Event normalizer with default image builder."""
    return EventNormalizer(
        session_normalizer=session_normalizer,
        event_placeholder_img=EVENT_PLACEHOLDER,
    )


@pytest.fixture
def make_event() -> Callable[..., dict[str, Any]]:
    """Factory for raw event front matter dicts."""

    def _make_event(
        id: int | str,
        date: str,
        sessions: list[dict[str, Any]] | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        event = {
            "id": id,
            "title": f"Event {id}",
            "summary": f"Summary of event {id}",
            "location": "Online",
            "date": date,
            "sessions": sessions if sessions is not None else [],
        }
        event.update(overrides)
        return event

    return _make_event


@pytest.fixture
def make_collections(
    event_normalizer: EventNormalizer, now: datetime
) -> Callable[[list[dict[str, Any]]], EventCollections]:
    """Factory for a pipeline over in-memory events with a fixed clock."""

    def _make_collections(events: list[dict[str, Any]]) -> EventCollections:
        return EventCollections(
            store=InMemoryContentStore(events),
            normalizer=event_normalizer,
            clock=lambda: now,
        )

    return _make_collections
