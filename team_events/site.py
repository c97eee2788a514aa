"""Wire the events collections for a site checkout.

Callers that build pages use ``build_collections()`` once and then ask it
for each locale's current events, past events and facets.
"""

import logging

from team_events.authors.directory import AuthorDirectory
from team_events.authors.resolver import AuthorResolver
from team_events.collections.normalizer import EventNormalizer
from team_events.collections.pipeline import EventCollections
from team_events.collections.sessions import SessionNormalizer
from team_events.config import Settings, get_settings
from team_events.content.store import MarkdownContentStore
from team_events.i18n import Translator


def configure_logging(settings: Settings | None = None) -> None:
    """Route log output at the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_collections(settings: Settings | None = None) -> EventCollections:
    """Create EventCollections reading content, authors and i18n from disk.

    Args:
        settings: Site settings (environment-derived when omitted)

    Returns:
        Pipeline over the site's markdown event files
    """
    settings = settings or get_settings()

    translator = Translator.from_directory(
        settings.i18n_path, default_locale=settings.default_locale
    )
    resolver = AuthorResolver(
        directory=AuthorDirectory.from_json(settings.authors_path),
        translator=translator,
        default_avatar=settings.default_avatar_img,
    )
    session_normalizer = SessionNormalizer(
        resolver=resolver,
        translator=translator,
        multiple_participants_img=settings.multiple_participants_img,
    )
    event_normalizer = EventNormalizer(
        session_normalizer=session_normalizer,
        event_placeholder_img=settings.event_placeholder_img,
    )
    return EventCollections(
        store=MarkdownContentStore(settings.content_root),
        normalizer=event_normalizer,
    )
