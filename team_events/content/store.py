"""Content stores that supply raw event records per locale.

The collection pipeline only depends on the ContentStore protocol. Two
implementations are provided: an in-memory store for tests and callers
that already hold the records, and a store that reads event markdown
files from a site checkout.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog
import yaml

from team_events.content.schemas import RawEvent

logger = structlog.get_logger()

FRONT_MATTER_FENCE = "---"


class ContentError(Exception):
    """Raised when a content file cannot be turned into a raw record."""


@runtime_checkable
class ContentStore(Protocol):
    """Protocol for raw event sources.

    Implementations return every matching record in a stable order.
    """

    def get_events_by_locale(self, locale: str) -> list[RawEvent]:
        """Return all raw events published under ``locale``."""
        ...


class InMemoryContentStore:
    """Content store over records already held in memory."""

    def __init__(self, events: Iterable[RawEvent | Mapping[str, Any]] = ()):
        """Initialize store.

        Args:
            events: Raw events, either parsed or as front matter dicts
        """
        self._events = [
            e if isinstance(e, RawEvent) else RawEvent.model_validate(e)
            for e in events
        ]

    def get_events_by_locale(self, locale: str) -> list[RawEvent]:
        return [e for e in self._events if e.locale == locale]


class MarkdownContentStore:
    """Reads events from ``<root>/<locale>/meet-the-team/events/**/*.md``."""

    EVENTS_GLOB = "meet-the-team/events/**/*.md"

    def __init__(self, root: str | Path):
        """Initialize store.

        Args:
            root: Site content directory containing one folder per locale
        """
        self.root = Path(root)

    def get_events_by_locale(self, locale: str) -> list[RawEvent]:
        """Parse every event file for ``locale``, ordered by path.

        Raises:
            ContentError: If a file has no front matter
            pydantic.ValidationError: If front matter is not a valid event
        """
        paths = sorted((self.root / locale).glob(self.EVENTS_GLOB))
        events = [self._load(path, locale) for path in paths]

        logger.debug("loaded event content", locale=locale, count=len(events))
        return events

    def _load(self, path: Path, locale: str) -> RawEvent:
        data = parse_front_matter(path.read_text(encoding="utf-8-sig"))
        if data is None:
            raise ContentError(f"No front matter in {path}")

        data["locale"] = locale
        data["source_path"] = str(path)
        return RawEvent.model_validate(data)


def parse_front_matter(text: str) -> dict[str, Any] | None:
    """Extract the YAML front matter block from a markdown document.

    Returns:
        Parsed front matter, or None if the document has none
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_FENCE:
        return None

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_FENCE:
            data = yaml.safe_load("\n".join(lines[1:end]))
            return data if isinstance(data, dict) else {}
    return None
