"""AuthorResolver turns session handles into display-ready author data."""

from collections.abc import Mapping

import structlog

from team_events.authors.schemas import AuthorRecord, ResolvedAuthor
from team_events.i18n import Translator

logger = structlog.get_logger()


class UnknownAuthorError(LookupError):
    """Raised when a session references a handle missing from the directory."""

    def __init__(self, handle: str):
        super().__init__(f"Invalid author: {handle}")
        self.handle = handle


def author_title_key(handle: str) -> str:
    """i18n key holding an author's display name."""
    return f"i18n.authors.{handle}.title"


class AuthorResolver:
    """Resolves author handles against an explicit directory.

    This is the pipeline's only validation point: an unknown handle
    raises and halts the enclosing session and event.
    """

    def __init__(
        self,
        directory: Mapping[str, AuthorRecord],
        translator: Translator,
        default_avatar: str,
    ):
        """Initialize resolver.

        Args:
            directory: Author records keyed by handle
            translator: Localizes author display names
            default_avatar: Image used for authors without one
        """
        self._directory = directory
        self._translator = translator
        self._default_avatar = default_avatar

    def resolve(self, handle: str, locale: str) -> ResolvedAuthor:
        """Resolve one handle for ``locale``.

        Raises:
            UnknownAuthorError: If handle is not in the directory
            TranslationNotFoundError: If the author has no display name
        """
        record = self._directory.get(handle)
        if record is None:
            logger.error("unknown author handle", handle=handle, locale=locale)
            raise UnknownAuthorError(handle)

        return ResolvedAuthor(
            image=record.image or self._default_avatar,
            title=self._translator.translate(author_title_key(handle), locale),
            twitter=record.twitter,
            linkedin=record.linkedin,
            handle=handle,
        )

    def resolve_all(self, handles: list[str], locale: str) -> list[ResolvedAuthor]:
        """Resolve handles, preserving order."""
        return [self.resolve(handle, locale) for handle in handles]
