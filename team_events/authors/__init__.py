"""Author directory and resolution for session speakers and participants."""

from team_events.authors.directory import AuthorDirectory
from team_events.authors.resolver import (
    AuthorResolver,
    UnknownAuthorError,
    author_title_key,
)
from team_events.authors.schemas import AuthorRecord, ResolvedAuthor

__all__ = [
    "AuthorDirectory",
    "AuthorRecord",
    "AuthorResolver",
    "ResolvedAuthor",
    "UnknownAuthorError",
    "author_title_key",
]
