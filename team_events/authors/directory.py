"""Read-only author directory loaded from the site's authors data file."""

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import structlog

from team_events.authors.schemas import AuthorRecord

logger = structlog.get_logger()


class AuthorDirectory(Mapping[str, AuthorRecord]):
    """Snapshot of author records keyed by handle."""

    def __init__(self, records: Mapping[str, AuthorRecord | Mapping[str, Any]]):
        self._records = {
            handle: (
                record
                if isinstance(record, AuthorRecord)
                else AuthorRecord.model_validate(record)
            )
            for handle, record in records.items()
        }

    @classmethod
    def from_json(cls, path: str | Path) -> "AuthorDirectory":
        """Load ``authorsData.json`` (an object keyed by handle).

        Raises:
            ValueError: If the file does not hold a JSON object
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Author data in {path} must be a JSON object")

        logger.debug("loaded author directory", path=str(path), authors=len(data))
        return cls(data)

    def __getitem__(self, handle: str) -> AuthorRecord:
        return self._records[handle]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
