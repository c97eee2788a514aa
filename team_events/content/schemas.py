"""Raw content records as they appear in event front matter.

Raw records are parsed, not authored: validation only covers what the
collection pipeline needs to run (a date it can compare, a sessions list
it can map). Keys may be camelCase (``externalUrl``) or snake_case.
"""

from datetime import UTC, date, datetime, time
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
)
from pydantic.alias_generators import to_camel

SPEAKER_SESSION = "speaker"
PANEL_SESSION = "panel"


class RawRecord(BaseModel):
    """Base class for raw content records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SessionRecord(RawRecord):
    """Fields shared by every kind of session."""

    title: str | None = Field(default=None, description="Session title")
    description: str | None = Field(default=None)
    topics: list[str] = Field(default_factory=list)
    slides_url: str | None = Field(default=None)
    video_url: str | None = Field(default=None)


class SpeakerSessionRecord(SessionRecord):
    """A talk given by a single speaker."""

    type: Literal["speaker"] = SPEAKER_SESSION
    speaker: str = Field(description="Author handle of the speaker")


class PanelSessionRecord(SessionRecord):
    """A session with any number of participants.

    Any ``type`` other than ``speaker``, including none at all, is a panel.
    """

    type: str | None = Field(default=None, description="Kept as written")
    participants: list[str] = Field(description="Author handles, in display order")


def _session_kind(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return SPEAKER_SESSION if kind == SPEAKER_SESSION else PANEL_SESSION


RawSession = Annotated[
    Union[
        Annotated[SpeakerSessionRecord, Tag(SPEAKER_SESSION)],
        Annotated[PanelSessionRecord, Tag(PANEL_SESSION)],
    ],
    Discriminator(_session_kind),
]


class RawEvent(RawRecord):
    """One event markdown file's front matter plus where it was found."""

    id: int | str = Field(description="Stable event identifier, as written")
    title: str
    external_url: str | None = Field(default=None)
    summary: str | None = Field(default=None)
    location: str
    date: datetime = Field(description="Event date, always timezone-aware")
    image: str | None = Field(default=None, description="Cover image reference")
    sessions: list[RawSession]

    locale: str = Field(default="en", description="Locale path segment")
    source_path: str | None = Field(default=None)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        """Accept dates, datetimes and ISO-8601 strings.

        Date-only values become midnight UTC.
        """
        if isinstance(v, str):
            v = datetime.fromisoformat(v.strip())
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min, tzinfo=UTC)
        return v

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive datetimes are taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v
