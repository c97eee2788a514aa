"""View models produced for the events pages.

View models are frozen and built fresh on every query. Dump them with
``by_alias=True`` to get the camelCase keys templates expect.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from team_events.authors.schemas import ResolvedAuthor
from team_events.images import ImageDescriptor


class ViewModel(BaseModel):
    """Base class for render-ready models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SessionView(ViewModel):
    """Fields shared by both kinds of session."""

    title: str | None
    description: str | None = None
    type: str | None
    topics: list[str] = Field(default_factory=list)
    slides_url: str | None = None
    video_url: str | None = None
    image: ImageDescriptor


class SpeakerSessionView(SessionView):
    """A talk by one resolved speaker."""

    type: Literal["speaker"] = "speaker"
    speaker: ResolvedAuthor


class PanelSessionView(SessionView):
    """A session with resolved participants, in source order."""

    participants: list[ResolvedAuthor]


SessionViewModel = SpeakerSessionView | PanelSessionView


class EventViewModel(ViewModel):
    """One event as rendered on the events pages."""

    id: int | str
    title: str
    external_url: str | None = None
    summary: str | None = None
    location: str
    date: datetime
    is_past_event: bool = Field(description="Date at or before evaluation time")
    sessions: list[SessionViewModel]
    image: ImageDescriptor


class SpeakerFacet(ViewModel):
    """A speaker entry in the events filter."""

    handle: str
    title: str


class EventFacets(ViewModel):
    """De-duplicated, sorted filter values across all events of a locale."""

    locations: list[str] = Field(default_factory=list)
    speakers: list[SpeakerFacet] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
