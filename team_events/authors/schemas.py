"""Author directory records and their resolved projection."""

from pydantic import BaseModel, ConfigDict, Field


class AuthorRecord(BaseModel):
    """One entry of the author directory, keyed by handle.

    Display names live in the i18n catalogue, not here.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    image: str | None = Field(default=None, description="Avatar image reference")
    twitter: str | None = Field(default=None, description="Twitter handle")
    linkedin: str | None = Field(default=None, description="LinkedIn handle")


class ResolvedAuthor(BaseModel):
    """Author data as shown next to a session."""

    model_config = ConfigDict(frozen=True)

    image: str = Field(description="Avatar, or the site default avatar")
    title: str = Field(description="Localized display name")
    twitter: str | None = Field(default=None)
    linkedin: str | None = Field(default=None)
    handle: str = Field(description="Directory key; identity for de-duplication")
