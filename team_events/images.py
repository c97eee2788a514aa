"""Image descriptors handed to the rendering layer."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

EVENT_IMAGE_SIZE = 400
SESSION_IMAGE_SIZE = 40
SESSION_IMAGE_CLASS = "flex-shrink-none height-600 width-600 rounded-full gap-right-300"


class ImageDescriptor(BaseModel):
    """Everything the image shortcode needs to emit a tag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    src: str = Field(description="Image reference on the image CDN")
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    alt: str | None = Field(default=None)
    css_class: str | None = Field(default=None, alias="class")


class ImageBuilder(Protocol):
    """Callable that turns image attributes into a descriptor."""

    def __call__(
        self,
        src: str,
        width: int,
        height: int,
        alt: str | None,
        css_class: str | None = None,
    ) -> ImageDescriptor: ...


def build_image(
    src: str,
    width: int,
    height: int,
    alt: str | None,
    css_class: str | None = None,
) -> ImageDescriptor:
    """Default image builder."""
    return ImageDescriptor(
        src=src, width=width, height=height, alt=alt, css_class=css_class
    )
