"""Session normalization: raw session records to session view models."""

from typing import assert_never

from team_events.authors.resolver import AuthorResolver
from team_events.collections.schemas import (
    PanelSessionView,
    SessionViewModel,
    SpeakerSessionView,
)
from team_events.content.schemas import (
    PanelSessionRecord,
    RawSession,
    SpeakerSessionRecord,
)
from team_events.i18n import Translator
from team_events.images import (
    SESSION_IMAGE_CLASS,
    SESSION_IMAGE_SIZE,
    ImageBuilder,
    build_image,
)

MULTIPLE_PARTICIPANTS_KEY = "i18n.events.multiple_participants"


class SessionNormalizer:
    """Builds session view models with resolved speakers and images."""

    def __init__(
        self,
        resolver: AuthorResolver,
        translator: Translator,
        multiple_participants_img: str,
        image_builder: ImageBuilder = build_image,
    ):
        """Initialize normalizer.

        Args:
            resolver: Resolves speaker and participant handles
            translator: Localizes the multiple participants label
            multiple_participants_img: Image for panels with several people
            image_builder: Produces image descriptors
        """
        self._resolver = resolver
        self._translator = translator
        self._multiple_participants_img = multiple_participants_img
        self._build_image = image_builder

    def normalize(self, session: RawSession, locale: str) -> SessionViewModel:
        """Normalize one raw session.

        Raises:
            UnknownAuthorError: If any referenced handle is unknown
        """
        match session:
            case SpeakerSessionRecord():
                return self._speaker_session(session, locale)
            case PanelSessionRecord():
                return self._panel_session(session, locale)
            case _:
                assert_never(session)

    def _speaker_session(
        self, session: SpeakerSessionRecord, locale: str
    ) -> SpeakerSessionView:
        speaker = self._resolver.resolve(session.speaker, locale)
        image = self._build_image(
            src=speaker.image,
            width=SESSION_IMAGE_SIZE,
            height=SESSION_IMAGE_SIZE,
            alt=speaker.title or session.title,
            css_class=SESSION_IMAGE_CLASS,
        )
        return SpeakerSessionView(
            title=session.title,
            description=session.description,
            type=session.type,
            topics=session.topics,
            slides_url=session.slides_url,
            video_url=session.video_url,
            speaker=speaker,
            image=image,
        )

    def _panel_session(
        self, session: PanelSessionRecord, locale: str
    ) -> PanelSessionView:
        participants = self._resolver.resolve_all(session.participants, locale)

        # A panel of one is shown as that person's talk
        if len(participants) == 1:
            title = participants[0].title
            src = participants[0].image
        else:
            title = self._translator.translate(MULTIPLE_PARTICIPANTS_KEY, locale)
            src = self._multiple_participants_img

        image = self._build_image(
            src=src,
            width=SESSION_IMAGE_SIZE,
            height=SESSION_IMAGE_SIZE,
            alt=title,
            css_class=SESSION_IMAGE_CLASS,
        )
        return PanelSessionView(
            title=title,
            description=session.description,
            type=session.type,
            topics=session.topics,
            slides_url=session.slides_url,
            video_url=session.video_url,
            participants=participants,
            image=image,
        )
