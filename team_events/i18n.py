"""String lookup over nested YAML translation catalogues.

Catalogue layout follows the site's ``_data/i18n`` folder: each file is a
namespace, keys nest below it, and every leaf maps locale codes to
strings::

    # events.yml
    multiple_participants:
      en: Multiple participants
      es: Varios participantes

which is looked up as ``i18n.events.multiple_participants``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

KEY_PREFIX = "i18n."


class TranslationNotFoundError(LookupError):
    """Raised when a key has no string for the locale or the default locale."""


class Translator:
    """Resolve dotted i18n keys to localized strings."""

    def __init__(self, catalogue: Mapping[str, Any], default_locale: str = "en"):
        """Initialize translator.

        Args:
            catalogue: Nested mapping of namespaces -> keys -> locale strings
            default_locale: Locale used when a key lacks the requested one
        """
        self._catalogue = catalogue
        self.default_locale = default_locale

    @classmethod
    def from_directory(
        cls, path: str | Path, default_locale: str = "en"
    ) -> "Translator":
        """Load every ``*.yml``/``*.yaml`` file under ``path``.

        Each file's stem becomes a top-level namespace.
        """
        directory = Path(path)
        catalogue: dict[str, Any] = {}
        for file in sorted(directory.iterdir()):
            if file.suffix not in (".yml", ".yaml"):
                continue
            with open(file, encoding="utf-8") as f:
                catalogue[file.stem] = yaml.safe_load(f) or {}

        logger.debug(
            "loaded i18n catalogue", path=str(directory), namespaces=len(catalogue)
        )
        return cls(catalogue, default_locale=default_locale)

    def translate(self, key: str, locale: str | None = None) -> str:
        """Look up ``key`` for ``locale``, falling back to the default locale.

        Args:
            key: Dotted key, e.g. ``i18n.authors.jdoe.title``
            locale: Requested locale (default locale when omitted)

        Returns:
            The localized string

        Raises:
            TranslationNotFoundError: If neither locale has a string for key
        """
        locale = locale or self.default_locale
        path = key.removeprefix(KEY_PREFIX).split(".")

        node: Any = self._catalogue
        for part in path:
            if not isinstance(node, Mapping) or part not in node:
                raise TranslationNotFoundError(f"Missing i18n key: {key}")
            node = node[part]

        if not isinstance(node, Mapping):
            raise TranslationNotFoundError(f"i18n key is not a leaf: {key}")

        if locale in node:
            return node[locale]
        if self.default_locale in node:
            logger.debug("i18n fallback", key=key, locale=locale)
            return node[self.default_locale]
        raise TranslationNotFoundError(
            f"No '{locale}' or '{self.default_locale}' string for i18n key: {key}"
        )
