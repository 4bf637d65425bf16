"""``Culture``: the translation state owned by one services instance.

Bundles the internal substitution table, the language table and the
language registry behind the registration and query API used by the
rest of the daemon::

    culture = Culture(settings)
    culture.init()
    culture.itranslation_create("NickServ", "UserServ")
    culture.set_language("fr")
    culture.translation_get("NickServ")
"""

from __future__ import annotations

import logging

from culture.core.config import Settings, get_settings
from culture.i18n.catalog import load_catalog
from culture.i18n.errors import UnknownLanguageError
from culture.i18n.registry import LanguageRegistry, LocaleEntry
from culture.i18n.tables import InternalTable, LanguageTable

logger = logging.getLogger(__name__)


class Culture:
    """Translation tables plus the language registry.

    Args:
        settings: Configuration; defaults to ``get_settings()``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.internal = InternalTable()
        self.language = LanguageTable(max_length=self.settings.TRANSLATION_MAX_LENGTH)
        self.languages = LanguageRegistry(
            default_language=self.settings.DEFAULT_LANGUAGE,
            names_max_length=self.settings.LANGUAGE_NAMES_MAX_LENGTH,
        )
        self._active: str | None = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def active_language(self) -> str | None:
        """Name of the locale whose catalog is loaded, if any."""
        return self._active

    def init(self) -> None:
        """Scan the locale directory and activate the default language."""
        if self._initialized:
            logger.debug("Culture already initialized", extra={"event": "culture_init_skipped"})
            return
        self.languages.init(self.settings.LOCALE_DIR)
        self._active = self.settings.DEFAULT_LANGUAGE
        self._initialized = True

    def shutdown(self) -> None:
        """Drop every table entry and registered language."""
        self.internal.clear()
        self.language.clear()
        self.languages.clear()
        self._active = None
        self._initialized = False

    def set_language(self, name: str) -> int:
        """Replace the language table with the catalog for *name*.

        The new table is built first; the current one is kept if loading
        fails.

        Returns:
            Number of translations loaded.

        Raises:
            UnknownLanguageError: If *name* is not a valid registered locale.
            CatalogError: If the catalog file is corrupt.
        """
        entry = self.languages.find(name)
        if entry is None or not entry.valid:
            raise UnknownLanguageError(name)

        table = LanguageTable(max_length=self.settings.TRANSLATION_MAX_LENGTH)
        count = 0
        # Source strings are already in the default language.
        if name != self.settings.DEFAULT_LANGUAGE:
            count = load_catalog(
                table,
                self.settings.LOCALE_DIR,
                self.settings.CATALOG_DOMAIN,
                name,
            )

        self.language = table
        self._active = name
        return count

    # ------------------------------------------------------------------
    # Registration API
    # ------------------------------------------------------------------

    def itranslation_create(self, key: str, value: str) -> None:
        self.internal.create(key, value)

    def itranslation_destroy(self, key: str) -> None:
        self.internal.destroy(key)

    def translation_create(self, key: str, value: str) -> None:
        self.language.create(key, value)

    def translation_destroy(self, key: str) -> None:
        self.language.destroy(key)

    def language_add(self, name: str) -> LocaleEntry:
        return self.languages.add(name)

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------

    def translation_get(self, text: str) -> str:
        """Return the translation of *text*, or *text* itself.

        An internal substitution is applied first; the language table is
        then consulted with the (possibly rewritten) string.
        """
        replacement = self.internal.get(text)
        if replacement is not None:
            text = replacement

        translated = self.language.get(text)
        if translated is not None:
            return translated
        return text

    def language_find(self, name: str) -> LocaleEntry | None:
        return self.languages.find(name)

    def language_names(self) -> str:
        return self.languages.names()

    def language_get_name(self, entry: LocaleEntry) -> str:
        return self.languages.get_name(entry)

    def language_is_valid(self, entry: LocaleEntry) -> bool:
        return self.languages.is_valid(entry)
