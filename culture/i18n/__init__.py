"""Translation lookup for services messages.

Provides the default ``Culture`` instance and module-level helpers for
the registration and query API.

Fallback behaviour:
- Internal substitution first (``itranslation_create``).
- Then the active language's table (``translation_create`` / catalogs).
- Unknown string → returned unchanged.

Usage::

    from culture.i18n import startup, t, itranslation_create

    startup()

    itranslation_create("NickServ", "UserServ")
    text = t("NickServ")            # → "UserServ"
    text = t("unregistered text")   # → "unregistered text"
"""

from __future__ import annotations

from functools import lru_cache

from culture.core.config import get_settings
from culture.core.logging import setup_logging
from culture.i18n.errors import (
    CatalogError,
    CultureError,
    DuplicateTranslationError,
    UnknownLanguageError,
)
from culture.i18n.registry import LocaleEntry
from culture.i18n.translator import Culture

__all__ = [
    "CatalogError",
    "Culture",
    "CultureError",
    "DuplicateTranslationError",
    "LocaleEntry",
    "UnknownLanguageError",
    "get_culture",
    "itranslation_create",
    "itranslation_destroy",
    "language_add",
    "language_find",
    "language_get_name",
    "language_is_valid",
    "language_names",
    "startup",
    "t",
    "translation_create",
    "translation_destroy",
    "translation_get",
]


@lru_cache(maxsize=1)
def get_culture() -> Culture:
    """Return the cached, initialized default ``Culture``."""
    culture = Culture()
    culture.init()
    return culture


def startup() -> Culture:
    """Configure logging from settings and return the default ``Culture``.

    Call once from the host daemon's startup, before the first lookup.
    """
    setup_logging(get_settings().LOG_LEVEL)
    return get_culture()


# --- Registration API --------------------------------------------------


def itranslation_create(key: str, value: str) -> None:
    get_culture().itranslation_create(key, value)


def itranslation_destroy(key: str) -> None:
    get_culture().itranslation_destroy(key)


def translation_create(key: str, value: str) -> None:
    get_culture().translation_create(key, value)


def translation_destroy(key: str) -> None:
    get_culture().translation_destroy(key)


def language_add(name: str) -> LocaleEntry:
    return get_culture().language_add(name)


# --- Query API ---------------------------------------------------------


def translation_get(text: str) -> str:
    """Return the translation of *text*, or *text* itself if none exists."""
    return get_culture().translation_get(text)


t = translation_get


def language_find(name: str) -> LocaleEntry | None:
    return get_culture().language_find(name)


def language_names() -> str:
    return get_culture().language_names()


def language_get_name(entry: LocaleEntry) -> str:
    return get_culture().language_get_name(entry)


def language_is_valid(entry: LocaleEntry) -> bool:
    return get_culture().language_is_valid(entry)
