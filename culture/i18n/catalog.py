"""Load gettext message catalogs into a ``LanguageTable``.

Catalogs live in the standard gettext tree under the locale directory::

    <LOCALE_DIR>/<language>/LC_MESSAGES/<domain>.mo

The language name is used verbatim as the directory name; no locale
alias expansion is applied.  Only translated singular messages are
loaded; the header, plural forms and empty ``msgstr`` entries are
skipped.
"""

from __future__ import annotations

import gettext
import logging
import os
import struct
from pathlib import Path

from culture.i18n.errors import CatalogError, DuplicateTranslationError
from culture.i18n.tables import LanguageTable

logger = logging.getLogger(__name__)


class CatalogTranslations(gettext.GNUTranslations):
    """``GNUTranslations`` that exposes its loadable messages.

    Attributes:
        catalog: ``msgid`` → ``msgstr`` for every translated, singular,
            non-header message.
    """

    def _parse(self, fp) -> None:
        super()._parse(fp)
        # Plural entries are keyed by (msgid, index).
        self.catalog: dict[str, str] = {
            msgid: msgstr
            for msgid, msgstr in self._catalog.items()
            if isinstance(msgid, str) and msgid and msgstr
        }


def catalog_path(directory: str | os.PathLike[str], domain: str, language: str) -> Path:
    """Return where the *domain* catalog for *language* is expected."""
    return Path(directory, language, "LC_MESSAGES", f"{domain}.mo")


def open_catalog(
    directory: str | os.PathLike[str],
    domain: str,
    language: str,
) -> CatalogTranslations | None:
    """Return the parsed catalog for *language*, or ``None`` if absent.

    Raises:
        CatalogError: If the catalog file exists but cannot be read or parsed.
    """
    path = catalog_path(directory, domain, language)
    try:
        with path.open("rb") as fp:
            return CatalogTranslations(fp)
    except FileNotFoundError:
        return None
    except (OSError, ValueError, struct.error) as exc:
        raise CatalogError(f"cannot read {domain!r} catalog for {language!r}: {exc}") from exc


def load_catalog(
    table: LanguageTable,
    directory: str | os.PathLike[str],
    domain: str,
    language: str,
) -> int:
    """Register every message of *language*'s catalog in *table*.

    Args:
        table: Destination table.
        directory: Locale directory root.
        domain: gettext domain (catalog file stem).
        language: Locale directory name.

    Returns:
        Number of entries inserted.  ``0`` when no catalog exists.

    Raises:
        CatalogError: If the catalog file is corrupt.
    """
    catalog = open_catalog(directory, domain, language)
    if catalog is None:
        logger.info(
            "No catalog for %s",
            language,
            extra={"event": "catalog_missing", "language": language, "domain": domain, "path": str(directory)},
        )
        return 0

    count = 0
    for msgid, msgstr in catalog.catalog.items():
        try:
            table.create(msgid, msgstr)
        except DuplicateTranslationError as exc:
            logger.warning(
                "Skipping duplicate translation in %s catalog",
                language,
                extra={"event": "translation_duplicate", "language": language, "key": exc.key},
            )
            continue
        count += 1

    logger.info(
        "Loaded %d translations for %s",
        count,
        extra={"event": "catalog_loaded", "language": language, "domain": domain, "count": count},
    )
    return count
