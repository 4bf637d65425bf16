"""Registry of locales known to the running services instance.

Locales are discovered once at startup by listing the locale directory;
each entry name becomes a locale verbatim.  The default locale is always
registered first and always valid.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# gettext bookkeeping files that live beside the locale directories.
RESERVED_NAMES: frozenset[str] = frozenset({"all_languages", "locale.alias"})
HIDDEN_PREFIX = "."


@dataclass(slots=True)
class LocaleEntry:
    """A registered locale.

    Attributes:
        name: Locale identifier (directory name, e.g. ``"fr"``).
        valid: ``True`` once a catalog is known to exist.  Never cleared.
    """

    name: str
    valid: bool = False


def is_locale_name(name: str) -> bool:
    """Return ``True`` if a directory entry should become a locale."""
    return not name.startswith(HIDDEN_PREFIX) and name not in RESERVED_NAMES


class LanguageRegistry:
    """Insertion-ordered, append-only list of locales.

    Args:
        default_language: Locale seeded by ``init()``.
        names_max_length: Bound applied to ``names()``.
    """

    def __init__(self, default_language: str = "en", names_max_length: int = 511) -> None:
        self.default_language = default_language
        self.names_max_length = names_max_length
        self._entries: list[LocaleEntry] = []

    def init(self, directory: str | os.PathLike[str]) -> None:
        """Seed the default locale and add every locale found in *directory*.

        A missing or unreadable directory leaves only the default locale.
        """
        self.add(self.default_language).valid = True

        try:
            listing = os.listdir(directory)
        except OSError as exc:
            logger.debug(
                "Locale directory not readable: %s",
                exc,
                extra={"event": "language_scan_skipped", "path": str(directory)},
            )
            return

        for name in listing:
            if is_locale_name(name):
                self.add(name).valid = True

        logger.info(
            "Discovered %d languages",
            len(self._entries),
            extra={"event": "language_scan", "path": str(directory), "count": len(self._entries)},
        )

    def add(self, name: str) -> LocaleEntry:
        """Return the entry for *name*, creating an invalid one if needed."""
        entry = self.find(name)
        if entry is not None:
            return entry
        logger.debug("language_add(): %s", name, extra={"event": "language_add", "language": name})
        entry = LocaleEntry(name=name)
        self._entries.append(entry)
        return entry

    def find(self, name: str) -> LocaleEntry | None:
        """Exact, case-sensitive lookup in insertion order."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def names(self) -> str:
        """Space-separated names of valid locales, in insertion order.

        The result is cut at ``names_max_length`` characters, the same
        way successive appends into a fixed buffer would stop.
        """
        joined = " ".join(entry.name for entry in self._entries if entry.valid)
        if len(joined) > self.names_max_length:
            logger.warning(
                "Language names truncated to %d characters",
                self.names_max_length,
                extra={"event": "language_names_truncated", "limit": self.names_max_length},
            )
            joined = joined[: self.names_max_length]
        return joined

    @staticmethod
    def get_name(entry: LocaleEntry) -> str:
        return entry.name

    @staticmethod
    def is_valid(entry: LocaleEntry) -> bool:
        return entry.valid

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[LocaleEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
