"""Translation tables.

Two exact-match tables feed ``Culture.translation_get``:

- ``InternalTable``: verbatim rewrites registered by services
  (e.g. ``NickServ`` â ``UserServ``).  Not locale text.
- ``LanguageTable``: locale replacements.  Keys and values pass
  through ``normalize_escapes`` before storage so catalog authors can
  write ``\\2`` for the bold control byte.

Inserting a key that is already present raises
``DuplicateTranslationError``; the existing entry is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from culture.i18n.errors import DuplicateTranslationError

logger = logging.getLogger(__name__)

BOLD = "\x02"
BOLD_ESCAPE = "\\2"


@dataclass(frozen=True, slots=True)
class TranslationEntry:
    """One key â replacement pair owned by a table."""

    key: str
    value: str


def normalize_escapes(text: str, max_length: int) -> str:
    """Truncate *text* to *max_length* and rewrite ``\\2`` to ``\\x02``.

    Truncation happens first, so a trailing backslash cut off from its
    ``2`` is kept literally.  Truncation is logged, never raised.
    """
    if len(text) > max_length:
        logger.warning(
            "Translation text truncated to %d characters",
            max_length,
            extra={"event": "translation_truncated", "key": text, "limit": max_length},
        )
        text = text[:max_length]
    return text.replace(BOLD_ESCAPE, BOLD)


class _TranslationTable:
    """Exact-match key → replacement storage shared by both tables."""

    def __init__(self) -> None:
        self._entries: dict[str, TranslationEntry] = {}

    def _insert(self, key: str, value: str) -> TranslationEntry:
        if key in self._entries:
            raise DuplicateTranslationError(key)
        entry = TranslationEntry(key=key, value=value)
        self._entries[key] = entry
        return entry

    def destroy(self, key: str) -> None:
        """Remove *key* if present; absent keys are ignored."""
        self._entries.pop(key, None)

    def get(self, key: str) -> str | None:
        """Return the replacement for *key*, or ``None``."""
        entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranslationEntry]:
        return iter(self._entries.values())


class InternalTable(_TranslationTable):
    """Verbatim string substitutions used by other services."""

    def create(self, key: str, value: str) -> TranslationEntry:
        """Register *value* as the replacement for *key*.

        Raises:
            DuplicateTranslationError: If *key* is already registered.
        """
        return self._insert(key, value)


class LanguageTable(_TranslationTable):
    """Locale replacements with ``\\2`` escape normalization.

    Args:
        max_length: Longest key or value kept, in characters.
    """

    def __init__(self, max_length: int = 1023) -> None:
        super().__init__()
        self.max_length = max_length

    def create(self, key: str, value: str) -> TranslationEntry:
        """Normalize *key* and *value*, then register them.

        The duplicate check uses the normalized key.

        Raises:
            DuplicateTranslationError: If the normalized key is already
                registered.
        """
        return self._insert(
            normalize_escapes(key, self.max_length),
            normalize_escapes(value, self.max_length),
        )

    # destroy() takes the stored (normalized) key.
