"""Exceptions raised by the translation framework."""

from __future__ import annotations


class CultureError(Exception):
    """Base class for translation framework errors."""


class DuplicateTranslationError(CultureError, KeyError):
    """A translation table already holds an entry for the key."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"translation already registered: {self.key!r}"


class UnknownLanguageError(CultureError, LookupError):
    """The language is not registered or has no catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown or invalid language: {self.name!r}"


class CatalogError(CultureError):
    """A message catalog exists but could not be parsed."""
