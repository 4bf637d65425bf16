"""Shared test fixtures.

Locale trees are built under ``tmp_path``; ``write_mo`` produces binary
gettext catalogs the same way ``msgfmt`` lays them out, so tests run
without gettext tooling installed.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from pathlib import Path

import pytest

from culture.core.config import Settings
from culture.i18n import Culture, get_culture

_MO_MAGIC = 0x950412DE
_HEADER = "Content-Type: text/plain; charset=UTF-8\n"


def write_mo(
    locale_dir: Path,
    language: str,
    messages: dict[str, str],
    domain: str = "atheme",
) -> Path:
    """Write ``<locale_dir>/<language>/LC_MESSAGES/<domain>.mo``.

    Plural entries can be expressed with NUL-joined keys and values
    (``"file\\0files"``), as in the binary format itself.
    """
    entries = {b"": _HEADER.encode("utf-8")}
    for msgid, msgstr in messages.items():
        entries[msgid.encode("utf-8")] = msgstr.encode("utf-8")
    keys = sorted(entries)

    ids = strs = b""
    offsets: list[tuple[int, int, int, int]] = []
    for key in keys:
        offsets.append((len(ids), len(key), len(strs), len(entries[key])))
        ids += key + b"\0"
        strs += entries[key] + b"\0"

    keystart = 7 * 4 + 16 * len(keys)
    valuestart = keystart + len(ids)
    koffsets: list[int] = []
    voffsets: list[int] = []
    for id_off, id_len, str_off, str_len in offsets:
        koffsets += [id_len, id_off + keystart]
        voffsets += [str_len, str_off + valuestart]
    table = koffsets + voffsets

    output = struct.pack(
        "<Iiiiiii",
        _MO_MAGIC,
        0,  # revision
        len(keys),
        7 * 4,
        7 * 4 + len(keys) * 8,
        0,  # hash table size
        keystart,
    )
    output += struct.pack(f"<{len(table)}i", *table)
    output += ids + strs

    target = locale_dir / language / "LC_MESSAGES" / f"{domain}.mo"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(output)
    return target


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Empty locale directory."""
    path = tmp_path / "locale"
    path.mkdir()
    return path


@pytest.fixture
def settings(locale_dir: Path) -> Settings:
    """Settings pointing at the temporary locale directory."""
    return Settings(_env_file=None, LOCALE_DIR=locale_dir)  # type: ignore[call-arg]


@pytest.fixture
def culture(settings: Settings) -> Iterator[Culture]:
    """An initialized ``Culture`` over the temporary locale directory."""
    c = Culture(settings)
    c.init()
    yield c
    c.shutdown()


@pytest.fixture(autouse=True)
def _reset_default_culture():
    """Keep the cached default ``Culture`` from leaking between tests."""
    get_culture.cache_clear()
    yield
    get_culture.cache_clear()
