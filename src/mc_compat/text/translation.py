"""Localizable text handles.

A :class:`Translation` is the value plugin code receives when it asks a
game object for its display name.  It carries only the locale key; the
human-readable string is looked up on demand against a language table so
that the same handle renders correctly for every client locale.

Language tables are plain ``key -> format string`` mappings.  The engine's
``.lang`` files (``key=value`` per line, ``#`` comments) can be read with
:func:`load_lang_file`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Translation:
    """Immutable handle wrapping a locale key.

    Attributes:
        key: Fully-composed locale key, e.g. ``"tile.doublePlant.rose.name"``.
    """

    key: str

    def get(self, lang: Mapping[str, str] | None = None, *args: object) -> str:
        """Render this translation against *lang*.

        Falls back to the key itself when *lang* is ``None`` or has no entry
        for the key, which matches how the engine renders untranslated text.

        Args:
            lang: Language table for the target locale.
            *args: Positional ``%s``-style format arguments.

        Returns:
            The localized (and formatted) string, or the raw key.
        """
        if lang is None or self.key not in lang:
            return self.key
        template = lang[self.key]
        if not args:
            return template
        try:
            return template % args
        except (TypeError, ValueError):
            logger.warning(
                "Translation %r: cannot format %r with %d args", self.key, template, len(args)
            )
            return template

    def __str__(self) -> str:
        return self.key


def load_lang_file(path: Path) -> dict[str, str]:
    """Parse a ``.lang`` file into a language table.

    Blank lines and lines starting with ``#`` are skipped, as are lines
    without an ``=``.  The first ``=`` splits key from value, so values may
    themselves contain ``=``.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    table: dict[str, str] = {}
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            line = line.rstrip("\r\n")
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            table[key.strip()] = value
    logger.debug("Loaded %d entries from %s", len(table), path)
    return table
