"""Variant identity resolver.

Wraps an :class:`~mc_compat.variants.types.ObjectVariantSource` and exposes
the three identity properties plugin code relies on:

``get_id()``
    ``"<namespace>:<raw name>"``, e.g. ``"minecraft:double_rose"``.
``get_name()``
    The raw translation key, verbatim (``"rose"``).  This is the engine's
    historical behaviour and is preserved as-is; it is a locale key
    fragment, not a human-readable label.  Use ``get_translation()`` for
    display text.
``get_translation()``
    A :class:`~mc_compat.text.translation.Translation` for
    ``"tile.doublePlant.<translation key>.name"``.

Caching
-------
The translation handle is built on first access and cached on the
resolver instance; the instance moves from *uncached* to *cached* exactly
once and is never reset.  There is no lock: two threads racing on the
first call may each build a handle, and the last assignment wins.  Both
handles are equal and immutable, and the assignment is the final step, so
the race is benign.
"""

from __future__ import annotations

import logging

from mc_compat.errors import InvalidVariantError
from mc_compat.text.translation import Translation
from mc_compat.variants.types import ObjectVariantSource

logger = logging.getLogger(__name__)


def _require_text(value: object, what: str, variant: object) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidVariantError(f"variant {variant!r} has invalid {what}: {value!r}")
    return value


class VariantIdentityResolver:
    """Identity adapter for one object variant.

    The resolver holds a reference to the variant and answers by delegation;
    it never mutates or subclasses the engine type.  The raw name and
    translation key are read and validated once, at construction, so a
    variant with a missing name fails here instead of producing
    ``"minecraft:None"`` later.

    Attributes:
        variant:              The wrapped variant source.
        _namespace:           Identifier prefix (``config.identity.namespace``).
        _translation_template: Locale key template with a ``{key}`` placeholder.
        _translation:         Cached handle; ``None`` until first requested.
    """

    def __init__(
        self,
        variant: ObjectVariantSource,
        *,
        namespace: str | None = None,
        translation_template: str | None = None,
    ) -> None:
        from mc_compat.config import config

        if variant is None:
            raise InvalidVariantError("variant must not be None")
        self.variant = variant
        self._raw_name = _require_text(variant.raw_name(), "raw name", variant)
        self._translation_key = _require_text(
            variant.raw_translation_key(), "translation key", variant
        )
        self._namespace = namespace if namespace is not None else config.identity.namespace
        self._translation_template = (
            translation_template
            if translation_template is not None
            else config.identity.translation_template
        )
        self._translation: Translation | None = None

    def get_id(self) -> str:
        """Return the namespaced identifier, e.g. ``"minecraft:paeonia"``."""
        return f"{self._namespace}:{self._raw_name}"

    def get_name(self) -> str:
        """Return the raw translation key (not a human-readable name)."""
        return self._translation_key

    def get_translation(self) -> Translation:
        """Return the cached translation handle, building it on first use."""
        if self._translation is None:
            key = self._translation_template.format(key=self._translation_key)
            logger.debug("Caching translation %r for %s", key, self.get_id())
            self._translation = Translation(key)
        return self._translation

    @property
    def is_cached(self) -> bool:
        """``True`` once ``get_translation`` has built the handle."""
        return self._translation is not None

    def __repr__(self) -> str:
        return f"VariantIdentityResolver({self.get_id()!r})"
