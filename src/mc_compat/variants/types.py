"""Object-variant contracts and the engine's double-plant variant table.

The engine exposes each enumerated block variant through two accessors: a
stable lower-snake-case *raw name* and a *translation key* fragment used
to build locale keys.  :class:`ObjectVariantSource` is that contract;
:class:`DoublePlantType` is the engine's table of tall-plant variants,
which satisfies it directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectVariantSource(Protocol):
    """Read-only view of one enumerated game-object variant.

    Both values must be stable for the lifetime of the process.
    """

    def raw_name(self) -> str: ...

    def raw_translation_key(self) -> str: ...


class DoublePlantType(Enum):
    """Tall (two-block) plant variants, in engine metadata order.

    Each member's value is ``(raw_name, translation_key)``.  The grass, fern
    and rose variants carry a shorter translation key than their raw name.
    """

    SUNFLOWER = ("sunflower", "sunflower")
    SYRINGA = ("syringa", "syringa")
    GRASS = ("double_grass", "grass")
    FERN = ("double_fern", "fern")
    ROSE = ("double_rose", "rose")
    PAEONIA = ("paeonia", "paeonia")

    def raw_name(self) -> str:
        return self.value[0]

    def raw_translation_key(self) -> str:
        return self.value[1]

    @property
    def meta(self) -> int:
        """Block metadata value (declaration index)."""
        return list(type(self)).index(self)

    @classmethod
    def from_meta(cls, meta: int) -> DoublePlantType:
        """Look up a variant by block metadata; out-of-range values map to ``SUNFLOWER``."""
        members = list(cls)
        if meta < 0 or meta >= len(members):
            return cls.SUNFLOWER
        return members[meta]
