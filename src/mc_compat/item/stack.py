"""Item and item-stack model.

A minimal mirror of the engine's item classes, carrying just enough
behaviour for color resolution:

- :class:`Item`: any item kind, identified by a namespaced id.
- :class:`ArmorItem`: an item with an :class:`ArmorMaterial`.  It is also
  the :class:`ArmorColorAccessor`: only leather has a color concept, and
  undyed leather reports the default brown.
- :class:`ItemStack`: an item plus an optional :class:`TagCompound`.
  ``tag is None`` means the stack has no metadata at all, which is
  distinct from an empty tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from mc_compat.item.constants import DEFAULT_LEATHER_COLOR, ITEM_COLOR, ITEM_DISPLAY, NO_COLOR
from mc_compat.item.tags import TagCompound


class ArmorMaterial(Enum):
    """Armor materials.  Only ``LEATHER`` can carry a color."""

    LEATHER = "leather"
    CHAIN = "chainmail"
    IRON = "iron"
    GOLD = "gold"
    DIAMOND = "diamond"


class ArmorColorAccessor(Protocol):
    """Material-specific armor color lookup; ``-1`` means "no color"."""

    def get_color(self, stack: ItemStack) -> int: ...


@dataclass(frozen=True)
class Item:
    """An item kind, e.g. ``Item("minecraft:wool")``."""

    id: str


@dataclass(frozen=True)
class ArmorItem(Item):
    """An armor piece made of a specific material."""

    material: ArmorMaterial = ArmorMaterial.LEATHER

    def get_color(self, stack: ItemStack) -> int:
        """Return the packed color for *stack*, or ``NO_COLOR``.

        Leather reads an int ``display.color`` and falls back to the default
        leather brown; every other material has no color.
        """
        if self.material is not ArmorMaterial.LEATHER:
            return NO_COLOR
        if stack.tag is not None and stack.tag.has_key(ITEM_DISPLAY):
            display = stack.tag.get_compound(ITEM_DISPLAY)
            if display.has_int(ITEM_COLOR):
                return display.get_int(ITEM_COLOR)
        return DEFAULT_LEATHER_COLOR


class ItemStack:
    """A quantity of one item with optional metadata.

    Attributes:
        item:  The item kind.
        count: Stack size.
        tag:   Root metadata compound, or ``None`` if the stack has none.
    """

    def __init__(self, item: Item, count: int = 1, tag: TagCompound | None = None) -> None:
        self.item = item
        self.count = count
        self.tag = tag

    def has_tag(self) -> bool:
        return self.tag is not None

    def get_or_create_tag(self) -> TagCompound:
        if self.tag is None:
            self.tag = TagCompound()
        return self.tag

    def get_or_create_sub_compound(self, key: str) -> TagCompound:
        """Return the root-level compound *key*, creating the tag tree as needed."""
        return self.get_or_create_tag().get_or_create_compound(key)

    def __repr__(self) -> str:
        return f"ItemStack({self.item.id!r}, count={self.count}, tag={self.tag!r})"
