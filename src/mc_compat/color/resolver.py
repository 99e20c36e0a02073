"""Item color read/write through item metadata.

Two storage layouts carry an item's color:

Armor layout
    The color belongs to the armor material and is read through
    :meth:`~mc_compat.item.stack.ArmorItem.get_color`.  The accessor's
    answer is only trusted when the root ``display`` marker key is present;
    ``-1`` from the accessor means "no color".

Display-tag layout
    Every other item stores a packed ``0xRRGGBB`` int at ``display.color``.
    This is also the only layout the write path uses.

Plugin callers see one ``Color | None`` regardless of layout.  Nothing
here raises for missing metadata; only a non-``Color`` value handed to
:func:`set_item_color` is rejected.

Two presence predicates answer different questions and must not be
confused:

- :func:`has_color_in_metadata`: does the stack *currently carry* an
  explicit ``display.color``?
- :func:`has_inherent_color`: can the item *conceptually* be colored?
  True for leather armor even when no color was ever set.
"""

from __future__ import annotations

import logging

from mc_compat.color.color import Color, pack_color
from mc_compat.item.constants import ARMOR_COLOR_DISPLAY_TAG, ITEM_COLOR, ITEM_DISPLAY, NO_COLOR
from mc_compat.item.stack import ArmorItem, ArmorMaterial, ItemStack

logger = logging.getLogger(__name__)


def get_item_color(stack: ItemStack) -> Color | None:
    """Return the color carried by *stack*, or ``None`` if it is colorless."""
    item = stack.item
    tag = stack.tag

    # Armor has its own accessor, gated by the display marker
    if isinstance(item, ArmorItem):
        if tag is None or not tag.has_key(ARMOR_COLOR_DISPLAY_TAG):
            return None
        value = item.get_color(stack)
        return None if value == NO_COLOR else Color.of_packed(value)

    if tag is None:
        return None
    if tag.has_key(ITEM_DISPLAY):
        display = tag.get_compound(ITEM_DISPLAY)
        if display.has_key(ITEM_COLOR):
            return Color.of_packed(display.get_int(ITEM_COLOR))
    # Legacy stacks written with a flat root-level color
    if tag.has_key(ITEM_COLOR):
        return Color.of_packed(tag.get_int(ITEM_COLOR))
    return None


def set_item_color(stack: ItemStack, color: Color) -> None:
    """Store *color* at ``display.color``, creating the compound if needed.

    Raises:
        InvalidColorError: If *color* is not a :class:`Color`.
    """
    packed = pack_color(color)
    stack.get_or_create_sub_compound(ITEM_DISPLAY).set_int(ITEM_COLOR, packed)
    logger.debug("Set %s color to %s", stack.item.id, color.to_hex())


def has_color_in_metadata(stack: ItemStack) -> bool:
    """``True`` iff ``display.color`` exists, whatever its value."""
    tag = stack.tag
    return (
        tag is not None
        and tag.has_key(ITEM_DISPLAY)
        and tag.get_compound(ITEM_DISPLAY).has_key(ITEM_COLOR)
    )


def has_inherent_color(stack: ItemStack) -> bool:
    """``True`` iff the item is leather armor."""
    item = stack.item
    return isinstance(item, ArmorItem) and item.material is ArmorMaterial.LEATHER
