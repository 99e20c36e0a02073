"""Shared item tag constants.

These are the engine's fixed tag keys for item color.  They are the only
persisted keys this package reads or writes.
"""

from __future__ import annotations

# Nested compound holding display metadata (name, lore, color).
ITEM_DISPLAY = "display"

# Integer color field, packed as 0xRRGGBB.
ITEM_COLOR = "color"

# Marker whose presence on an armor stack means "a color has been applied".
# The armor accessor's value is only trusted when this key exists.
ARMOR_COLOR_DISPLAY_TAG = ITEM_DISPLAY

# Returned by the armor color accessor when the material has no color.
NO_COLOR = -1

# Brown leather returned for undyed leather armor.
DEFAULT_LEATHER_COLOR = 0xA06540
