"""Item color resolution and dye palette conversion.

Typical usage::

    from mc_compat.color import Color, DyeColor, color_from_dye, get_item_color

    get_item_color(stack)          # Color | None
    color_from_dye(DyeColor.RED)   # exact 8-bit Color for the red dye
"""

from mc_compat.color.color import Color, pack_color
from mc_compat.color.dye import (
    DyeColor,
    DyeRamp,
    DyeRampProvider,
    color_from_dye,
    default_dye_ramp,
    dye_from_color,
    dye_to_packed_rgb,
    load_dye_ramp,
)
from mc_compat.color.resolver import (
    get_item_color,
    has_color_in_metadata,
    has_inherent_color,
    set_item_color,
)

__all__ = [
    "Color",
    "DyeColor",
    "DyeRamp",
    "DyeRampProvider",
    "color_from_dye",
    "default_dye_ramp",
    "dye_from_color",
    "dye_to_packed_rgb",
    "get_item_color",
    "has_color_in_metadata",
    "has_inherent_color",
    "load_dye_ramp",
    "pack_color",
    "set_item_color",
]
