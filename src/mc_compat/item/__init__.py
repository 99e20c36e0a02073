"""Item, item-stack and metadata tag model used by the color resolver."""

from mc_compat.item.stack import ArmorItem, ArmorMaterial, Item, ItemStack
from mc_compat.item.tags import ItemMetadataStore, TagCompound

__all__ = ["ArmorItem", "ArmorMaterial", "Item", "ItemMetadataStore", "ItemStack", "TagCompound"]
