"""Object-variant identity for the plugin API.

Typical usage::

    from mc_compat.variants import DoublePlantType, VariantIdentityResolver

    resolver = VariantIdentityResolver(DoublePlantType.ROSE)
    resolver.get_id()                # "minecraft:double_rose"
    resolver.get_translation().key   # "tile.doublePlant.rose.name"
"""

from mc_compat.variants.resolver import VariantIdentityResolver
from mc_compat.variants.types import DoublePlantType, ObjectVariantSource

__all__ = ["DoublePlantType", "ObjectVariantSource", "VariantIdentityResolver"]
