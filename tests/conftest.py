"""
Shared pytest fixtures for the mc_compat test suite.

This module provides fixtures that are automatically available to all test files:
- Item stacks for plain items and each armor material category
- Dye ramp files and stub ramp providers
- Isolation of the process-wide default dye ramp cache
"""

from collections.abc import Generator
from pathlib import Path

import pytest
import yaml

from mc_compat.color import dye
from mc_compat.color.dye import DyeColor
from mc_compat.item import ArmorItem, ArmorMaterial, Item, ItemStack
from tests.helpers import StubRamp

# ============================================================================
# CACHE ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def reset_dye_ramp_cache() -> Generator[None, None, None]:
    """Drop the cached default ramp before and after every test."""
    dye.reset_default_dye_ramp()
    yield
    dye.reset_default_dye_ramp()


# ============================================================================
# ITEM FIXTURES
# ============================================================================


@pytest.fixture
def plain_stack() -> ItemStack:
    """A non-armor stack with no metadata at all."""
    return ItemStack(Item("minecraft:wool"))


@pytest.fixture
def leather_stack() -> ItemStack:
    """A leather chestplate with no metadata."""
    return ItemStack(ArmorItem("minecraft:leather_chestplate", ArmorMaterial.LEATHER))


@pytest.fixture
def iron_stack() -> ItemStack:
    """An iron chestplate with no metadata."""
    return ItemStack(ArmorItem("minecraft:iron_chestplate", ArmorMaterial.IRON))


# ============================================================================
# DYE RAMP FIXTURES
# ============================================================================


@pytest.fixture
def red_ramp() -> StubRamp:
    """Ramp where RED is (0.6, 0.1, 0.1) and every other dye is a distinct grey."""
    return StubRamp({DyeColor.RED: (0.6, 0.1, 0.1)})


@pytest.fixture
def write_ramp(tmp_path: Path):
    """Return a helper that writes a ramp YAML (dict or raw text) and returns its path."""

    def _write(content: dict | str, name: str = "dye_ramp.yaml") -> Path:
        path = tmp_path / name
        if isinstance(content, dict):
            path.write_text(yaml.dump(content))
        else:
            path.write_text(content)
        return path

    return _write
