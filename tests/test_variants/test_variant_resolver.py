"""Unit tests for VariantIdentityResolver.

Test organisation
-----------------
``TestGetId``
    Namespaced identifier derivation, including configured namespaces.

``TestGetName``
    The translation key passthrough.

``TestGetTranslation``
    Lazy construction and identity-stable caching of the Translation handle.

``TestConstructorValidation``
    Variants with missing names are rejected at the boundary.
"""

import threading
from dataclasses import dataclass

import pytest

from mc_compat.errors import InvalidVariantError
from mc_compat.text.translation import Translation
from mc_compat.variants import DoublePlantType, VariantIdentityResolver


@dataclass
class FakeVariant:
    """Minimal ObjectVariantSource that counts accessor calls."""

    name: object
    key: object
    name_calls: int = 0

    def raw_name(self):
        self.name_calls += 1
        return self.name

    def raw_translation_key(self):
        return self.key


@pytest.mark.unit
class TestGetId:
    """get_id: "minecraft:" + raw name."""

    @pytest.mark.parametrize("plant", list(DoublePlantType))
    def test_every_plant_is_namespaced(self, plant):
        resolver = VariantIdentityResolver(plant)
        assert resolver.get_id() == "minecraft:" + plant.raw_name()

    def test_rose_uses_raw_name_not_translation_key(self):
        assert VariantIdentityResolver(DoublePlantType.ROSE).get_id() == "minecraft:double_rose"

    def test_repeated_calls_are_identical(self):
        resolver = VariantIdentityResolver(DoublePlantType.FERN)
        assert resolver.get_id() == resolver.get_id()

    def test_raw_name_read_once(self):
        variant = FakeVariant("tall_thing", "thing")
        resolver = VariantIdentityResolver(variant)
        resolver.get_id()
        resolver.get_id()
        assert variant.name_calls == 1

    def test_custom_namespace(self):
        resolver = VariantIdentityResolver(DoublePlantType.PAEONIA, namespace="modded")
        assert resolver.get_id() == "modded:paeonia"

    def test_namespace_from_config(self, monkeypatch):
        from mc_compat.config import config

        monkeypatch.setattr(config.identity, "namespace", "testpack")
        assert VariantIdentityResolver(DoublePlantType.SYRINGA).get_id() == "testpack:syringa"


@pytest.mark.unit
class TestGetName:
    """get_name: returns the raw translation key verbatim."""

    def test_returns_translation_key(self):
        assert VariantIdentityResolver(DoublePlantType.GRASS).get_name() == "grass"

    def test_is_not_the_raw_name(self):
        resolver = VariantIdentityResolver(DoublePlantType.GRASS)
        assert resolver.get_name() != DoublePlantType.GRASS.raw_name()


@pytest.mark.unit
class TestGetTranslation:
    """get_translation: built lazily, cached forever."""

    @pytest.mark.parametrize("plant", list(DoublePlantType))
    def test_translation_key_format(self, plant):
        translation = VariantIdentityResolver(plant).get_translation()
        assert translation.key == "tile.doublePlant." + plant.raw_translation_key() + ".name"

    def test_returns_translation_instance(self):
        translation = VariantIdentityResolver(DoublePlantType.ROSE).get_translation()
        assert isinstance(translation, Translation)

    def test_second_call_returns_same_object(self):
        resolver = VariantIdentityResolver(DoublePlantType.ROSE)
        assert resolver.get_translation() is resolver.get_translation()

    def test_uncached_until_first_call(self):
        resolver = VariantIdentityResolver(DoublePlantType.ROSE)
        assert resolver.is_cached is False
        resolver.get_translation()
        assert resolver.is_cached is True

    def test_separate_resolvers_build_equal_handles(self):
        a = VariantIdentityResolver(DoublePlantType.SUNFLOWER).get_translation()
        b = VariantIdentityResolver(DoublePlantType.SUNFLOWER).get_translation()
        assert a == b

    def test_custom_template(self):
        resolver = VariantIdentityResolver(
            DoublePlantType.FERN, translation_template="block.{key}.label"
        )
        assert resolver.get_translation().key == "block.fern.label"

    def test_concurrent_first_access_yields_equal_handles(self):
        resolver = VariantIdentityResolver(DoublePlantType.PAEONIA)
        results: list[Translation] = []

        def worker():
            results.append(resolver.get_translation())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r == results[0] for r in results)
        assert resolver.get_translation() is resolver.get_translation()


@pytest.mark.unit
class TestConstructorValidation:
    """Invalid variants fail fast with InvalidVariantError."""

    def test_none_variant(self):
        with pytest.raises(InvalidVariantError):
            VariantIdentityResolver(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", [None, "", 42])
    def test_bad_raw_name(self, name):
        with pytest.raises(InvalidVariantError, match="raw name"):
            VariantIdentityResolver(FakeVariant(name, "key"))

    @pytest.mark.parametrize("key", [None, ""])
    def test_bad_translation_key(self, key):
        with pytest.raises(InvalidVariantError, match="translation key"):
            VariantIdentityResolver(FakeVariant("name", key))

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            VariantIdentityResolver(FakeVariant(None, None))
