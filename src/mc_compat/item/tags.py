"""Hierarchical item metadata tags.

:class:`TagCompound` is an in-memory stand-in for the engine's compound tag:
a string-keyed mapping whose values are ints, strings or nested compounds.
It implements the :class:`ItemMetadataStore` contract that the color
resolver reads and writes through.

Integer fields are signed 32-bit.  ``set_int`` wraps values into that range
the way the engine's ``int`` storage does, so a packed color written here
reads back bit-for-bit identical.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def to_int32(value: int) -> int:
    """Wrap *value* into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


@runtime_checkable
class ItemMetadataStore(Protocol):
    """Typed key/value access to one level of an item's tag tree."""

    def has_key(self, key: str) -> bool: ...

    def get_int(self, key: str) -> int: ...

    def set_int(self, key: str, value: int) -> None: ...

    def get_compound(self, key: str) -> ItemMetadataStore: ...

    def get_or_create_compound(self, key: str) -> ItemMetadataStore: ...


class TagCompound:
    """Mutable compound tag.

    Reads of missing keys return the engine's defaults (``0`` for ints, an
    empty detached compound for compounds) rather than raising; use
    :meth:`has_key` to distinguish "absent" from "zero".
    """

    def __init__(self, values: dict[str, object] | None = None) -> None:
        self._values: dict[str, object] = {}
        for key, value in (values or {}).items():
            if isinstance(value, dict):
                value = TagCompound(value)
            elif isinstance(value, bool):
                value = int(value)
            elif isinstance(value, int):
                value = to_int32(value)
            self._values[key] = value

    def has_key(self, key: str) -> bool:
        return key in self._values

    def has_int(self, key: str) -> bool:
        """``True`` iff *key* holds an int value."""
        return isinstance(self._values.get(key), int)

    def get_int(self, key: str) -> int:
        value = self._values.get(key)
        if isinstance(value, int):
            return value
        return 0

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = to_int32(int(value))

    def get_string(self, key: str) -> str:
        value = self._values.get(key)
        return value if isinstance(value, str) else ""

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = str(value)

    def get_compound(self, key: str) -> TagCompound:
        """Return the compound under *key*.

        A missing key, or one holding a non-compound value, yields a new
        detached empty compound; writes to it are not attached to this tag.
        """
        value = self._values.get(key)
        if isinstance(value, TagCompound):
            return value
        return TagCompound()

    def get_or_create_compound(self, key: str) -> TagCompound:
        """Return the compound under *key*, attaching a new one if needed.

        A non-compound value under *key* is replaced by an empty compound.
        """
        value = self._values.get(key)
        if not isinstance(value, TagCompound):
            value = TagCompound()
            self._values[key] = value
        return value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def to_dict(self) -> dict[str, object]:
        """Return a plain nested-dict copy of this tag."""
        return {
            k: v.to_dict() if isinstance(v, TagCompound) else v for k, v in self._values.items()
        }

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagCompound):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"TagCompound({self.to_dict()!r})"
