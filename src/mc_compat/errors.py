"""Typed exceptions for the compatibility layer.

Query operations in this package never raise: a missing tag, an unset
armor color, or an unmatched palette color all degrade to ``None`` or a
default value.  The exceptions below are reserved for precondition
violations at the API boundary and for malformed data files.

Design intent:
    - Reject bad input where it enters (resolver construction, the color
      write path) so that a corrupted identifier or packed value never
      reaches plugin code.
    - Subclass the builtin that best describes the failure so callers can
      catch ``ValueError``/``TypeError`` without importing this module.
"""

from __future__ import annotations


class CompatError(Exception):
    """Base exception for compatibility-layer failures."""


class InvalidVariantError(CompatError, ValueError):
    """An object variant exposed an empty or ``None`` raw name or translation key."""


class InvalidColorError(CompatError, ValueError):
    """A ``None`` or non-:class:`~mc_compat.color.color.Color` value reached the write path."""


class DyeRampError(CompatError, ValueError):
    """The dye ramp file failed schema validation."""

