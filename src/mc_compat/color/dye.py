"""Dye palette and palette <-> RGB conversion.

The engine has a fixed, ordered palette of 16 dyes.  Each dye maps to a
normalized float RGB triplet through a *dye ramp* (the same values the
engine uses to tint sheep fleece).  This module converts in both
directions:

Forward (:func:`color_from_dye`, :func:`dye_to_packed_rgb`)
    Each ramp component is multiplied by 255 and **truncated**, not
    rounded: a ramp of ``(0.6, 0.1, 0.1)`` gives ``(153, 25, 25)``.

Inverse (:func:`dye_from_color`)
    A linear scan over the palette in declaration order, returning the
    first dye whose forward color equals the input exactly.  When nothing
    matches, the configured default dye (``WHITE``) is returned.  There is
    deliberately no nearest-color search: the only expected inputs are
    colors produced by the forward conversion, and an arbitrary RGB value
    has no meaningful "closest dye" under this contract.

Ramp data
---------
The default ramp lives in ``data/dye_ramp.yaml`` (overridable via
``[palette] ramp_path``) and is loaded once, on first use, by
:func:`default_dye_ramp`.  Any object with a ``ramp_for(dye)`` method can
be passed in its place.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

import yaml

from mc_compat.color.color import Color
from mc_compat.errors import DyeRampError

logger = logging.getLogger(__name__)

Ramp = tuple[float, float, float]


class DyeColor(Enum):
    """The engine's dye palette, in enumeration (metadata) order."""

    WHITE = "white"
    ORANGE = "orange"
    MAGENTA = "magenta"
    LIGHT_BLUE = "light_blue"
    YELLOW = "yellow"
    LIME = "lime"
    PINK = "pink"
    GRAY = "gray"
    SILVER = "silver"
    CYAN = "cyan"
    PURPLE = "purple"
    BLUE = "blue"
    BROWN = "brown"
    GREEN = "green"
    RED = "red"
    BLACK = "black"

    @classmethod
    def from_name(cls, name: str) -> DyeColor:
        """Look up a dye by its lower-case name (case-insensitive).

        Raises:
            ValueError: If *name* is not a palette entry.
        """
        return cls(name.strip().lower())


class DyeRampProvider(Protocol):
    """Source of normalized ``(r, g, b)`` ramps, each component in ``[0, 1]``."""

    def ramp_for(self, dye: DyeColor) -> Ramp: ...


@dataclass(frozen=True)
class DyeRamp:
    """Immutable dye ramp table loaded from YAML.

    Attributes:
        version: Schema version string from the ramp file.
        entries: One ramp per :class:`DyeColor`.
    """

    version: str
    entries: Mapping[DyeColor, Ramp]

    def ramp_for(self, dye: DyeColor) -> Ramp:
        return self.entries[dye]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_dye_ramp(path: Path) -> DyeRamp:
    """Load and validate a dye ramp file.

    Args:
        path: YAML file with ``version``, ``shade`` and a ``dyes`` mapping.

    Returns:
        A fully-populated, immutable :class:`DyeRamp`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        DyeRampError:      On schema validation failure: unknown or missing
                           dyes, bad hex colors, non-numeric or out-of-range
                           ramp components.
    """
    if not path.exists():
        raise FileNotFoundError(f"Dye ramp not found: {path}")

    with path.open() as fh:
        raw = yaml.safe_load(fh)

    if not isinstance(raw, dict):
        raise DyeRampError(f"{path.name} must be a YAML mapping at the top level.")

    version = str(raw.get("version", "1.0"))
    try:
        shade = float(raw.get("shade", 1.0))
    except (TypeError, ValueError) as exc:
        raise DyeRampError(f"{path.name}: shade must be a number.") from exc
    if not math.isfinite(shade) or shade < 0.0:
        raise DyeRampError(f"{path.name}: shade must be a finite, non-negative number.")

    dyes_raw = raw.get("dyes")
    if not isinstance(dyes_raw, dict):
        raise DyeRampError(f"{path.name}: missing required field 'dyes' (must be a mapping).")

    entries: dict[DyeColor, Ramp] = {}
    for name, spec in dyes_raw.items():
        try:
            dye = DyeColor.from_name(str(name))
        except ValueError as exc:
            raise DyeRampError(f"{path.name}: unknown dye {name!r}.") from exc
        if not isinstance(spec, dict):
            raise DyeRampError(f"{path.name}: dyes.{name} must be a mapping.")
        entries[dye] = _parse_ramp(path.name, str(name), spec, shade)

    missing = [d.value for d in DyeColor if d not in entries]
    if missing:
        raise DyeRampError(f"{path.name}: missing dyes: {missing}")

    logger.info("Loaded dye ramp %s (version %s) from %s", path.name, version, path)
    return DyeRamp(version=version, entries=entries)


def _parse_ramp(filename: str, name: str, spec: dict, shade: float) -> Ramp:
    """Build one dye's ramp from an explicit triplet or its base color."""
    if "ramp" in spec:
        values = spec["ramp"]
        if not isinstance(values, list) or len(values) != 3:
            raise DyeRampError(f"{filename}: dyes.{name}.ramp must be a list of 3 numbers.")
        try:
            ramp = (float(values[0]), float(values[1]), float(values[2]))
        except (TypeError, ValueError) as exc:
            raise DyeRampError(f"{filename}: dyes.{name}.ramp must be numeric.") from exc
    else:
        try:
            base = Color.of_hex(str(spec.get("color", "")))
        except ValueError as exc:
            raise DyeRampError(f"{filename}: dyes.{name}.color must be #RRGGBB.") from exc
        ramp = (
            base.red / 255.0 * shade,
            base.green / 255.0 * shade,
            base.blue / 255.0 * shade,
        )

    if not all(0.0 <= c <= 1.0 for c in ramp):
        raise DyeRampError(f"{filename}: dyes.{name} ramp components must be in [0, 1].")
    return ramp


_default_ramp: DyeRamp | None = None


def default_dye_ramp() -> DyeRamp:
    """Return the configured dye ramp, loading it on first call."""
    from mc_compat.config import config

    global _default_ramp
    if _default_ramp is None:
        _default_ramp = load_dye_ramp(config.palette.absolute_ramp_path)
    return _default_ramp


def reset_default_dye_ramp() -> None:
    """Drop the cached default ramp so the next call reloads it."""
    global _default_ramp
    _default_ramp = None


def default_dye() -> DyeColor:
    """Return the configured fallback dye (``WHITE`` if the setting is invalid)."""
    from mc_compat.config import config

    try:
        return DyeColor.from_name(config.palette.default_dye)
    except ValueError:
        logger.warning(
            "Unknown default_dye %r in config; using white", config.palette.default_dye
        )
        return DyeColor.WHITE


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def _scale(ramp: Ramp) -> tuple[int, int, int]:
    # int() truncates toward zero; components are non-negative
    return int(ramp[0] * 255.0), int(ramp[1] * 255.0), int(ramp[2] * 255.0)


def color_from_dye(dye: DyeColor, ramp: DyeRampProvider | None = None) -> Color:
    """Convert *dye* to an exact 8-bit :class:`Color` via its ramp."""
    provider = ramp if ramp is not None else default_dye_ramp()
    red, green, blue = _scale(provider.ramp_for(dye))
    return Color(red, green, blue)


def dye_to_packed_rgb(dye: DyeColor, ramp: DyeRampProvider | None = None) -> int:
    """Convert *dye* to the engine's packed ``0xRRGGBB`` int."""
    red, green, blue = _scale((ramp if ramp is not None else default_dye_ramp()).ramp_for(dye))
    return (((red << 8) + green) << 8) + blue


def dye_from_color(
    color: Color,
    ramp: DyeRampProvider | None = None,
    *,
    default: DyeColor | None = None,
) -> DyeColor:
    """Return the first dye whose forward color equals *color* exactly.

    Args:
        color:   Color to match.
        ramp:    Ramp provider; defaults to :func:`default_dye_ramp`.
        default: Returned when no dye matches; defaults to
                 :func:`default_dye`.

    Returns:
        The matching dye, or the default.  Never raises for an unmatched
        color.
    """
    provider = ramp if ramp is not None else default_dye_ramp()
    for dye in DyeColor:
        if color_from_dye(dye, provider) == color:
            return dye

    fallback = default if default is not None else default_dye()
    logger.debug("No dye matches %s; falling back to %s", color, fallback.name)
    return fallback
