"""
Shared test helpers.

Stub collaborators and data builders used by more than one test module.
Fixtures wrapping these live in conftest.py.
"""

from mc_compat.color.dye import DyeColor


class StubRamp:
    """Ramp provider backed by a dict; unlisted dyes map to distinct greys."""

    def __init__(self, overrides: dict[DyeColor, tuple[float, float, float]]):
        self._overrides = overrides

    def ramp_for(self, dye_color: DyeColor) -> tuple[float, float, float]:
        if dye_color in self._overrides:
            return self._overrides[dye_color]
        step = list(DyeColor).index(dye_color) / 20.0
        return step, step, step


def full_ramp_dict(**overrides: dict) -> dict:
    """Build a valid ramp-file dict with every dye, applying *overrides*."""
    dyes = {}
    for i, d in enumerate(DyeColor):
        level = f"{i * 15:02X}"
        dyes[d.value] = {"color": f"#{level}{level}{level}"}
    dyes.update(overrides)
    return {"version": "1.0", "shade": 1.0, "dyes": dyes}
