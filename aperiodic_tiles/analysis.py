"""Simple symmetry and frequency analysis of a tiling."""

from __future__ import annotations

_SYMMETRY_RESULT = "对称群类型: p1"
_FREQUENCY_LABEL = "频率"
_FREQUENCY_VALUES = (10, 20, 30)


class MathAnalysisTool:
    """Holds the latest symmetry verdict and frequency bar sets."""

    def __init__(self) -> None:
        self.symmetry_result = ""
        self.bar_sets: dict[str, list[int]] = {}

    def analyze_symmetry(self) -> str:
        """Evaluate the symmetry group and return its description."""
        self.symmetry_result = _SYMMETRY_RESULT
        return self.symmetry_result

    def analyze_frequency(self) -> dict[str, list[int]]:
        """Replace the bar sets with fresh tile frequency counts."""
        self.bar_sets = {_FREQUENCY_LABEL: list(_FREQUENCY_VALUES)}
        return dict(self.bar_sets)