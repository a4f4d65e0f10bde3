"""Material selection and image export of tiling artwork."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from PIL import Image

_EXPORT_SIZE = (800, 600)


class Material(Enum):
    MATTE = "哑光"
    METAL = "金属"
    GLASS = "玻璃"


class ArtCreationExporter:
    """Keeps the chosen material and the last exported pattern image."""

    def __init__(self) -> None:
        self.material = Material.MATTE
        self.pattern_image: Image.Image | None = None

    def select_material(self, name) -> Material:
        """Choose a material by member or by its display name."""
        if isinstance(name, Material):
            self.material = name
        else:
            try:
                self.material = Material(name)
            except ValueError:
                raise ValueError(f"unknown material: {name!r}") from None
        return self.material

    def export_image(self, path) -> Image.Image | None:
        """Write the pattern as a PNG; an empty path exports nothing."""
        if not path:
            return None
        self.pattern_image = Image.new("RGB", _EXPORT_SIZE, (255, 255, 255))
        self.pattern_image.save(Path(path), format="PNG")
        return self.pattern_image