import pytest
from PIL import Image

from aperiodic_tiles.exporter import ArtCreationExporter, Material


def test_default_material_is_first_choice():
    assert ArtCreationExporter().material is Material.MATTE


def test_select_material_by_name():
    exporter = ArtCreationExporter()
    assert exporter.select_material("金属") is Material.METAL
    assert exporter.material is Material.METAL


def test_select_material_by_member():
    exporter = ArtCreationExporter()
    assert exporter.select_material(Material.GLASS) is Material.GLASS


def test_unknown_material_rejected():
    exporter = ArtCreationExporter()
    with pytest.raises(ValueError):
        exporter.select_material("wood")
    assert exporter.material is Material.MATTE


def test_export_writes_white_png(tmp_path):
    path = tmp_path / "out.png"
    ArtCreationExporter().export_image(path)
    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (800, 600)
        assert image.convert("RGB").getpixel((10, 10)) == (255, 255, 255)


def test_empty_path_exports_nothing(tmp_path):
    exporter = ArtCreationExporter()
    assert exporter.export_image("") is None
    assert exporter.pattern_image is None
    assert list(tmp_path.iterdir()) == []