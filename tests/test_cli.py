import xml.etree.ElementTree as ET

import pytest

from aperiodic_tiles.cli import main, render_svg
from aperiodic_tiles.tiles import generate_hat_tile

NS = "{http://www.w3.org/2000/svg}"


def test_render_svg_polygon_points_and_fill():
    svg = render_svg([[(0, 0), (10, 0), (0, 10)]], "#ff0000")
    root = ET.fromstring(svg)
    polygons = root.findall(f"{NS}polygon")
    assert len(polygons) == 1
    assert polygons[0].get("points") == "0,0 10,0 0,10"
    assert polygons[0].get("fill") == "#ff0000"
    assert root.get("viewBox") == "0 0 10 10"


def test_render_svg_escapes_color():
    svg = render_svg([[(0, 0), (1, 1), (2, 0)]], 'a"b')
    root = ET.fromstring(svg)
    assert root.find(f"{NS}polygon").get("fill") == 'a"b'


def test_render_svg_empty():
    root = ET.fromstring(render_svg([], "red"))
    assert root.findall(f"{NS}polygon") == []


def test_main_writes_hat_file(tmp_path):
    out = tmp_path / "hats.svg"
    assert main(["--type", "hat", "--count", "5", "--seed", "1", "--output", str(out)]) == 0
    polygons = ET.parse(out).getroot().findall(f"{NS}polygon")
    assert len(polygons) == 5
    first = " ".join(f"{x},{y}" for x, y in generate_hat_tile(20, 0))
    assert polygons[0].get("points") == first


def test_main_prints_to_stdout(capsys):
    assert main(["--type", "ghost", "--count", "3", "--seed", "2"]) == 0
    root = ET.fromstring(capsys.readouterr().out)
    assert len(root.findall(f"{NS}polygon")) == 3


def test_main_rejects_unknown_type():
    with pytest.raises(SystemExit):
        main(["--type", "square"])


def test_main_rejects_bad_side():
    with pytest.raises(SystemExit):
        main(["--side", "0"])