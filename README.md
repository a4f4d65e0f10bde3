# aperiodic-tiles

A small toolkit for building the outlines of aperiodic tile shapes, laying
out simple collections of them and writing the result as SVG.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Tile shapes

`aperiodic_tiles.tiles` builds single tiles centred on the origin. Each
function returns a list of `(x, y)` integer points (coordinates are rounded
half away from zero):

- `generate_kite_tile(side_length, rotation_angle)`: Penrose kite, 4 points.
- `generate_dart_tile(side_length, rotation_angle)`: Penrose dart, 4 points.
- `generate_hat_tile(side_length, rotation_angle)`: five-point hat outline.
- `generate_ghost_tile(side_length, rotation_angle, is_left_handed)`:
  six-point ghost outline; handedness flips the vertical offsets.

Angles are in degrees. `PHI`, the golden ratio, is also exported there.

```python
from aperiodic_tiles.tiles import generate_kite_tile, generate_hat_tile

kite = generate_kite_tile(50, 0)
hat = generate_hat_tile(20, 45)
```

## Tilings

`aperiodic_tiles.generator.TilingGenerator` holds the parameters and the
tiles last produced:

```python
import random
from aperiodic_tiles.generator import TilingGenerator, TilingType

gen = TilingGenerator(side_length=50, rotation_angle=0, tile_count=100,
                      rng=random.Random(1))
gen.change_tiling_type(1)          # 0 = PENROSE, 1 = HAT, 2 = GHOST
tiles = gen.generate_tiling()
```

- `side_length` must be 1–100 and `rotation_angle` 0–360; `tile_count` must
  not be negative. A `ValueError` is raised otherwise.
- `change_tiling_type(index)` selects a `TilingType`; an unknown index leaves
  the type unchanged. It returns the current type.
- For `PENROSE`, a kite and a dart built from `side_length` and
  `rotation_angle` are passed through `replace_penrose_tiles(tiles, 3)`,
  which replaces every tile by a kite and a dart of side 20 at rotation 0 on
  each level, giving 16 tiles.
- For `HAT` and `GHOST`, `tile_hats(tile_count)` and
  `tile_ghosts(tile_count)` return one tile of side 20 at rotation 0 followed
  by tiles at a random whole-degree rotation drawn from `rng` (left-handed
  ghosts). Pass a seeded `random.Random` to reproduce a layout.
- `perform_replacement()` raises `replacement_level` (starting at 1) by one
  while it is at most 5, and returns it.

## Command line

```
aperiodic-tiles --help
```

The command generates a tiling and writes it as SVG to standard output, or
to a file with `--output`. Options: `--type` (`penrose`, `hat`, `ghost`),
`--side`, `--rotation`, `--count`, `--seed`, `--color` (fill colour, default
`#ffffff`) and `--output`. `aperiodic_tiles.cli.render_svg(tiles, color)`
gives the same SVG text from a list of polygons.

## Other pieces

- `aperiodic_tiles.detector.CustomTileDetector`: `import_svg_tile(path)`
  parses an SVG file and returns an `SvgTile` with its path, `width`,
  `height` and `viewBox`; a `ValueError` is raised for invalid XML, a root
  element other than `svg`, or a malformed `viewBox`.
  `analyze_tiling_potential()` returns a 100×100 Pillow image.
- `aperiodic_tiles.analysis.MathAnalysisTool`: `analyze_symmetry()` and
  `analyze_frequency()`.
- `aperiodic_tiles.exporter.ArtCreationExporter`: `select_material(name)`
  takes a `Material` or its display name (`哑光`, `金属`, `玻璃`) and raises
  `ValueError` for others; `export_image(path)` writes an 800×600 PNG, and
  does nothing for an empty path.

## What it does not do

- Tiles are not positioned against each other: every tile is centred on the
  origin, so a generated tiling is a stack of overlapping outlines, not a
  true aperiodic tiling. The Penrose replacement does not subdivide tiles
  geometrically.
- There is no interactive window or viewer; output is SVG text or PNG files.
- The analyses return fixed results: `analyze_symmetry()` always reports
  `对称群类型: p1`, `analyze_frequency()` always gives `{"频率": [10, 20, 30]}`,
  and the tiling-potential heatmap is solid green whatever tile was imported.
- The chosen material is only recorded; the exported PNG is plain white and
  does not contain the tiling.