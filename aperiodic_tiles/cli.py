"""Command line entry point that generates a tiling and writes it as SVG."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from xml.sax.saxutils import quoteattr

from .generator import TilingGenerator
from .tiles import Polygon

_TYPES = ("penrose", "hat", "ghost")


def render_svg(tiles: list[Polygon], color: str) -> str:
    """Render polygons filled with ``color`` and outlined in black."""
    xs = [x for tile in tiles for x, _ in tile]
    ys = [y for tile in tiles for _, y in tile]
    if xs:
        min_x, min_y = min(xs), min(ys)
        view_box = f"{min_x} {min_y} {max(xs) - min_x} {max(ys) - min_y}"
    else:
        view_box = "0 0 0 0"
    fill = quoteattr(color)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}">'
    ]
    for tile in tiles:
        points = " ".join(f"{x},{y}" for x, y in tile)
        lines.append(
            f'  <polygon points="{points}" fill={fill} '
            'stroke="black" stroke-width="1"/>'
        )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aperiodic-tiles", description="Generate an aperiodic tiling as SVG."
    )
    parser.add_argument("--type", choices=_TYPES, default="penrose")
    parser.add_argument("--side", type=int, default=50)
    parser.add_argument("--rotation", type=int, default=0)
    parser.add_argument("--count", type=int, default=100)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--color", default="#ffffff")
    parser.add_argument("--output", type=Path)
    return parser


def main(argv=None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        generator = TilingGenerator(
            side_length=args.side,
            rotation_angle=args.rotation,
            tile_count=args.count,
            rng=random.Random(args.seed),
        )
    except ValueError as exc:
        parser.error(str(exc))
    generator.change_tiling_type(_TYPES.index(args.type))
    generator.color = args.color
    svg = render_svg(generator.generate_tiling(), generator.color)
    if args.output is None:
        sys.stdout.write(svg)
    else:
        args.output.write_text(svg, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())