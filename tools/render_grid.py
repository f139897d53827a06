#!/usr/bin/env python3
# Render TSV room grids (cell tags) to PNGs using Pillow.
# Critical cells are outlined when --hints is given.

import argparse, os
from PIL import Image, ImageDraw
from friheten.grid import find_door, grid_size, read_tsv
from friheten.engine.critical import identify_critical_paths

COLORS = {
    "empty": (235, 235, 225, 255),
    "wall": (80, 80, 80, 255),
    "door": (140, 90, 40, 255),
}
SOFA_COLOR = (0, 87, 173, 255)
HINT_COLOR = (251, 218, 12, 255)

def cell_color(cell):
    if cell.startswith("sofa"):
        return SOFA_COLOR
    return COLORS.get(cell, (255, 0, 255, 255))

def render_grid(grid, out_png, tile_size=16, margin=0, marks=()):
    w, h = grid_size(grid)
    canvas = Image.new("RGBA", (w * tile_size + 2*margin, h * tile_size + 2*margin), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for y in range(h):
        for x in range(w):
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            box = (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)
            draw.rectangle(box, fill=cell_color(grid[y][x]))
            if (x, y) in marks:
                draw.rectangle(box, outline=HINT_COLOR, width=max(1, tile_size // 8))
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
    return canvas.size

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("grids", nargs="+", help="TSV grids to render")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--hints", action="store_true", help="Outline critical cells")
    args = ap.parse_args(argv)

    for path in args.grids:
        grid = read_tsv(path)
        marks = set()
        door = find_door(grid)
        if args.hints and door is not None:
            marks = identify_critical_paths(grid, door)
        name = os.path.splitext(os.path.basename(path))[0] + ".png"
        render_grid(grid, os.path.join(args.outdir, name), tile_size=args.tile, marks=marks)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
