#!/usr/bin/env python3
import argparse, logging, os
from friheten.grid import find_door, read_tsv, to_ascii, write_tsv
from friheten.engine.critical import identify_critical_paths, unreachable_groups
from friheten.mapgen.generator import generate_level
from friheten.rng import PMRandom, seed_for_level

def _rng(args, level, per_level=False):
    if args.seed is None:
        return PMRandom.from_seed(seed_for_level(level))
    # A pack spreads one base seed over its levels.
    return PMRandom.from_seed(seed_for_level(args.seed + level) if per_level else args.seed)

def cmd_emit(args):
    lvl = generate_level(args.complexity, args.level, rng=_rng(args, args.level))
    write_tsv(lvl.to_grid(), args.out)
    print(f"Wrote {args.out} ({lvl.name}, inventory {lvl.inventory.as_dict()})")

def cmd_show(args):
    grid = read_tsv(args.grid)
    door = find_door(grid)
    if door is None:
        raise SystemExit(f"{args.grid}: no door cell")
    critical = identify_critical_paths(grid, door)
    print(to_ascii(grid, marks=critical))
    stuck = unreachable_groups(grid, door)
    print(f"critical cells: {len(critical)}, unreachable groups: {len(stuck)}")
    for grp in stuck:
        print(f"  unreachable group at {grp[0]}")

def cmd_pack(args):
    os.makedirs(args.outdir, exist_ok=True)
    for n in range(1, args.count + 1):
        c = min(1.0, args.complexity + (n - 1) * args.step)
        lvl = generate_level(c, n, rng=_rng(args, n, per_level=True))
        write_tsv(lvl.to_grid(), os.path.join(args.outdir, f"{n:02d}.tsv"))
    print(f"Wrote {args.count} levels to {args.outdir}")

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--complexity', type=float, required=True)
    p1.add_argument('--level', type=int, default=1)
    p1.add_argument('--seed', type=int)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('show')
    p2.add_argument('grid', type=str)
    p2.set_defaults(func=cmd_show)
    p3 = sub.add_parser('pack')
    p3.add_argument('--count', type=int, default=10)
    p3.add_argument('--complexity', type=float, default=0.0)
    p3.add_argument('--step', type=float, default=0.1)
    p3.add_argument('--seed', type=int)
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_pack)
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
