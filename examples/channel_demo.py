"""Demonstration of a polychannel assembled from straight runs, an arc
and a Bezier bend.

Examples:
    # show the hulled channel in the trimesh viewer
    python channel_demo.py

    # export only the cross-section primitives to STL
    python channel_demo.py --shapes-only --out channel.stl
"""

import argparse

from polychannel import (
    BuildConfig,
    PlacementSequence,
    arc_xy,
    bezier_curve,
    bezier_length,
    build,
    final_absolute_position,
    reverse_order,
    splice,
    uniformly_increase,
)

ROT = (0, (0, 0, 1))


def make_channel():
    straight = PlacementSequence.relative([
        ("sphr", (1, 1, 1), (0, 0, 0), ROT),
        ("sphr", (1, 1, 1), (7, 0, 0), ROT),
        ("sphr", (1, 1, 1), (0, 0, 0), ROT),
        ("cube", (1, 1, 1), (3, 0, 0), ROT),
        ("cube", (1, 1, 1), (5, 0, 0), ROT),
        ("cube", (1, 1, 1), (0, 4, 0), ROT),
    ])
    print(f"straight run ends at {final_absolute_position(straight)}")

    bend = arc_xy("cube", (1, 1, 1), 4, 0, 90, 8)
    taper = uniformly_increase(
        PlacementSequence.relative([("cube", (1, 1, 1), (0, 0, 0))] +
                                   [("cube", (1, 1, 1), (0, 1, 0))] * 4),
        (0, 0, 2))

    p0, p1, d0, d1 = (0, 0, 0), (-6, 6, 0), (0, 6, 0), (-6, 0, 0)
    print(f"bezier length is approximately {bezier_length(p0, p1, d0, d1):.3f}")
    curve = bezier_curve("cube", (1, 1, 1), p0, p1, d0, d1,
                         shape_normal=(0, 0, 1), segments=12)

    return splice(straight, bend, taper, curve)


def main():
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--shapes-only', action='store_true')
    parser.add_argument('--reverse', action='store_true')
    parser.add_argument('--out', help='export to this file instead of showing the scene')
    args = parser.parse_args()

    channel = make_channel()
    if args.reverse:
        channel = reverse_order(channel)

    config = BuildConfig(sphere_subdivisions=3, color=(0.2, 0.5, 1.0, 0.8))
    scene = build(channel, shapes_only=args.shapes_only, config=config)
    if args.out:
        scene.export(args.out)
        print(f"wrote {args.out}")
    else:
        scene.show()


if __name__ == '__main__':
    main()
