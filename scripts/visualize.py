#!/usr/bin/env python3
"""
Plot a polygon triangulation.

    python scripts/visualize.py polygon.poly -o polygon.png
    python scripts/visualize.py --family star --n 20 -o star.png

Draws the triangles, the polygon outline and the monotone decomposition
diagonals; with --loops every monotone piece gets its own colour.
"""

import argparse
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from monotri import PolygonTriangulator, polylines
from monotri.polyio import read_poly

plt.rcParams['font.size'] = 10
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['figure.figsize'] = (8, 8)

FAMILIES = {
    'convex': lambda n: polylines.convex_polygon(n),
    'star': lambda n: polylines.star_polygon(max(3, n // 2)),
    'comb': lambda n: polylines.comb_polygon(max(1, n)),
    'random': lambda n: polylines.random_polygon(n),
    'lshape': lambda n: polylines.l_shape(),
    'paper': lambda n: polylines.paper_example(),
}


def plot_triangulation(tri, ax, color='#377eb8', loops=False):
    """Plot a finished PolygonTriangulator run on ax."""
    vertices = np.array(tri.pts)
    triangles = np.array(tri.indices).reshape(-1, 3)

    if loops:
        cmap = plt.get_cmap('tab10')
        for i, loop in enumerate(tri.loops):
            ax.add_patch(MplPolygon(vertices[loop], closed=True, alpha=0.25,
                                    facecolor=cmap(i % 10), edgecolor='none'))

    patches = [MplPolygon(vertices[list(t)], closed=True) for t in triangles]
    p = PatchCollection(patches, alpha=0.0 if loops else 0.4, facecolor=color,
                        edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)

    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)

    for a, b in tri.diagonals:
        ax.plot(vertices[[a, b], 0], vertices[[a, b], 1], 'r--', linewidth=1.2)

    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=12, zorder=5)
    ax.set_aspect('equal')
    ax.set_title(f'n={tri.n}, diagonals={len(tri.diagonals)}, '
                 f'pieces={len(tri.loops)}, triangles={len(triangles)}')


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('input', nargs='?', type=Path, help='.poly file to triangulate')
    parser.add_argument('--family', choices=sorted(FAMILIES), help='Generate the polygon instead of reading it')
    parser.add_argument('--n', type=int, default=20)
    parser.add_argument('--axis', type=int, choices=(0, 1), default=0)
    parser.add_argument('--loops', action='store_true', help='Colour the monotone pieces')
    parser.add_argument('-o', '--output', type=Path, default=None, help='Image path (default: show window)')
    args = parser.parse_args()

    if args.input is not None:
        pts = read_poly(args.input)
        name = args.input.stem
    elif args.family is not None:
        pts = FAMILIES[args.family](args.n)
        name = f'{args.family}_{len(pts)}'
    else:
        parser.error('either a .poly file or --family is required')

    tri = PolygonTriangulator(pts, axis=args.axis)
    tri.triangulate()

    fig, ax = plt.subplots()
    plot_triangulation(tri, ax, loops=args.loops)
    fig.suptitle(name)
    plt.tight_layout()

    if args.output is None:
        plt.show()
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(args.output, dpi=150, bbox_inches='tight')
        print(f'Saved {args.output}')
    plt.close(fig)
    return 0


if __name__ == '__main__':
    sys.exit(main())
