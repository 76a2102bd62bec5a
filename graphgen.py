import argparse
import random

from typing import Optional

import numpy as np

from graph import Edge, Graph, write_graph


def generate_graph(nvertices: int,
                   density: float = 0.5,
                   min_weight: int = 1,
                   max_weight: int = 100,
                   seed: Optional[int] = None) -> Graph:
    if nvertices <= 0:
        raise ValueError(f'nvertices must be positive, got {nvertices}')
    if not 0 <= density <= 1:
        raise ValueError(f'density must be within [0, 1], got {density}')
    if min_weight > max_weight:
        raise ValueError(f'empty weight range [{min_weight}, {max_weight}]')

    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=bool)
    weights = np.zeros((nvertices, nvertices), dtype=np.int64)

    for _ in range(total_edges):
        # keep trying until an unoccupied spot is found
        while True:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if not adj_matrix[i, j]:
                break

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = True
        weights[i, j] = rng.randint(min_weight, max_weight)

    edges = [Edge(int(i) + 1, int(j) + 1, int(weights[i, j]))
             for (i, j) in zip(*np.nonzero(adj_matrix))]
    return Graph(nvertices, edges)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for benchmarking')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if not args.quiet:
        total_edges = int(args.density * args.nvertices * (args.nvertices-1) / 2)
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({total_edges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    try:
        g = generate_graph(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        print()
        print('Graph edges:')
        for edge in g.edges:
            print(' ', edge)

    write_graph(g, args.outfile, binary=args.binary)
