import argparse
import heapq
import sys
import time

from typing import Iterable, Iterator, Optional

from disjoint_set import DisjointSet
from graph import Edge, GraphError, check_edge, read_graph


class EdgeQueue:
    '''
    Min-heap of edges ordered by weight, then by (src, dest).

    The insertion counter keeps equal keys from ever comparing Edge objects.
    '''

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        self.heap = [(edge.sort_key, i, edge) for (i, edge) in enumerate(edges)]
        heapq.heapify(self.heap)
        self.pushed = len(self.heap)

    def push(self, edge: Edge) -> None:
        heapq.heappush(self.heap, (edge.sort_key, self.pushed, edge))
        self.pushed += 1

    def pop(self) -> Edge:
        if not self.heap:
            raise IndexError('pop from an empty EdgeQueue')
        return heapq.heappop(self.heap)[2]

    def __len__(self) -> int:
        return len(self.heap)

    def __iter__(self) -> Iterator[Edge]:
        '''Drain the queue in ascending order.'''
        while self.heap:
            yield self.pop()


class MSTResult:
    def __init__(self, node_count: int, edges: list[Edge], total_weight: int) -> None:
        self.node_count = node_count
        self.edges = edges
        self.total_weight = total_weight

    @property
    def components(self) -> int:
        return self.node_count - len(self.edges)

    @property
    def is_spanning_tree(self) -> bool:
        return self.components == 1

    def __repr__(self):
        return f'MSTResult(total_weight={self.total_weight}, edges={self.edges})'


def iter_mst_edges(node_count: int, edges: Iterable[Edge]) -> Iterator[Edge]:
    '''
    Run Kruskal's algorithm, yielding each accepted edge as it is chosen.

    The size and every edge are checked when this is called, before any
    edge is yielded. For a disconnected graph the yielded edges form a
    minimum spanning forest.
    '''
    uf = DisjointSet(node_count)

    edges = list(edges)
    for edge in edges:
        check_edge(edge, node_count)

    def select() -> Iterator[Edge]:
        for edge in EdgeQueue(edges):
            root_src = uf.find(edge.src)
            root_dest = uf.find(edge.dest)

            if root_src != root_dest:
                uf.union(root_src, root_dest)
                yield edge

    return select()


def minimum_spanning_tree(node_count: int, edges: Iterable[Edge]) -> MSTResult:
    mst = list(iter_mst_edges(node_count, edges))
    return MSTResult(node_count, mst, sum(e.weight for e in mst))


def parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='kruskal',
                                     description='Compute a minimum weight spanning tree with Kruskal\'s algorithm')
    parser.add_argument('graph', nargs='?', default='graph.txt',
                        help='the graph file to read (default: graph.txt)')
    parser.add_argument('-b', '--binary', action='store_true',
                        help='read the graph in the 4 byte little-endian binary format')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='also report read and computation times')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='only print the total weight')
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    if not args.graph.strip():
        print('File path is empty. Provide a valid file path.', file=sys.stderr)
        return 1

    start = time.perf_counter()
    try:
        graph = read_graph(args.graph, binary=args.binary).validate()
    except OSError as e:
        print(f'Error reading the file: {e}', file=sys.stderr)
        return 1
    except GraphError as e:
        print(f'Invalid graph data: {e}', file=sys.stderr)
        return 1
    read_time = time.perf_counter() - start

    start = time.perf_counter()
    result = minimum_spanning_tree(graph.node_count, graph.edges)
    compute_time = time.perf_counter() - start

    if not args.quiet:
        for edge in result.edges:
            print(edge.src, edge.dest, edge.weight)

    if args.verbose:
        print(f'File read time (sec): {read_time:0.6f}')
        print(f'Computation time (sec): {compute_time:0.6f}')
        print(f'Components: {result.components}')

    print(f'Total Weight of Minimum Weight Spanning Tree: {result.total_weight}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
