import networkx as nx
import random

from typing import Any, Callable

from graph import Edge, Graph, write_graph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def from_networkx(g: nx.Graph,
                  decide_weight: Callable[[Any, Any], int],
                  nodename_to_idx: Callable[[Any], int]= lambda x: int(x) + 1) -> Graph:
    edges = []
    for (a, b) in g.edges():
        # Convert edge names to index
        u = nodename_to_idx(a)
        v = nodename_to_idx(b)
        edges.append(Edge(u, v, decide_weight(a, b)))

    return Graph(g.number_of_nodes(), edges)

def to_networkx(graph: Graph) -> nx.MultiGraph:
    # parallel edges are legal input, so keep them all
    g = nx.MultiGraph()
    g.add_nodes_from(range(1, graph.node_count + 1))
    g.add_weighted_edges_from(edge.astuple() for edge in graph.edges)
    return g

def reference_weight(graph: Graph) -> int:
    mst = nx.minimum_spanning_tree(to_networkx(graph), algorithm='kruskal')
    return int(mst.size(weight='weight'))

def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x) + 1) -> None:
    write_graph(from_networkx(g, decide_weight, nodename_to_idx), fname, binary=binary)


if __name__ == '__main__':
    import argparse
    import os

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write networkx generated graphs as test files')
    parser.add_argument('-o', '--outdir', default='testfiles')
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('-b', '--binary', action='store_true')

    args = parser.parse_args()

    os.makedirs(args.outdir, exist_ok=True)
    ext = 'bin' if args.binary else 'txt'

    def hypercube_idx(node: tuple[int, ...]) -> int:
        return sum(node[-i-1]* 2**i for i in range(len(node))) + 1

    graphs = {
        'circulant_n10000': (nx.circulant_graph(10000, [1, 2]), lambda x: int(x) + 1),
        'hypercube_n1024': (nx.hypercube_graph(10), hypercube_idx),
        'conn_caveman_n1000': (nx.connected_caveman_graph(100, 10), lambda x: int(x) + 1),
        'caveman_n1000': (nx.caveman_graph(100, 10), lambda x: int(x) + 1),
    }

    for (name, (g, idx)) in graphs.items():
        fname = os.path.join(args.outdir, f'{name}.{ext}')
        print(f'Writing {fname}...')
        to_output_file(g, arbitrary_weight(1, 500, args.seed), fname,
                       binary=args.binary, nodename_to_idx=idx)
