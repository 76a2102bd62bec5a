## Benchmark the Kruskal implementation against the networkx baseline

import argparse
import time

from typing import Any, Callable, Optional

import networkx as nx

import nx_utils
from graph import Graph
from kruskal import minimum_spanning_tree


def time_runs(fxn: Callable[[], int], nreps: int) -> dict[str, Any]:
    compute_times = []
    weights = []
    for _ in range(nreps):
        start = time.perf_counter()
        weights.append(fxn())
        compute_times.append(time.perf_counter() - start)

    metrics = {
        'compute_times': compute_times,
        'avg_compute_time': sum(compute_times)/len(compute_times),
    }

    if min(weights) == max(weights):
        metrics['weight'] = weights[0]
    else:
        metrics['weights'] = weights

    return metrics

def benchmark_graph(graph: Graph, nreps: int) -> dict[str, dict[str, Any]]:
    nx_graph = nx_utils.to_networkx(graph)

    return {
        'Kruskal': time_runs(lambda: minimum_spanning_tree(graph.node_count, graph.edges).total_weight, nreps),
        'networkx': time_runs(lambda: int(nx.minimum_spanning_tree(nx_graph).size(weight='weight')), nreps),
    }

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        speedups = []
        for (test, metrics) in all_metrics[impl].items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            expected = all_metrics[baseline][test].get('weight')
            if 'weight' not in metrics or metrics['weight'] != expected:
                print('    Inconsistent result on this test')
                continue

            speedup = all_metrics[baseline][test]['avg_compute_time'] / metrics['avg_compute_time']
            speedups.append(speedup)

            print(f'    Compute time = {metrics["avg_compute_time"]:0.4f}s, Weight = {metrics["weight"]}')
            print(f'    Compute speedup={speedup:0.2f}x')
            print()

        if speedups:
            print(f'Average computation time speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print()

def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the Kruskal MST implementation')
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args(argv)

    if args.reps < 1:
        parser.error(f'--reps must be at least 1, got {args.reps}')

    return args

if __name__ == '__main__':
    args = parse_args()

    def create_arb_weight_test(g_fxn: Callable[..., nx.Graph],
                               g_args: tuple[Any, ...]) -> Callable[[], Graph]:
        def inner():
            g = g_fxn(*g_args)
            return nx_utils.from_networkx(g, nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed))

        return inner

    BASELINE = 'networkx'

    tests = {
        '2-degree Circulant n=50000':
            create_arb_weight_test(nx.circulant_graph, (50000, [1, 2])),
        'Connected Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.connected_caveman_graph, (500, 20)),
        'Binomial Graph, p=8e-4 n=20000':
            create_arb_weight_test(nx.fast_gnp_random_graph, (20000, 8e-4, args.seed)),
    }

    all_metrics = {impl: {} for impl in ('Kruskal', BASELINE)}

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        for (impl, metrics) in benchmark_graph(graph, args.reps).items():
            all_metrics[impl][test_name] = metrics
            print(f'  {impl}:', metrics)
        print()

    print_stats(all_metrics, BASELINE)
