import networkx as nx
import pytest

from gconverter import bin_to_text, text_to_bin
from graph import read_graph
from graphgen import generate_graph
from mstbench import benchmark_graph, parse_args
from nx_utils import arbitrary_weight, from_networkx, reference_weight, to_networkx, to_output_file


def test_generate_graph_is_simple_and_one_based():
    graph = generate_graph(30, density=0.4, min_weight=5, max_weight=9, seed=3)

    assert graph.node_count == 30
    assert len(graph.edges) == int(0.4 * 30 * 29 / 2)
    pairs = {(e.src, e.dest) for e in graph.edges}
    assert len(pairs) == len(graph.edges)
    assert all(1 <= e.src < e.dest <= 30 for e in graph.edges)
    assert all(5 <= e.weight <= 9 for e in graph.edges)


def test_generate_graph_is_reproducible():
    assert generate_graph(20, seed=11) == generate_graph(20, seed=11)


@pytest.mark.parametrize('args', [(0,), (5, 1.5), (5, 0.5, 10, 1)])
def test_generate_graph_rejects_bad_arguments(args):
    with pytest.raises(ValueError):
        generate_graph(*args)


def test_gconverter_round_trip(tmp_path):
    graph = generate_graph(12, density=0.5, seed=1)
    text_path = tmp_path / 'g.txt'
    text_path.write_text(f'{graph.node_count}\n' + ''.join(f'{e.src} {e.dest} {e.weight}\n' for e in graph.edges))

    text_to_bin(text_path, tmp_path / 'g.bin')
    bin_to_text(tmp_path / 'g.bin', tmp_path / 'back.txt')

    assert read_graph(tmp_path / 'g.bin', binary=True) == graph
    assert read_graph(tmp_path / 'back.txt') == graph


def test_from_networkx_shifts_to_one_based():
    graph = from_networkx(nx.path_graph(4), lambda a, b: a + b)
    assert graph.node_count == 4
    assert [e.astuple() for e in graph.edges] == [(1, 2, 1), (2, 3, 3), (3, 4, 5)]


def test_to_networkx_keeps_parallel_edges():
    graph = from_networkx(nx.cycle_graph(3), arbitrary_weight(1, 9))
    graph.edges.append(graph.edges[0])

    g = to_networkx(graph)
    assert g.number_of_nodes() == 3
    assert g.number_of_edges() == 4


def test_reference_weight_handles_forests():
    g = nx.caveman_graph(3, 4)
    graph = from_networkx(g, lambda a, b: 1)
    assert reference_weight(graph) == 9


def test_to_output_file(tmp_path):
    path = tmp_path / 'circ.bin'
    to_output_file(nx.circulant_graph(10, [1, 2]), arbitrary_weight(1, 50, seed=4), path, binary=True)

    graph = read_graph(path, binary=True)
    assert graph.node_count == 10
    assert len(graph.edges) == 20


def test_benchmark_agrees_with_networkx():
    graph = from_networkx(nx.circulant_graph(200, [1, 2]), arbitrary_weight(1, 100, seed=2))
    metrics = benchmark_graph(graph, 2)

    assert len(metrics['Kruskal']['compute_times']) == 2
    assert metrics['Kruskal']['weight'] == metrics['networkx']['weight']


@pytest.mark.parametrize('reps', ['0', '-2'])
def test_benchmark_rejects_non_positive_reps(reps, capsys):
    with pytest.raises(SystemExit):
        parse_args(['--reps', reps])
    assert '--reps must be at least 1' in capsys.readouterr().err


def test_benchmark_default_args():
    args = parse_args([])
    assert args.reps == 3
    assert (args.min_weight, args.max_weight) == (1, 1000)
