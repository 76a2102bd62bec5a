'''
File format:

<nvertices> [<nedges>]
<v1> <v2> <w>
<v1> <v2> <w>
...

Node ids are 1-based. The binary format is the same sequence of integers
written as 4 byte little-endian values, with the edge count always present.
'''

import os

from dataclasses import dataclass
from typing import Iterable, Union


INT_BYTES = 4


class GraphError(ValueError):
    pass


class InvalidSizeError(GraphError):
    pass


class NodeOutOfRangeError(GraphError):
    pass


class EmptyInputError(GraphError):
    pass


class GraphFormatError(GraphError):
    pass


@dataclass(frozen=True)
class Edge:
    src: int
    dest: int
    weight: int

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise GraphFormatError(f'expected "src dest weight", got {s.strip()!r}')
        return cls(*_to_ints(parts))

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (self.weight, self.src, self.dest)

    def astuple(self) -> tuple[int, int, int]:
        return (self.src, self.dest, self.weight)

    def __repr__(self):
        return f'({self.src}, {self.dest}, {self.weight})'

    __str__ = __repr__


class Graph:
    def __init__(self, node_count: int, edges: Iterable[Edge]) -> None:
        self.node_count = node_count
        self.edges = list(edges)

    def validate(self) -> 'Graph':
        '''
        Check the graph is usable as MST input, raising a GraphError if not.
        '''
        if self.node_count <= 0:
            raise InvalidSizeError(f'node count must be positive, got {self.node_count}')
        if not self.edges:
            raise EmptyInputError('graph has no edges')
        for edge in self.edges:
            check_edge(edge, self.node_count)
        return self

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self.node_count == other.node_count and self.edges == other.edges

    def __repr__(self):
        return f'Graph(node_count={self.node_count}, edges={self.edges})'


def check_edge(edge: Edge, node_count: int) -> None:
    for node in (edge.src, edge.dest):
        if not 1 <= node <= node_count:
            raise NodeOutOfRangeError(f'edge {edge} references node {node} outside [1, {node_count}]')


def _to_ints(tokens: list[str]) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise GraphFormatError(f'non-integer value in {" ".join(tokens)!r}') from None


def parse_graph(lines: Iterable[str]) -> Graph:
    lines = (line for line in lines if line.strip())

    header = next(lines, None)
    if header is None:
        raise GraphFormatError('missing header line')

    counts = _to_ints(header.split())
    if len(counts) not in (1, 2):
        raise GraphFormatError(f'expected "<nvertices> [<nedges>]", got {header.strip()!r}')

    edges = [Edge.from_line(line) for line in lines]

    if len(counts) == 2 and counts[1] != len(edges):
        raise GraphFormatError(f'header declares {counts[1]} edges, found {len(edges)}')

    return Graph(counts[0], edges)


def parse_graph_bin(data: bytes) -> Graph:
    if len(data) % INT_BYTES != 0:
        raise GraphFormatError(f'binary graph length {len(data)} is not a multiple of {INT_BYTES}')

    nums = [int.from_bytes(data[i:i + INT_BYTES], byteorder='little', signed=True)
            for i in range(0, len(data), INT_BYTES)]
    if len(nums) < 2:
        raise GraphFormatError('missing header')

    nvertices, nedges = nums[0], nums[1]
    body = nums[2:]
    if len(body) != 3 * nedges:
        raise GraphFormatError(f'header declares {nedges} edges, found {len(body) / 3:g}')

    edges = [Edge(*body[i:i + 3]) for i in range(0, len(body), 3)]
    return Graph(nvertices, edges)


def read_graph(fname: Union[str, os.PathLike], binary: bool = False) -> Graph:
    if binary:
        with open(fname, 'rb') as f:
            return parse_graph_bin(f.read())

    try:
        with open(fname, 'r', encoding='utf-8') as f:
            return parse_graph(f)
    except UnicodeDecodeError:
        raise GraphFormatError(f'{os.fspath(fname)} is not a text graph file') from None


def write_graph(graph: Graph, fname: Union[str, os.PathLike], binary: bool = False) -> None:
    if binary:
        to_bin = lambda num: int(num).to_bytes(length=INT_BYTES, byteorder='little', signed=True)
        with open(fname, 'wb') as f:
            f.write(to_bin(graph.node_count))
            f.write(to_bin(len(graph.edges)))

            for edge in graph.edges:
                for num in edge.astuple():
                    f.write(to_bin(num))
    else:
        with open(fname, 'w', encoding='utf-8') as f:
            f.write(f'{graph.node_count} {len(graph.edges)}\n')

            for edge in graph.edges:
                f.write(f'{edge.src} {edge.dest} {edge.weight}\n')
