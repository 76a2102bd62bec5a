from graph import InvalidSizeError, NodeOutOfRangeError


class DisjointSet:
    '''
    Union-find over the node ids 1..n, with path compression and union by rank.

    Index 0 of `parent` and `rank` is unused so that node ids index directly.
    '''

    def __init__(self, n_verts: int) -> None:
        if n_verts <= 0:
            raise InvalidSizeError(f'disjoint set size must be positive, got {n_verts}')

        self.parent = [i for i in range(n_verts + 1)]
        self.rank = [0] * (n_verts + 1)
        self.count = n_verts

    def __len__(self) -> int:
        return len(self.parent) - 1

    def _check(self, index: int) -> None:
        if not 1 <= index < len(self.parent):
            raise NodeOutOfRangeError(f'node {index} outside [1, {len(self)}]')

    def find(self, index: int) -> int:
        self._check(index)

        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # relink the whole path directly to the root
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]

        return root

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[i] > self.rank[j]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1

        self.count -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)
