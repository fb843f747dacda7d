from __future__ import annotations

from typing import Callable, Dict, Hashable, List, Optional, Sequence, Tuple

import numpy as np

from alkane_isomers.connectivity import connectivity_matrix


Signature = Hashable
Labeller = Callable[[Sequence[Sequence[int]], Optional[Sequence[int]]], Signature]


def morgan_rounds(n_atoms: int) -> int:
    """
    Number of propagation rounds for a skeleton of n_atoms carbons.

    After n//3 + 1 rounds every atom value covers at least half of the skeleton.
    """
    return int(n_atoms) // 3 + 1


def _seed_invariants(table: Sequence[Sequence[int]], code: Optional[Sequence[int]]) -> np.ndarray:
    if code is None:
        return np.asarray([len(nei) for nei in table], dtype=np.int64)
    # root keeps its raw value, every other atom gets its parent bond back
    seed = np.asarray([int(v) for v in code], dtype=np.int64)
    seed[1:] += 1
    return seed


def morgan_invariants(table: Sequence[Sequence[int]], code: Optional[Sequence[int]] = None) -> np.ndarray:
    """
    Per-atom Morgan values after morgan_rounds(n) synchronous updates.

    Each round replaces every value by the sum of its neighbours' values from
    the previous round, i.e. v <- A @ v.
    """
    n = int(len(table))
    values = _seed_invariants(table, code)
    if values.shape[0] != n:
        raise ValueError(f"Code length {values.shape[0]} does not match {n} atoms")
    adj = connectivity_matrix(table)
    for _ in range(morgan_rounds(n)):
        values = adj @ values
    return values


def morgan_signature(table: Sequence[Sequence[int]], code: Optional[Sequence[int]] = None) -> Tuple[int, ...]:
    """Morgan values sorted in descending order; independent of atom numbering."""
    values = morgan_invariants(table, code)
    return tuple(int(x) for x in sorted(values.tolist(), reverse=True))


def _tree_centers(adj_list: Sequence[Sequence[int]]) -> List[int]:
    n = len(adj_list)
    deg = [len(adj_list[i]) for i in range(n)]
    leaves = [i for i, d in enumerate(deg) if d <= 1]
    removed = len(leaves)
    while removed < n:
        new_leaves: List[int] = []
        for u in leaves:
            deg[u] = 0
            for v in adj_list[u]:
                if deg[v] > 0:
                    deg[v] -= 1
                    if deg[v] == 1:
                        new_leaves.append(v)
        removed += len(new_leaves)
        leaves = new_leaves
    return leaves if leaves else [0]


def _rooted_ahu_code(root: int, parent: int, adj_list: Sequence[Sequence[int]]) -> Tuple:
    """
    AHU code for a rooted tree as a nested tuple.

    The empty tuple represents a leaf. Internal nodes are tuples of child codes, sorted.
    """
    encs = [_rooted_ahu_code(int(v), root, adj_list) for v in adj_list[root] if int(v) != parent]
    encs.sort()
    return tuple(encs)


def ahu_signature(table: Sequence[Sequence[int]], code: Optional[Sequence[int]] = None) -> Tuple:
    """
    Exact canonical form of an unrooted tree.

    The tree is rooted at its centre (the smaller code wins when there are two
    centres), so isomorphic skeletons and only those share a signature.
    """
    if len(table) == 0:
        return tuple()
    adj_list = [list(nei) for nei in table]
    codes = [_rooted_ahu_code(int(c), -1, adj_list) for c in _tree_centers(adj_list)]
    return min(codes)


def signatures_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """Digit-by-digit comparison of two Morgan signatures."""
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if int(x) != int(y):
            return False
    return True


LABELLERS: Dict[str, Labeller] = {
    "morgan": morgan_signature,
    "ahu": ahu_signature,
}

DEFAULT_LABELLER = "morgan"


def get_labeller(name: str) -> Labeller:
    key = str(name).strip().lower()
    if key not in LABELLERS:
        raise ValueError(f"Unknown labeller {name!r}; choose from {sorted(LABELLERS)}")
    return LABELLERS[key]
