from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from alkane_isomers.digit_code import MalformedDigitCodeError, code_to_text


Edge = Tuple[int, int]
Connectivity = List[List[int]]


def _bond(table: Connectivity, a: int, b: int) -> None:
    table[a].append(b)
    table[b].append(a)


def extract_connectivity(code: Sequence[int]) -> Connectivity:
    """
    Rebuild the bond table of a digit code.

    Each atom only looks forward: its first branch starts at the very next
    position, every further branch starts after the previous sibling branch has
    been closed. Branches of other atoms met on the way are "foreign": while any
    are open the current position cannot be a sibling. Backward bonds come for
    free since every bond is written to both atoms.

    Neighbour lists come out as [parent, children in increasing position].
    """
    d = [int(x) for x in code]
    n = len(d)
    table: Connectivity = [[] for _ in range(n)]

    for p in range(n):
        remaining = d[p]
        if remaining == 0:
            continue
        if p + 1 >= n:
            raise MalformedDigitCodeError(f"Atom {p} has branches past the end of {code_to_text(d)}")

        _bond(table, p, p + 1)
        remaining -= 1
        foreign = d[p + 1]

        q = p + 2
        while remaining > 0 and q < n:
            if foreign == 0:
                _bond(table, p, q)
                remaining -= 1
                foreign += d[q]
            else:
                foreign += d[q] - 1
            q += 1

        if remaining > 0:
            raise MalformedDigitCodeError(f"Atom {p} has {remaining} unresolved branch(es) in {code_to_text(d)}")

    n_bonds = sum(len(nei) for nei in table) // 2
    if n_bonds != max(0, n - 1):
        raise MalformedDigitCodeError(f"Expected {n - 1} bonds, found {n_bonds} in {code_to_text(d)}")
    return table


def atom_degrees(code: Sequence[int]) -> List[int]:
    """True bond count per atom: the root value as is, non-roots +1 for the parent bond."""
    return [int(v) if i == 0 else int(v) + 1 for i, v in enumerate(code)]


def connectivity_bonds(table: Sequence[Sequence[int]]) -> List[Edge]:
    edges: List[Edge] = []
    for u, nbrs in enumerate(table):
        for v in nbrs:
            if u < int(v):
                edges.append((u, int(v)))
    edges.sort()
    return edges


def connectivity_matrix(table: Sequence[Sequence[int]]) -> np.ndarray:
    n = int(len(table))
    adj = np.zeros((n, n), dtype=np.int64)
    for u, v in connectivity_bonds(table):
        adj[u, v] = 1
        adj[v, u] = 1
    return adj


def connectivity_from_matrix(adj: np.ndarray) -> Connectivity:
    if adj.ndim != 2 or adj.shape[0] != adj.shape[1]:
        raise ValueError("adj must be square")
    n = int(adj.shape[0])
    return [[int(x) for x in np.flatnonzero(adj[i] > 0).tolist()] for i in range(n)]
