from __future__ import annotations

import numpy as np
import pytest

from alkane_isomers.connectivity import (
    atom_degrees,
    connectivity_bonds,
    connectivity_from_matrix,
    connectivity_matrix,
    extract_connectivity,
)
from alkane_isomers.digit_code import MalformedDigitCodeError, encode_tree
from alkane_isomers.pipeline import run_enumeration


def test_methane_has_no_bonds() -> None:
    assert extract_connectivity((0,)) == [[]]


def test_n_butane_rooted_at_inner_carbon() -> None:
    table = extract_connectivity((2, 1, 0, 0))
    assert table == [[1, 3], [0, 2], [1], [0]]
    assert connectivity_bonds(table) == [(0, 1), (0, 3), (1, 2)]


def test_foreign_branches_are_skipped() -> None:
    # root with an ethyl branch, a methyl branch and a propyl branch
    code = (3, 1, 0, 0, 1, 1, 0)
    table = extract_connectivity(code)
    assert sorted(table[0]) == [1, 3, 4]
    assert table[1] == [0, 2]
    assert table[4] == [0, 5]
    assert table[5] == [4, 6]


def test_neopentane_star() -> None:
    table = extract_connectivity((4, 0, 0, 0, 0))
    assert table[0] == [1, 2, 3, 4]
    assert all(table[i] == [0] for i in range(1, 5))


def test_atom_degrees_restore_parent_bond() -> None:
    code = (3, 1, 0, 0, 0)
    table = extract_connectivity(code)
    assert atom_degrees(code) == [len(nei) for nei in table]


def test_every_generated_code_round_trips_through_encoding() -> None:
    result = run_enumeration(8)
    for level in result.levels:
        for code in level.codes:
            table = extract_connectivity(code)
            assert len(connectivity_bonds(table)) == len(code) - 1
            assert max(len(nei) for nei in table) <= 4
            assert encode_tree(table, 0) == code


def test_matrix_round_trip() -> None:
    table = extract_connectivity((3, 1, 0, 0, 0))
    adj = connectivity_matrix(table)
    assert adj.dtype == np.int64
    assert np.array_equal(adj, adj.T)
    assert int(adj.sum()) == 2 * 4
    assert [sorted(nei) for nei in connectivity_from_matrix(adj)] == [sorted(nei) for nei in table]


@pytest.mark.parametrize("code", [(1,), (2, 0), (3, 0, 0)])
def test_malformed_codes_are_contract_violations(code) -> None:
    with pytest.raises(MalformedDigitCodeError):
        extract_connectivity(code)
