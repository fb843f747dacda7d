from __future__ import annotations

from typing import Dict, Iterable, List, Tuple


# Constitutional isomer counts of C_N H_(2N+2) (OEIS A000602), N = 1..20.
ALKANE_ISOMER_COUNTS: Dict[int, int] = {
    1: 1,
    2: 1,
    3: 1,
    4: 2,
    5: 3,
    6: 5,
    7: 9,
    8: 18,
    9: 35,
    10: 75,
    11: 159,
    12: 355,
    13: 802,
    14: 1858,
    15: 4347,
    16: 10359,
    17: 24894,
    18: 60523,
    19: 148284,
    20: 366319,
}


def expected_isomer_count(n: int) -> int:
    n = int(n)
    if n not in ALKANE_ISOMER_COUNTS:
        raise KeyError(f"Expected alkane isomer count is not defined for N={n}")
    return int(ALKANE_ISOMER_COUNTS[n])


def verify_counts(counts: Iterable[Tuple[int, int]]) -> List[Tuple[int, int, int]]:
    """
    Compare (carbons, found) pairs with the reference table.

    Returns (carbons, found, expected) for every disagreement; carbon counts
    without a reference value are skipped.
    """
    out: List[Tuple[int, int, int]] = []
    for n, found in counts:
        expected = ALKANE_ISOMER_COUNTS.get(int(n))
        if expected is not None and int(found) != int(expected):
            out.append((int(n), int(found), int(expected)))
    return out
