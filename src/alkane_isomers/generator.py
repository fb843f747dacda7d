from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from alkane_isomers.digit_code import MAX_BRANCHES, MAX_ROOT_BRANCHES, DigitCode


def is_extendable(code: Sequence[int], p: int) -> bool:
    """
    Can atom p take one more carbon?

    The root may grow up to 4 branches. Any other atom may grow up to 3
    (plus its parent bond) and must stay strictly below the root's degree
    after growing, so the root remains a maximum-degree atom.
    """
    v = int(code[p])
    if p == 0:
        return v < MAX_ROOT_BRANCHES
    return v < MAX_BRANCHES and v + 1 < int(code[0])


def extension_positions(code: Sequence[int]) -> List[int]:
    return [p for p in range(len(code)) if is_extendable(code, p)]


def extend_code(code: Sequence[int], p: int) -> DigitCode:
    """Attach a new terminal carbon as the first branch of atom p."""
    if not is_extendable(code, p):
        raise ValueError(f"Atom {p} of {tuple(code)} cannot take another branch")
    head = tuple(int(x) for x in code[:p])
    tail = tuple(int(x) for x in code[p + 1 :])
    return head + (int(code[p]) + 1, 0) + tail


def iter_candidates(previous: Iterable[Sequence[int]]) -> Iterator[Tuple[int, int, DigitCode]]:
    """
    All raw candidates for the next carbon count.

    Yields (parent_index, position, candidate) in accepted-parent order, then
    ascending position. This order decides which representative survives
    deduplication.
    """
    for idx, code in enumerate(previous):
        for p in range(len(code)):
            if is_extendable(code, p):
                yield idx, p, extend_code(code, p)
