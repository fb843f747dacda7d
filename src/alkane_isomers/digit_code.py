from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


DigitCode = Tuple[int, ...]

MAX_ROOT_BRANCHES = 4
MAX_BRANCHES = 3

# Methane: one atom, no bonds. Base case of the whole enumeration.
METHANE_CODE: DigitCode = (0,)


class MalformedDigitCodeError(ValueError):
    """Raised when a digit code breaks a structural invariant."""


def validate_digit_code(code: Sequence[int]) -> DigitCode:
    """
    Check a digit code and return it as a tuple.

    Invariants:
      - root value in [0, 4], non-root values in [0, 3]
      - non-root value + 1 <= root value (root is a maximum-degree atom)
      - preorder well-formedness: every atom but the first fills one open
        branch slot, and all slots are filled exactly at the last atom
    """
    out = tuple(int(x) for x in code)
    n = len(out)
    if n == 0:
        raise MalformedDigitCodeError("Digit code must contain at least one atom")

    root = out[0]
    if root < 0 or root > MAX_ROOT_BRANCHES:
        raise MalformedDigitCodeError(f"Root value {root} outside [0, {MAX_ROOT_BRANCHES}] in {code_to_text(out)}")

    slots = root
    for pos in range(1, n):
        v = out[pos]
        if v < 0 or v > MAX_BRANCHES:
            raise MalformedDigitCodeError(f"Value {v} at position {pos} outside [0, {MAX_BRANCHES}] in {code_to_text(out)}")
        if v + 1 > root:
            raise MalformedDigitCodeError(f"Atom {pos} has higher degree than the root in {code_to_text(out)}")
        if slots == 0:
            raise MalformedDigitCodeError(f"Atom {pos} is not attached to any branch in {code_to_text(out)}")
        slots += v - 1

    if slots != 0:
        raise MalformedDigitCodeError(f"{slots} unresolved branch(es) in {code_to_text(out)}")
    return out


def is_valid_digit_code(code: Sequence[int]) -> bool:
    try:
        validate_digit_code(code)
    except MalformedDigitCodeError:
        return False
    return True


def code_to_text(code: Sequence[int]) -> str:
    return "".join(str(int(x)) for x in code)


def code_from_text(text: str) -> DigitCode:
    s = text.strip()
    if not s or not s.isdigit():
        raise MalformedDigitCodeError(f"Not a digit code: {text!r}")
    return validate_digit_code([int(ch) for ch in s])


def encode_tree(
    adj_list: Sequence[Sequence[int]],
    root: int,
    order: Optional[Sequence[Sequence[int]]] = None,
) -> DigitCode:
    """
    Encode a carbon skeleton as a digit code.

    Depth-first preorder from `root`; each atom records its number of children.
    `order[u]`, when given, fixes the order in which the children of u are
    visited (entries that are not children of u are ignored). Otherwise
    neighbours are visited in adjacency order.

    The root must be an atom of maximum degree, otherwise the result would not
    be a valid digit code.
    """
    n = int(len(adj_list))
    if n == 0:
        raise MalformedDigitCodeError("Empty skeleton")
    if root < 0 or root >= n:
        raise MalformedDigitCodeError(f"Root {root} out of range for {n} atoms")

    deg = [len(nei) for nei in adj_list]
    if max(deg) > MAX_ROOT_BRANCHES:
        raise MalformedDigitCodeError("Carbon atom with more than 4 bonds")
    if deg[root] != max(deg):
        raise MalformedDigitCodeError(f"Root {root} (degree {deg[root]}) is not a maximum-degree atom")
    if sum(deg) != 2 * (n - 1):
        raise MalformedDigitCodeError("Skeleton is not a tree")

    digits: List[int] = []
    seen = [False] * n
    stack: List[Tuple[int, int]] = [(int(root), -1)]
    while stack:
        u, parent = stack.pop()
        if seen[u]:
            raise MalformedDigitCodeError("Skeleton contains a cycle")
        seen[u] = True
        nbrs = order[u] if order is not None else adj_list[u]
        children = [int(v) for v in nbrs if int(v) != parent and int(v) in adj_list[u]]
        if len(children) != deg[u] - (0 if parent < 0 else 1):
            raise MalformedDigitCodeError(f"Child order for atom {u} does not cover its neighbours")
        digits.append(len(children))
        for v in reversed(children):
            stack.append((v, u))

    if not all(seen):
        raise MalformedDigitCodeError("Skeleton is not connected")
    return validate_digit_code(digits)
