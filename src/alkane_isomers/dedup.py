from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from alkane_isomers.connectivity import extract_connectivity
from alkane_isomers.digit_code import DigitCode
from alkane_isomers.labeller import DEFAULT_LABELLER, Labeller, Signature, get_labeller


class Deduplicator:
    """
    Uniqueness filter for the candidates of one carbon count.

    Holds the signatures of the accepted codes in acceptance order. A candidate
    is checked against this closed prefix only, so the first generated
    representative of every skeleton is the one that is kept.
    """

    def __init__(self, labeller: Labeller | str = DEFAULT_LABELLER) -> None:
        self.labeller: Labeller = get_labeller(labeller) if isinstance(labeller, str) else labeller
        self.signatures: List[Signature] = []
        self._index: Dict[Signature, int] = {}
        self.n_checked = 0
        self.n_rejected = 0

    @classmethod
    def from_accepted(cls, codes: Iterable[Sequence[int]], labeller: Labeller | str = DEFAULT_LABELLER) -> "Deduplicator":
        """Replay an acceptance history without re-filtering it."""
        dedup = cls(labeller)
        for code in codes:
            dedup._record(dedup.signature_of(code))
        return dedup

    def __len__(self) -> int:
        return len(self.signatures)

    def signature_of(self, code: Sequence[int]) -> Signature:
        table = extract_connectivity(code)
        return self.labeller(table, code)

    def find_twin(self, code: Sequence[int]) -> Optional[int]:
        """Position of the accepted code with the same signature, if any."""
        return self._index.get(self.signature_of(code))

    def _record(self, signature: Signature) -> None:
        self._index.setdefault(signature, len(self.signatures))
        self.signatures.append(signature)

    def is_unique(self, candidate: Sequence[int], accepted_so_far: List[DigitCode]) -> bool:
        """
        True iff no accepted code shares the candidate's signature.

        On True the candidate is appended to `accepted_so_far` and its signature
        joins the accepted prefix.
        """
        if len(accepted_so_far) != len(self.signatures):
            raise ValueError(
                f"Acceptance history out of sync: {len(accepted_so_far)} codes, {len(self.signatures)} signatures"
            )
        self.n_checked += 1
        signature = self.signature_of(candidate)
        if signature in self._index:
            self.n_rejected += 1
            return False
        self._record(signature)
        accepted_so_far.append(tuple(int(x) for x in candidate))
        return True
