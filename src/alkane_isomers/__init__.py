from __future__ import annotations

from alkane_isomers.connectivity import extract_connectivity
from alkane_isomers.dedup import Deduplicator
from alkane_isomers.digit_code import METHANE_CODE, MalformedDigitCodeError, encode_tree, validate_digit_code
from alkane_isomers.generator import extend_code, is_extendable, iter_candidates
from alkane_isomers.labeller import ahu_signature, get_labeller, morgan_signature
from alkane_isomers.pipeline import CapacityExceededError, EnumerationResult, IsomerSet, iter_levels, run_enumeration

__all__ = [
    "METHANE_CODE",
    "MalformedDigitCodeError",
    "CapacityExceededError",
    "validate_digit_code",
    "encode_tree",
    "extract_connectivity",
    "morgan_signature",
    "ahu_signature",
    "get_labeller",
    "is_extendable",
    "extend_code",
    "iter_candidates",
    "Deduplicator",
    "IsomerSet",
    "EnumerationResult",
    "iter_levels",
    "run_enumeration",
]
