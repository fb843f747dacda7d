from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from alkane_isomers.dedup import Deduplicator
from alkane_isomers.digit_code import METHANE_CODE, DigitCode
from alkane_isomers.generator import iter_candidates
from alkane_isomers.labeller import DEFAULT_LABELLER, Labeller, get_labeller
from alkane_isomers.progress import progress_iter

if TYPE_CHECKING:
    from alkane_isomers.config import EnumerationConfig


class CapacityExceededError(RuntimeError):
    """Raised when a carbon count yields more isomers than the configured bound."""


@dataclass
class IsomerSet:
    carbons: int
    codes: List[DigitCode] = field(default_factory=list)
    elapsed_sec: float = 0.0
    n_candidates: int = 0

    @property
    def count(self) -> int:
        return len(self.codes)


@dataclass
class EnumerationResult:
    levels: List[IsomerSet] = field(default_factory=list)
    labeller: str = DEFAULT_LABELLER

    @property
    def max_carbons(self) -> int:
        return self.levels[-1].carbons if self.levels else 0

    def level(self, carbons: int) -> IsomerSet:
        for lvl in self.levels:
            if lvl.carbons == int(carbons):
                return lvl
        raise KeyError(f"No isomer set for N={carbons}")

    def counts(self) -> List[Tuple[int, int]]:
        return [(lvl.carbons, lvl.count) for lvl in self.levels]

    def summary_line(self) -> str:
        return ", ".join(f"{n}:{c}" for n, c in self.counts())


def base_level() -> IsomerSet:
    """Methane; accepted without generation or uniqueness check."""
    return IsomerSet(carbons=1, codes=[METHANE_CODE])


def generate_level(
    previous: IsomerSet,
    dedup: Deduplicator,
    *,
    max_isomers: Optional[int] = None,
    progress: bool = False,
) -> IsomerSet:
    """
    Accepted codes for previous.carbons + 1.

    Only `previous` is read. `dedup` must be fresh for the new carbon count;
    it owns the signatures of the codes accepted so far.
    """
    carbons = previous.carbons + 1
    out = IsomerSet(carbons=carbons)
    t0 = time.perf_counter()

    candidates = iter_candidates(previous.codes)
    for _, _, candidate in progress_iter(candidates, desc=f"[ALKANE-ENUM:N{carbons}]", enabled=progress):
        out.n_candidates += 1
        if not dedup.is_unique(candidate, out.codes):
            continue
        if max_isomers is not None and out.count > int(max_isomers):
            raise CapacityExceededError(
                f"N={carbons}: more than {max_isomers} isomers; raise max_isomers or drop the bound"
            )

    out.elapsed_sec = time.perf_counter() - t0
    return out


def iter_levels(
    max_carbons: int,
    *,
    labeller: Labeller | str = DEFAULT_LABELLER,
    max_isomers: Optional[int] = None,
    progress: bool = False,
) -> Iterator[IsomerSet]:
    """Yield the isomer set of every carbon count 1..max_carbons, in order."""
    max_carbons = int(max_carbons)
    if max_carbons < 1:
        raise ValueError(f"max_carbons must be >= 1, got {max_carbons}")
    if max_isomers is not None and int(max_isomers) < 1:
        raise ValueError(f"max_isomers must be positive, got {max_isomers}")
    if isinstance(labeller, str):
        labeller = get_labeller(labeller)

    current = base_level()
    yield current
    for _ in range(2, max_carbons + 1):
        current = generate_level(current, Deduplicator(labeller), max_isomers=max_isomers, progress=progress)
        yield current


def run_enumeration(
    max_carbons: int,
    *,
    labeller: Labeller | str = DEFAULT_LABELLER,
    max_isomers: Optional[int] = None,
    progress: bool = False,
) -> EnumerationResult:
    levels = list(iter_levels(max_carbons, labeller=labeller, max_isomers=max_isomers, progress=progress))
    name = labeller if isinstance(labeller, str) else getattr(labeller, "__name__", "custom")
    return EnumerationResult(levels=levels, labeller=str(name))


def run_from_config(cfg: "EnumerationConfig") -> EnumerationResult:
    cfg.validate()
    return run_enumeration(
        cfg.max_carbons,
        labeller=cfg.labeller,
        max_isomers=cfg.max_isomers,
        progress=cfg.progress,
    )
