from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional, TypeVar

from tqdm import tqdm

T = TypeVar("T")


def progress_iter(
    iterable: Iterable[T],
    *,
    total: Optional[int] = None,
    desc: str,
    enabled: bool = True,
) -> Iterator[T]:
    """Wrap an iterable with a tqdm progress bar (stderr) when enabled."""
    if not enabled:
        yield from iterable
        return
    yield from tqdm(iterable, total=total, desc=desc, leave=False)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def format_sec(x: float) -> str:
    x = float(x)
    if x < 0:
        x = 0.0
    if x < 60:
        return f"{x:.3f}s"
    m = int(x // 60)
    s = x - 60 * m
    if m < 60:
        return f"{m:d}m {s:.1f}s"
    h = int(m // 60)
    mm = int(m - 60 * h)
    return f"{h:d}h {mm:d}m {s:.0f}s"
