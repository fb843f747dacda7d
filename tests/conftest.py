from __future__ import annotations

import sys
from pathlib import Path


def _ensure_src_on_syspath() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_syspath()
