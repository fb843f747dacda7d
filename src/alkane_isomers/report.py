from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from alkane_isomers.digit_code import code_from_text, code_to_text
from alkane_isomers.expected_counts import ALKANE_ISOMER_COUNTS
from alkane_isomers.pipeline import EnumerationResult, IsomerSet

HEADER_CARBONS = "# Carbon atoms in this alkane: "
HEADER_COUNT = "# Amount of isomers found for this alkane: "
SUMMARY_RULE = "____________________________________"


def format_summary_header() -> str:
    return f"n \t#isomers\n{SUMMARY_RULE}"


def format_summary_row(level: IsomerSet) -> str:
    return f"{level.carbons} \t{level.count}"


def format_summary(result: EnumerationResult) -> str:
    """Compact one-line summary, e.g. '1:1, 2:1, 3:1, 4:2'."""
    return result.summary_line()


def isomer_file_name(carbons: int) -> str:
    return f"{int(carbons)}.isomers"


def render_isomer_file(level: IsomerSet) -> str:
    lines = [f"{HEADER_CARBONS}{level.carbons}", f"{HEADER_COUNT}{level.count}"]
    lines.extend(code_to_text(code) for code in level.codes)
    return "\n".join(lines) + "\n"


def write_isomer_file(level: IsomerSet, out_dir: str | Path) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / isomer_file_name(level.carbons)
    path.write_text(render_isomer_file(level), encoding="utf-8")
    return path


def read_isomer_file(path: str | Path) -> IsomerSet:
    """Parse a file written by write_isomer_file back into an IsomerSet."""
    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    if len(lines) < 2 or not lines[0].startswith(HEADER_CARBONS) or not lines[1].startswith(HEADER_COUNT):
        raise ValueError(f"{path}: missing isomer file header")

    carbons = int(lines[0][len(HEADER_CARBONS) :])
    count = int(lines[1][len(HEADER_COUNT) :])
    codes = [code_from_text(s) for s in lines[2:] if s.strip()]

    if len(codes) != count:
        raise ValueError(f"{path}: header announces {count} isomers, found {len(codes)}")
    bad = [code_to_text(c) for c in codes if len(c) != carbons]
    if bad:
        raise ValueError(f"{path}: codes of wrong length for N={carbons}: {bad[:5]}")
    return IsomerSet(carbons=carbons, codes=codes)


def summary_frame(result: EnumerationResult) -> pd.DataFrame:
    rows = []
    for lvl in result.levels:
        rows.append(
            {
                "carbons": int(lvl.carbons),
                "isomers": int(lvl.count),
                "expected": ALKANE_ISOMER_COUNTS.get(int(lvl.carbons)),
                "candidates": int(lvl.n_candidates),
                "elapsed_sec": float(lvl.elapsed_sec),
            }
        )
    return pd.DataFrame(rows, columns=["carbons", "isomers", "expected", "candidates", "elapsed_sec"])


def write_summary_csv(result: EnumerationResult, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    summary_frame(result).to_csv(path, index=False)
    print(f"[ALKANE-REPORT] wrote {path}")
    return path


def try_write_isomer_file(level: IsomerSet, out_dir: str | Path, errors: List[str]) -> Optional[Path]:
    """Write one .isomers file; an OSError is reported and recorded in `errors`."""
    try:
        return write_isomer_file(level, out_dir)
    except OSError as exc:
        msg = f"N={level.carbons}: {exc}"
        errors.append(msg)
        sys.stderr.write(f"[ALKANE-REPORT] failed to write {msg}\n")
        return None


def write_outputs(result: EnumerationResult, out_dir: str | Path) -> Tuple[List[Path], List[str]]:
    """
    Write one .isomers file per carbon count.

    A failing file is reported and skipped; the enumeration result is already
    final, so the remaining files are still written.
    """
    written: List[Path] = []
    errors: List[str] = []
    for lvl in result.levels:
        path = try_write_isomer_file(lvl, out_dir, errors)
        if path is not None:
            written.append(path)
    if written:
        print(f"[ALKANE-REPORT] wrote {len(written)} isomer file(s) to {Path(out_dir)}")
    return written, errors
