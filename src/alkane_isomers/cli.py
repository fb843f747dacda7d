from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from alkane_isomers.config import EnumerationConfig, load_config
from alkane_isomers.expected_counts import verify_counts
from alkane_isomers.labeller import LABELLERS
from alkane_isomers.pipeline import EnumerationResult, iter_levels
from alkane_isomers.progress import format_sec, now_iso
from alkane_isomers.report import (
    format_summary_header,
    format_summary_row,
    try_write_isomer_file,
    write_summary_csv,
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Enumerate alkane constitutional isomers C1..CN (digit codes + Morgan signatures)."
    )
    ap.add_argument("--config", default="", help="YAML/JSON config; explicit flags override it.")
    ap.add_argument("--max_carbons", type=int, default=None, help="Largest carbon count (default: 20).")
    ap.add_argument(
        "--labeller",
        choices=sorted(LABELLERS),
        default=None,
        help="Signature used for deduplication: morgan (bounded Morgan values) or ahu (exact tree code).",
    )
    ap.add_argument("--max_isomers", type=int, default=None, help="Abort when one carbon count exceeds this many isomers.")
    ap.add_argument(
        "--write_files",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write <out_dir>/<N>.isomers with every accepted digit code.",
    )
    ap.add_argument("--out_dir", default=None, help="Directory for .isomers files (default: isomer).")
    ap.add_argument("--summary_csv", default=None, help="Optional CSV with per-level counts and timings.")
    ap.add_argument("--progress", action=argparse.BooleanOptionalAction, default=None, help="Show tqdm progress bars.")
    ap.add_argument("--verify", action="store_true", help="Compare counts with OEIS A000602; exit 1 on mismatch.")
    return ap.parse_args(argv)


def _build_config(args: argparse.Namespace) -> EnumerationConfig:
    cfg = load_config(args.config) if args.config else EnumerationConfig()
    for key in ("max_carbons", "labeller", "max_isomers", "write_files", "out_dir", "summary_csv", "progress"):
        value = getattr(args, key)
        if value is not None:
            setattr(cfg, key, value)
    if args.verify:
        cfg.verify = True
    return cfg.validate()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        cfg = _build_config(args)
    except ValueError as exc:
        raise SystemExit(f"[ALKANE-ENUM] invalid configuration: {exc}")

    start_ts = now_iso()
    t0 = time.perf_counter()
    sys.stderr.write(f"[ALKANE-ENUM] N=1..{cfg.max_carbons} labeller={cfg.labeller} start={start_ts}\n")

    result = EnumerationResult(labeller=str(cfg.labeller))
    io_errors: list[str] = []
    print(format_summary_header(), flush=True)
    for level in iter_levels(
        cfg.max_carbons,
        labeller=cfg.labeller,
        max_isomers=cfg.max_isomers,
        progress=bool(cfg.progress),
    ):
        result.levels.append(level)
        print(format_summary_row(level), flush=True)
        if cfg.write_files:
            try_write_isomer_file(level, cfg.out_dir, io_errors)

    elapsed = time.perf_counter() - t0
    sys.stderr.write(f"[ALKANE-ENUM] done in {format_sec(elapsed)} ({result.summary_line()})\n")

    if cfg.write_files and not io_errors:
        sys.stderr.write(f"[ALKANE-REPORT] wrote {len(result.levels)} isomer file(s) to {Path(cfg.out_dir)}\n")
    if cfg.summary_csv:
        try:
            write_summary_csv(result, cfg.summary_csv)
        except OSError as exc:
            io_errors.append(f"summary: {exc}")
            sys.stderr.write(f"[ALKANE-REPORT] failed to write summary: {exc}\n")

    if cfg.verify:
        mismatches = verify_counts(result.counts())
        for n, found, expected in mismatches:
            sys.stderr.write(f"[ALKANE-VERIFY] N={n}: found {found}, expected {expected}\n")
        if mismatches:
            return 1
        sys.stderr.write("[ALKANE-VERIFY] all counts match A000602\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
