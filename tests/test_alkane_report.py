from __future__ import annotations

from pathlib import Path

import pytest

from alkane_isomers.pipeline import IsomerSet, run_enumeration
from alkane_isomers.report import (
    format_summary,
    format_summary_header,
    format_summary_row,
    read_isomer_file,
    render_isomer_file,
    summary_frame,
    write_isomer_file,
    write_outputs,
    write_summary_csv,
)


def test_isomer_file_layout_is_byte_exact(tmp_path: Path) -> None:
    result = run_enumeration(4)
    path = write_isomer_file(result.level(4), tmp_path)
    assert path.name == "4.isomers"
    assert path.read_bytes() == (
        b"# Carbon atoms in this alkane: 4\n"
        b"# Amount of isomers found for this alkane: 2\n"
        b"3000\n"
        b"2100\n"
    )


def test_methane_file() -> None:
    text = render_isomer_file(IsomerSet(carbons=1, codes=[(0,)]))
    assert text.splitlines() == [
        "# Carbon atoms in this alkane: 1",
        "# Amount of isomers found for this alkane: 1",
        "0",
    ]


def test_isomer_file_round_trip(tmp_path: Path) -> None:
    level = run_enumeration(9).level(9)
    back = read_isomer_file(write_isomer_file(level, tmp_path))
    assert back.carbons == 9
    assert back.codes == level.codes


def test_read_rejects_count_mismatch(tmp_path: Path) -> None:
    path = tmp_path / "4.isomers"
    path.write_text(
        "# Carbon atoms in this alkane: 4\n# Amount of isomers found for this alkane: 3\n3000\n2100\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        read_isomer_file(path)


def test_read_rejects_missing_header(tmp_path: Path) -> None:
    path = tmp_path / "4.isomers"
    path.write_text("3000\n2100\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_isomer_file(path)


def test_summary_formats() -> None:
    result = run_enumeration(4)
    assert format_summary(result) == "1:1, 2:1, 3:1, 4:2"
    assert format_summary_header().splitlines()[0] == "n \t#isomers"
    assert format_summary_row(result.level(4)) == "4 \t2"


def test_summary_frame_and_csv(tmp_path: Path) -> None:
    result = run_enumeration(6)
    df = summary_frame(result)
    assert list(df.columns) == ["carbons", "isomers", "expected", "candidates", "elapsed_sec"]
    assert df["isomers"].tolist() == [1, 1, 1, 2, 3, 5]
    assert (df["isomers"] == df["expected"]).all()

    out = write_summary_csv(result, tmp_path / "nested" / "summary.csv")
    assert out.read_text(encoding="utf-8").splitlines()[0] == "carbons,isomers,expected,candidates,elapsed_sec"


def test_write_outputs_reports_io_failure_without_raising(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    result = run_enumeration(3)
    written, errors = write_outputs(result, blocker)
    assert written == []
    assert len(errors) == 3
    assert errors[0].startswith("N=1:")


def test_write_outputs_writes_every_level(tmp_path: Path) -> None:
    result = run_enumeration(5)
    written, errors = write_outputs(result, tmp_path / "isomer")
    assert errors == []
    assert sorted(p.name for p in written) == sorted(f"{n}.isomers" for n in range(1, 6))
