from __future__ import annotations

import json
from pathlib import Path

import pytest

from alkane_isomers.config import EnumerationConfig, load_config
from alkane_isomers.pipeline import run_from_config


def test_defaults() -> None:
    cfg = EnumerationConfig()
    assert cfg.max_carbons == 20
    assert cfg.labeller == "morgan"
    assert cfg.max_isomers is None
    assert cfg.write_files is False
    assert cfg.out_dir == "isomer"


def test_from_dict_sections_and_flat_keys() -> None:
    cfg = EnumerationConfig.from_dict(
        {
            "enumeration": {"max_carbons": 12, "labeller": "ahu"},
            "output": {"write_files": True, "out_dir": "out"},
            "max_carbons": 7,
        }
    )
    assert cfg.max_carbons == 7
    assert cfg.labeller == "ahu"
    assert cfg.write_files is True
    assert cfg.out_dir == "out"


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValueError):
        EnumerationConfig.from_dict({"max_carbon": 5})


@pytest.mark.parametrize(
    "kwargs",
    [{"max_carbons": 0}, {"labeller": "nauty"}, {"max_isomers": 0}],
)
def test_validate_rejects_bad_values(kwargs) -> None:
    with pytest.raises(ValueError):
        EnumerationConfig(**kwargs).validate()


def test_load_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("enumeration:\n  max_carbons: 6\n  progress: false\noutput:\n  summary_csv: s.csv\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.max_carbons == 6
    assert cfg.progress is False
    assert cfg.summary_csv == "s.csv"


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"max_carbons": 5, "labeller": "ahu", "progress": False}), encoding="utf-8")
    cfg = load_config(path)
    assert run_from_config(cfg).summary_line() == "1:1, 2:1, 3:1, 4:2, 5:3"


def test_load_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_shipped_config_loads() -> None:
    cfg = load_config(Path(__file__).resolve().parents[1] / "configs" / "c20.yaml")
    assert cfg.max_carbons == 20
    assert cfg.verify is True
    assert cfg.write_files is True
