from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from alkane_isomers.labeller import LABELLERS

_SECTIONS = ("enumeration", "output")


@dataclass
class EnumerationConfig:
    max_carbons: int = 20
    labeller: str = "morgan"
    max_isomers: Optional[int] = None
    progress: bool = True
    verify: bool = False

    write_files: bool = False
    out_dir: str = "isomer"
    summary_csv: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnumerationConfig":
        """
        Build a config from a mapping with optional sections:
        - enumeration: {max_carbons, labeller, max_isomers, progress, verify}
        - output: {write_files, out_dir, summary_csv}
        Flat keys take precedence over sections.
        """
        merged: Dict[str, Any] = {}
        for section in _SECTIONS:
            section_dict = data.get(section, {})
            if isinstance(section_dict, Mapping):
                merged.update(section_dict)
        for key, value in data.items():
            if key not in _SECTIONS:
                merged[key] = value

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        return cls(**merged)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> "EnumerationConfig":
        if int(self.max_carbons) < 1:
            raise ValueError(f"max_carbons must be >= 1, got {self.max_carbons}")
        if str(self.labeller).lower() not in LABELLERS:
            raise ValueError(f"Unknown labeller {self.labeller!r}; choose from {sorted(LABELLERS)}")
        if self.max_isomers is not None and int(self.max_isomers) < 1:
            raise ValueError(f"max_isomers must be positive, got {self.max_isomers}")
        return self


def load_config(path: str | Path) -> EnumerationConfig:
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    if not isinstance(data, Mapping):
        raise ValueError(f"Config {path} must contain a top-level mapping")

    return EnumerationConfig.from_dict(data).validate()
