from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_xlsx_converter.settings import ConverterSettings


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(payload, name: str = "data.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings(tmp_path: Path) -> ConverterSettings:
    return ConverterSettings(output_dir=str(tmp_path / "out"))
