from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from typer.testing import CliRunner

from gymcalc.core.constants import DEFAULT_PLATES
from gymcalc.core.models import Barbell, CalculationInputs, Weight
from gymcalc.core.units import Unit


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "gymcalc" / "config.toml"
    monkeypatch.setenv("GYMCALC_CONFIG_FILE", str(path))
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def olympic_bar() -> Barbell:
    return Barbell(id="olympic-bar-men-s", name="Olympic Bar (Men's)", weight=Weight(20.0, Unit.KG))


@pytest.fixture()
def pound_bar() -> Barbell:
    return Barbell(id="gym-bar", name="Gym Bar", weight=Weight(45.0, Unit.LBS), is_custom=True)


@pytest.fixture()
def standard_plates() -> List[float]:
    return list(DEFAULT_PLATES)


@pytest.fixture()
def make_inputs(olympic_bar: Barbell, standard_plates: List[float]):
    def _make(target: float = 100.0, **overrides) -> CalculationInputs:
        params = {
            "target_weight": target,
            "unit": Unit.KG,
            "barbell": olympic_bar,
            "consider_barbell_weight": True,
            "selected_plates": standard_plates,
        }
        params.update(overrides)
        return CalculationInputs.build(**params)

    return _make


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
