from __future__ import annotations

import json
from pathlib import Path

from gymcalc.__main__ import app
from gymcalc.core.config import load_config


def test_plates_json_output(runner) -> None:
    result = runner.invoke(app, ["--json", "plates", "100"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["achievable"] is True
    assert payload["barbell_entry"]["label"] == "Olympic Bar (Men's)"
    assert [(p["weight"], p["count"]) for p in payload["plates_per_side"]] == [(35.0, 1), (5.0, 1)]
    assert payload["suggestion"] is None


def test_plates_json_unachievable_includes_suggestion(runner) -> None:
    result = runner.invoke(app, ["--json", "plates", "43"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["achievable"] is False
    assert payload["plates_per_side"] == []
    assert payload["suggestion"]["lower_weight"] == 40.0
    assert payload["suggestion"]["higher_weight"] == 45.0


def test_plates_plain_output(runner) -> None:
    result = runner.invoke(app, ["--plain", "plates", "100"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines == ["bar\tOlympic Bar (Men's)\t20", "plate\t35\t1", "plate\t5\t1"]


def test_plates_plain_unachievable(runner) -> None:
    result = runner.invoke(app, ["--plain", "plates", "43"])
    assert result.exit_code == 0
    assert "achievable\tfalse" in result.stdout
    assert "lower\t40" in result.stdout
    assert "higher\t45" in result.stdout


def test_plates_rich_output(runner) -> None:
    result = runner.invoke(app, ["plates", "100"])
    assert result.exit_code == 0
    assert "Plates per side" in result.stdout
    assert "35 kg" in result.stdout
    assert "Total" in result.stdout


def test_plates_with_pound_equipment(runner) -> None:
    result = runner.invoke(
        app,
        ["--json", "plates", "230lbs", "--no-bar", "--plates", "45,25", "--plate-unit", "lbs"],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["unit"] == "lbs"
    assert payload["barbell_entry"] is None
    assert [(p["weight"], p["count"]) for p in payload["plates_per_side"]] == [(45.0, 2), (25.0, 1)]


def test_plates_rejects_bad_unit(runner) -> None:
    result = runner.invoke(app, ["plates", "100", "--unit", "stone"])
    assert result.exit_code == 2


def test_plates_rejects_unknown_barbell(runner) -> None:
    result = runner.invoke(app, ["plates", "100", "--barbell", "imaginary"])
    assert result.exit_code == 2


def test_check_json(runner) -> None:
    result = runner.invoke(app, ["--json", "check", "100.5"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {
        "target_weight": 100.5,
        "lower_weight": 100.0,
        "higher_weight": 105.0,
        "unit": "kg",
        "is_achievable": False,
    }


def test_check_achievable_message(runner) -> None:
    result = runner.invoke(app, ["check", "60"])
    assert result.exit_code == 0
    assert "can be loaded" in result.stdout


def test_max_json(runner) -> None:
    result = runner.invoke(app, ["--json", "max", "100", "--reps", "5"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["estimated_max"] == 112.5
    assert [row["percentage"] for row in payload["table"]] == [100, 95, 90, 85, 80, 75, 70, 65, 60]


def test_max_plain(runner) -> None:
    result = runner.invoke(app, ["--plain", "max", "100", "--reps", "5"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines[0] == "estimated_max\t112.5"
    assert lines[2] == "100%\t112.5\t1"
    assert len(lines) == 11


def test_max_without_table_for_high_reps(runner) -> None:
    result = runner.invoke(app, ["max", "60", "--reps", "20"])
    assert result.exit_code == 0
    assert "only available for 1-12 reps" in result.stdout


def test_max_rejects_out_of_range_reps(runner) -> None:
    result = runner.invoke(app, ["max", "100", "--reps", "37"])
    assert result.exit_code == 2


def test_convert_json(runner) -> None:
    result = runner.invoke(app, ["--json", "convert", "100kg"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"value": 100.0, "from": "kg", "converted": 220.46, "to": "lbs"}


def test_convert_plain(runner) -> None:
    result = runner.invoke(app, ["--plain", "convert", "225", "--from", "lbs"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "102.06\tkg"


def test_barbells_json(runner) -> None:
    result = runner.invoke(app, ["--json", "barbells"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["selected"] == "olympic-bar-men-s"
    assert len(payload["barbells"]) == 10


def test_config_error_exits_2(runner, tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{nope")
    result = runner.invoke(app, ["--config", str(path), "barbells"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout


def test_settings_add_plate_persists(runner, isolated_config: Path) -> None:
    result = runner.invoke(app, ["--plain", "settings", "add-plate", "1.25"])
    assert result.exit_code == 0
    assert "status\tsuccess" in result.stdout
    cfg = load_config(isolated_config)
    assert cfg["plates"]["available"][0] == 1.25
    assert 1.25 in cfg["plates"]["selected"]


def test_settings_disable_last_plate_fails(runner, write_temp_toml) -> None:
    path = write_temp_toml("config.toml", "[plates]\nselected = [45.0]\n")
    result = runner.invoke(app, ["--config", str(path), "--plain", "settings", "disable-plate", "45"])
    assert result.exit_code == 1
    assert "At least one plate" in result.stdout


def test_settings_custom_barbell_used_for_plates(runner, isolated_config: Path) -> None:
    added = runner.invoke(app, ["settings", "add-barbell", "Home Bar", "18"])
    assert added.exit_code == 0
    assert "home-bar" in added.stdout

    result = runner.invoke(app, ["--json", "plates", "58", "--barbell", "home-bar"])
    payload = json.loads(result.stdout)
    assert payload["barbell"]["name"] == "Home Bar"
    assert [(p["weight"], p["count"]) for p in payload["plates_per_side"]] == [(20.0, 1)]

    removed = runner.invoke(app, ["--plain", "settings", "remove-barbell", "home-bar"])
    assert removed.exit_code == 0
    assert load_config(isolated_config)["barbells"]["custom"] == {}


def test_settings_remove_preset_fails(runner) -> None:
    result = runner.invoke(app, ["--json", "settings", "remove-barbell", "trap-bar"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["status"] == "error"


def test_settings_set_default_changes_unit(runner, isolated_config: Path) -> None:
    result = runner.invoke(app, ["settings", "set-default", "--unit", "lbs", "--barbell", "Trap Bar", "--ignore-bar"])
    assert result.exit_code == 0
    defaults = load_config(isolated_config)["defaults"]
    assert defaults == {"unit": "lbs", "barbell": "trap-bar", "consider_barbell_weight": False, "reps": 1}


def test_settings_show_json(runner) -> None:
    result = runner.invoke(app, ["--json", "settings", "show"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["plates"]["unit"] == "kg"
    assert payload["custom_barbells"] == []


def test_unusable_config_value_exits_2(runner, write_temp_toml) -> None:
    path = write_temp_toml("config.toml", '[plates]\nunit = "stone"\n')
    result = runner.invoke(app, ["--config", str(path), "plates", "100"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout
    assert "plates.unit" in result.stdout


def test_barbell_name_with_newline_survives_save(runner, isolated_config: Path) -> None:
    added = runner.invoke(app, ["--plain", "settings", "add-barbell", "Home\nBar", "18"])
    assert added.exit_code == 0

    result = runner.invoke(app, ["--json", "barbells"])
    assert result.exit_code == 0
    names = [bar["name"] for bar in json.loads(result.stdout)["barbells"]]
    assert "Home\nBar" in names


def test_settings_edit_barbell(runner, isolated_config: Path) -> None:
    runner.invoke(app, ["settings", "add-barbell", "Home Bar", "18"])

    result = runner.invoke(app, ["--plain", "settings", "edit-barbell", "home-bar", "--weight", "45lbs"])
    assert result.exit_code == 0
    assert "status\tsuccess" in result.stdout
    stored = load_config(isolated_config)["barbells"]["custom"]["home-bar"]
    assert stored == {"name": "Home Bar", "weight": 45.0, "unit": "lbs"}

    renamed = runner.invoke(app, ["settings", "edit-barbell", "home-bar", "--name", "Garage Bar"])
    assert renamed.exit_code == 0
    assert "Updated barbell Garage Bar (45 lbs)" in renamed.stdout

    plates = runner.invoke(app, ["--json", "plates", "225lbs", "--barbell", "home-bar", "--plates", "45", "--plate-unit", "lbs"])
    payload = json.loads(plates.stdout)
    assert payload["barbell"]["name"] == "Garage Bar"
    assert [(p["weight"], p["count"]) for p in payload["plates_per_side"]] == [(45.0, 2)]


def test_settings_edit_barbell_rejects_presets_and_empty_edits(runner) -> None:
    preset = runner.invoke(app, ["--json", "settings", "edit-barbell", "trap-bar", "--weight", "30"])
    assert preset.exit_code == 1
    assert "Cannot edit preset" in json.loads(preset.stdout)["message"]

    nothing = runner.invoke(app, ["settings", "edit-barbell", "trap-bar"])
    assert nothing.exit_code == 2


def test_verbose_plates_reports_bar_contribution(runner) -> None:
    with_bar = runner.invoke(app, ["--verbose", "plates", "100"])
    assert with_bar.exit_code == 0
    assert "target=100 kg, bar=20 kg, net per side=40 kg" in with_bar.stdout

    without_bar = runner.invoke(app, ["--verbose", "check", "100", "--no-bar"])
    assert without_bar.exit_code == 0
    assert "bar=0 kg, net per side=50 kg" in without_bar.stdout
