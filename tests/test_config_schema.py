import json

from grade_tracker import DEFAULT_CONFIG, get_default_config, load_config, merge_config


def test_default_config_is_a_copy():
    config = get_default_config()
    config["chart"]["title"] = "Changed"
    assert DEFAULT_CONFIG["chart"]["title"] == "Student Averages"


def test_merge_overrides_per_section():
    config = merge_config({"chart": {"chart_type": "area_chart"}, "log_level": "debug"})

    assert config["chart"]["chart_type"] == "area_chart"
    assert config["chart"]["title"] == "Student Averages"
    assert config["log_level"] == "DEBUG"
    assert len(config["seed_students"]) == 4


def test_merge_replaces_seed_students():
    config = merge_config({"seed_students": []})
    assert config["seed_students"] == []


def test_load_config_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "missing.json") == get_default_config()


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"output_file": "out.xlsx", "view": {"sort": "Name (A-Z)"}}), encoding="utf-8")

    config = load_config(path)

    assert config["output_file"] == "out.xlsx"
    assert config["view"] == {"search": "", "sort": "Name (A-Z)"}
