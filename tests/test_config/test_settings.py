# tests/test_config/test_settings.py
import os
import json
import pytest
from pathlib import Path
from chanvar.config.settings import (
    App,
    CONFIG_DIR,
    HISTORY_FILE,
    VARIABLES_FILE,
    json_validate,
    variables_load,
)


def setup_function():
    for k in list(os.environ):
        if k.upper().startswith("CHV_"):
            del os.environ[k]


def teardown_function():
    for k in list(os.environ):
        if k.upper().startswith("CHV_"):
            del os.environ[k]


def test_app_default_settings():
    app = App()
    assert app.beQuiet is False
    assert app.detailedOutput is False
    assert app.join_split_by == ":|"
    assert app.join_capacity == 100
    assert app.set_array_delim == " "
    assert app.set_array_capacity == 25
    assert app.option_capacity == 20
    assert app.expand_depth == 10


def test_app_env_override():
    os.environ["CHV_BEQUIET"] = "true"
    os.environ["CHV_DETAILEDOUTPUT"] = "true"
    os.environ["CHV_JOIN_SPLIT_BY"] = ","
    os.environ["CHV_JOIN_CAPACITY"] = "50"
    os.environ["CHV_SET_ARRAY_DELIM"] = "|"
    os.environ["CHV_EXPAND_DEPTH"] = "3"

    app = App()
    assert app.beQuiet is True
    assert app.detailedOutput is True
    assert app.join_split_by == ","
    assert app.join_capacity == 50
    assert app.set_array_delim == "|"
    assert app.expand_depth == 3


def test_app_config_case_insensitive():
    os.environ["chv_bequiet"] = "true"
    app = App()
    assert app.beQuiet is True


def test_config_paths():
    assert HISTORY_FILE.parent == CONFIG_DIR
    assert VARIABLES_FILE.parent == CONFIG_DIR
    assert VARIABLES_FILE.name == "variables.json"


@pytest.mark.parametrize(
    "data,expected",
    [
        ({"a": "1", "b": "two"}, True),
        ({}, True),
        ({"a": 1}, False),
        ({"a": ["x"]}, False),
        (["a", "b"], False),
        ("a", False),
    ],
)
def test_json_validate(data, expected):
    assert json_validate(data) is expected


def test_variables_load(tmp_path: Path):
    path = tmp_path / "vars.json"
    path.write_text(json.dumps({"greeting": "hello ${name}", "name": "world"}))
    assert variables_load(path) == {"greeting": "hello ${name}", "name": "world"}


def test_variables_load_missing_file(tmp_path: Path):
    assert variables_load(tmp_path / "absent.json") == {}


def test_variables_load_invalid_json(tmp_path: Path):
    path = tmp_path / "vars.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        variables_load(path)


def test_variables_load_wrong_shape(tmp_path: Path):
    path = tmp_path / "vars.json"
    path.write_text(json.dumps({"count": 3}))
    with pytest.raises(ValueError, match="string values"):
        variables_load(path)
