import json
import pytest
from kitchen_scaler.core.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("KITCHEN_SCALER_MAX_YIELD", "KITCHEN_SCALER_DENSITY_PATH", "KITCHEN_SCALER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.json") == Settings()


def test_values_from_file(tmp_path):
    path = write_config(tmp_path, {"max_yield": 50, "density_store_path": "x.json", "log_level": "debug"})
    settings = load_settings(path)
    assert settings.max_yield == 50
    assert settings.density_store_path == "x.json"
    assert settings.log_level == "DEBUG"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = write_config(tmp_path, {"max_yield": 50})
    monkeypatch.setenv("KITCHEN_SCALER_MAX_YIELD", "200")
    monkeypatch.setenv("KITCHEN_SCALER_DENSITY_PATH", "/tmp/d.json")
    settings = load_settings(path)
    assert settings.max_yield == 200
    assert settings.density_store_path == "/tmp/d.json"


def test_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{oops", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_bad_values_fall_back(tmp_path):
    path = write_config(tmp_path, {"max_yield": -5, "log_level": ""})
    settings = load_settings(path)
    assert settings.max_yield == Settings().max_yield
    assert settings.log_level == "INFO"
