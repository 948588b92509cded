import json

import pytest

from utils import app_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config, "CONFIG_DIR", tmp_path)
    monkeypatch.setattr(app_config, "CONFIG_FILE", tmp_path / "config.json")


def test_missing_config_is_empty():
    assert app_config.load_config() == {}
    assert app_config.get_density() == 1.0
    assert app_config.get_option("platform_version") == 34


def test_corrupt_config_is_empty(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    assert app_config.load_config() == {}


def test_save_and_read_back(tmp_path):
    app_config.save_config({"density": 2.0})
    app_config.save_config({**app_config.load_config(), "db_folder": "/data/widget"})
    data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert data == {"density": 2.0, "db_folder": "/data/widget"}
    assert app_config.get_density() == 2.0
    assert app_config.get_db_folder() == "/data/widget"


@pytest.mark.parametrize("bad", ["fast", -1, 0, None])
def test_bad_density_falls_back(bad):
    assert app_config.get_density({"density": bad}) == 1.0
