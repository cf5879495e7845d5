from pathlib import Path

import pytest

from jamsesh import config


def test_set_value_casts_to_existing_type(monkeypatch):
    monkeypatch.setitem(config.con_dict, "window_width", 900)
    config.set_value("window_width", "1200")
    assert config.get_all()["window_width"] == 1200


def test_set_value_unknown_key():
    with pytest.raises(KeyError):
        config.set_value("no such key", 1)


def test_default_store_path_follows_settings(monkeypatch, tmp_path):
    monkeypatch.setitem(config.con_dict, "store_dir", str(tmp_path))
    monkeypatch.setitem(config.con_dict, "store_filename", "default.store")
    config.set_value("store_filename", "other.store")
    assert config.default_store_path() == Path(tmp_path) / "other.store"
