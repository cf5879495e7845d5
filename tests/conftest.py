import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

from jamsesh import config
from jamsesh.models import AppContext, Item, ModelConfiguration, ModelContainer, Schema


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store_dir(tmp_path, monkeypatch):
    """Point the default store location at a fresh temporary directory."""
    d = tmp_path / "store"
    monkeypatch.setitem(config.con_dict, "store_dir", str(d))
    return d


@pytest.fixture
def schema():
    return Schema([Item])


@pytest.fixture
def container(qapp, schema, store_dir):
    c = ModelContainer(schema, [ModelConfiguration(schema)])
    yield c
    c.close()


@pytest.fixture
def cxt(container):
    return AppContext(container=container)
