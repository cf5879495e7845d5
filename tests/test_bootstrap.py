from datetime import datetime

import pytest

from jamsesh import config
from jamsesh import main as app_main
from jamsesh.main import ContainerResult, MainWindow, shared_model_container
from jamsesh.models import AppContext, ContainerError, Item
from jamsesh.ui import ContentView


def test_shared_model_container_succeeds(qapp, store_dir):
    result = shared_model_container()
    try:
        assert result.ok
        assert result.error is None
        assert result.unwrap() is result.container
        assert result.container.is_open()
        assert result.container.location == str(store_dir / config.con_dict["store_filename"])
    finally:
        result.container.close()


def test_shared_model_container_reports_failure(qapp, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    result = shared_model_container(url=blocker / "default.store")

    assert not result.ok
    assert result.container is None
    assert isinstance(result.error, ContainerError)
    with pytest.raises(ContainerError):
        result.unwrap()


def test_empty_result_unwrap():
    with pytest.raises(ContainerError):
        ContainerResult().unwrap()


def test_main_exits_before_mounting_window(qapp, tmp_path, monkeypatch):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    monkeypatch.setitem(config.con_dict, "store_dir", str(blocker))

    mounted = []
    monkeypatch.setattr(app_main, "MainWindow", lambda *a, **k: mounted.append(a))

    with pytest.raises(SystemExit) as exc:
        app_main.main([])

    assert "Could not create ModelContainer" in str(exc.value.code)
    assert mounted == []


def test_main_shows_one_window(qapp, store_dir, monkeypatch):
    windows = []

    class RecordingWindow(MainWindow):
        def __init__(self, cxt, parent=None):
            super().__init__(cxt, parent)
            windows.append(self)

    monkeypatch.setattr(app_main, "MainWindow", RecordingWindow)
    monkeypatch.setattr(qapp, "exec_", lambda: 0, raising=False)

    with pytest.raises(SystemExit) as exc:
        app_main.main([])

    assert exc.value.code == 0
    assert len(windows) == 1
    assert windows[0].isVisible()
    # store is closed once the event loop returns
    assert not windows[0].cxt.container.is_open()
    windows[0].close()


def test_end_to_end_clean_start(qapp, store_dir):
    result = shared_model_container()
    assert result.ok
    cxt = AppContext(container=result.container)
    win = MainWindow(cxt)
    try:
        win.show()
        assert win.windowTitle() == config.con_dict["window_title"]
        assert isinstance(win.centralWidget(), ContentView)
        assert win.content_view.cxt is cxt
        assert win.content_view.row_count() == 0
        assert cxt.container.count(Item) == 0

        item = win.content_view.add_item()
        assert item is not None
        assert win.content_view.row_count() == 1
        assert isinstance(cxt.container.fetch(Item)[0].timestamp, datetime)
    finally:
        win.close()
        cxt.container.close()
