"""
Entry point and main application window for JamSeshNew.

This module builds the shared ModelContainer for the Item schema, wraps it
in an AppContext and mounts the ContentView inside the single main window.

Opening the store is done by `shared_model_container()`, which returns a
ContainerResult instead of raising. `main()` treats a failed result as
fatal: it reports the error and exits before any window is created.

Run this module directly via:

    python -m jamsesh.main

or call the top-level `main()` function to launch the GUI.
"""
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PyQt5.QtWidgets import QApplication, QMainWindow

from . import config
from .models import AppContext, ContainerError, Item, ModelConfiguration, ModelContainer, Schema
from .ui import ContentView

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class ContainerResult:
    """Outcome of opening the shared store: a container or the error that prevented it."""

    container: Optional[ModelContainer] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.container is not None

    def unwrap(self) -> ModelContainer:
        if not self.ok:
            raise self.error if self.error is not None else ContainerError("No container")
        return self.container


def shared_model_container(url: Path | str | None = None) -> ContainerResult:
    """
    Build the schema and open the durable store for it.

    Parameters
    ----------
    url : Path | str | None
        Store file. None uses the location from config.

    Returns
    -------
    ContainerResult
        Holds the open container, or the ContainerError/SchemaError raised
        while building it.
    """
    try:
        schema = Schema([
            Item,
        ])
        model_configuration = ModelConfiguration(schema, is_stored_in_memory_only=False, url=url)
        return ContainerResult(container=ModelContainer(schema, [model_configuration]))
    except (ContainerError, ValueError) as e:
        logger.error(f"Could not create ModelContainer: {e}")
        return ContainerResult(error=e)


class MainWindow(QMainWindow):
    """
    Main window that:
      - Holds the AppContext for the session
      - Hosts the ContentView as its central widget
    """
    def __init__(self, cxt: AppContext, parent=None):
        super().__init__(parent)
        self.setWindowTitle(config.con_dict["window_title"])
        self.resize(config.con_dict["window_width"], config.con_dict["window_height"])

        self.cxt = cxt
        self.content_view = ContentView(self, cxt=self.cxt)
        self.setCentralWidget(self.content_view)

        self.statusBar().showMessage(self.cxt.summary)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)

    result = shared_model_container()
    if not result.ok:
        sys.exit(f"Could not create ModelContainer: {result.error}")

    cxt = AppContext(container=result.container)
    win = MainWindow(cxt)
    win.show()
    rc = app.exec_()
    cxt.container.close()
    sys.exit(rc)


if __name__ == "__main__":
    main()
