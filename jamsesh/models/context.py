"""
Holds the state shared by the main window and its views.

The ModelContainer is created once by the bootstrap and passed in here;
views read it from the context instead of a module-level global.
"""

from dataclasses import dataclass
from typing import Optional

from .container import ModelContainer


@dataclass
class AppContext:
    """
    Lightweight container for the application's shared state.

    Attributes
    ----------
    container : ModelContainer | None
        The store opened at start-up.
    """

    container: Optional[ModelContainer] = None

    @property
    def has_container(self) -> bool:
        return self.container is not None and self.container.is_open()

    @property
    def location(self) -> str | None:
        return self.container.location if self.container is not None else None

    @property
    def summary(self) -> str:
        """Compact human-readable summary for the status bar."""
        if not self.has_container:
            return "(no store)"
        return f"store: {self.location}"
