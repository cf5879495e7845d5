"""
UI module for JamSeshNew.

Contains the Qt widgets mounted in the main window:

- ContentView:
    Root view listing stored items, with actions to add a new timestamped
    item and delete selected ones. Reads the shared ModelContainer from the
    AppContext it is given.
"""

from .content_view import ContentView

__all__ = [
    "ContentView",
]
