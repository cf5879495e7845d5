"""
Global configuration dictionary and default parameters used across JamSeshNew.

Stores the on-disk store location, main window geometry and the timestamp
display format shared by the model and UI modules.
"""
from pathlib import Path

con_dict = {
    # durable store location
    "store_dir": str(Path.home() / ".jamsesh"),
    "store_filename": "default.store",

    # main window
    "window_title": "JamSeshNew",
    "window_width": 900,
    "window_height": 600,

    # list display
    "timestamp_format": "%Y-%m-%d %H:%M:%S",
}


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    # naive cast
    ty = type(con_dict[key])
    con_dict[key] = ty(value)


def get_all():
    return con_dict


def default_store_path() -> Path:
    """Full path of the durable store built from the current settings."""
    return Path(con_dict["store_dir"]) / con_dict["store_filename"]
