"""
JamSeshNew application package.

A small Qt desktop application that stores timestamped items in a local
SQLite store and lists them in a single window.

Subpackages
-----------
- models
    The Item record, the Schema description, the ModelContainer that
    persists schema entities, and the AppContext shared with the UI.

- ui
    Qt widgets mounted in the main window (ContentView).

Other modules
-------------
- config
    Single in-memory configuration dictionary (con_dict) and helpers to read
    and change settings such as the store location.

- main
    Entry point defining MainWindow, `shared_model_container()` and the
    `main()` function that launches the GUI.

Typical usage
-------------
Most users will start the application via:

    python -m jamsesh.main
"""
