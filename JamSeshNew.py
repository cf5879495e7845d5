# -*- coding: utf-8 -*-
"""
Standalone launcher for the JamSeshNew application.

Lets end-users start the GUI simply by running:

    python JamSeshNew.py

It performs no application logic itself and delegates the full startup
sequence to `jamsesh.main.main()`.
"""

# JamSeshNew.py
from jamsesh.main import main

if __name__ == "__main__":
    main()
