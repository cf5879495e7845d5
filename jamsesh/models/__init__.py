"""
JamSeshNew jamsesh.models package.

Persisted record types and the storage layer that holds them.

Classes
-------
Item
    The single persisted record, holding one timestamp.
Schema
    Declaration of which model types are persisted.
ModelConfiguration
    Store location for a schema (on disk or in memory).
ModelContainer
    SQLite-backed store for schema entities, with Qt table models for views.
AppContext
    Shared application state handed to the window and its views.
"""

from .container import ContainerError, ModelConfiguration, ModelContainer
from .context import AppContext
from .item import Item
from .schema import Entity, Schema, SchemaError

__all__ = [
    "Item",
    "Schema",
    "Entity",
    "SchemaError",
    "ModelConfiguration",
    "ModelContainer",
    "ContainerError",
    "AppContext",
]
