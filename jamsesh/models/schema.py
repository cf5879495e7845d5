"""
Schema description for the persisted model types.

A Schema enumerates which dataclass models the ModelContainer stores. Each
model becomes an Entity: one SQLite table whose columns are the model's
constructor fields, plus an implicit integer primary key backing the
instance's ``persistent_id``.
"""
from __future__ import annotations

import dataclasses
import logging
import typing
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)

ID_COLUMN = "id"


class SchemaError(ValueError):
    """Raised when a model cannot be described or is not part of a schema."""


def _encode_datetime(value):
    if not isinstance(value, datetime):
        raise SchemaError(f"Expected a datetime value, got {type(value).__name__}")
    return value.isoformat()


# python type -> (sqlite type, encode, decode)
_TYPE_MAP: dict[type, tuple[str, Callable[[Any], Any], Callable[[Any], Any]]] = {
    datetime: ("TEXT", _encode_datetime, datetime.fromisoformat),
    str: ("TEXT", str, str),
    bool: ("INTEGER", int, bool),
    int: ("INTEGER", int, int),
    float: ("REAL", float, float),
}


@dataclass(frozen=True)
class Column:
    name: str
    py_type: type
    sql_type: str

    def encode(self, value):
        return _TYPE_MAP[self.py_type][1](value)

    def decode(self, value):
        return _TYPE_MAP[self.py_type][2](value)


@dataclass(frozen=True)
class Entity:
    """
    Storage description of one model type.

    Attributes
    ----------
    name : str
        Entity name, the model's class name.
    model : type
        The dataclass being persisted.
    table : str
        SQLite table name.
    columns : tuple[Column, ...]
        Stored attributes, in constructor order. Excludes the id column.
    """

    name: str
    model: type
    table: str
    columns: tuple

    @classmethod
    def from_model(cls, model: type) -> "Entity":
        if not dataclasses.is_dataclass(model):
            raise SchemaError(f"{model!r} is not a dataclass model")
        hints = typing.get_type_hints(model)
        columns = []
        for f in dataclasses.fields(model):
            if not f.init:
                continue
            py_type = hints.get(f.name)
            if py_type not in _TYPE_MAP:
                raise SchemaError(
                    f"{model.__name__}.{f.name}: unsupported attribute type {py_type!r}")
            columns.append(Column(f.name, py_type, _TYPE_MAP[py_type][0]))
        if not columns:
            raise SchemaError(f"{model.__name__} declares no stored attributes")
        return cls(model.__name__, model, model.__name__.lower(), tuple(columns))

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def create_sql(self) -> str:
        cols = [f"{ID_COLUMN} INTEGER PRIMARY KEY AUTOINCREMENT"]
        cols += [f"{c.name} {c.sql_type} NOT NULL" for c in self.columns]
        return f"CREATE TABLE IF NOT EXISTS {self.table} ({', '.join(cols)})"

    def encode(self, instance) -> list:
        """Column values for *instance*, in column order."""
        return [c.encode(getattr(instance, c.name)) for c in self.columns]

    def decode(self, values: Iterable, persistent_id: int | None = None):
        """Build a model instance from stored column values."""
        kwargs = {c.name: c.decode(v) for c, v in zip(self.columns, values)}
        obj = self.model(**kwargs)
        obj.persistent_id = persistent_id
        return obj


class Schema:
    """Declaration of the entity types persisted by a ModelContainer."""

    def __init__(self, models: Iterable[type]):
        self.entities: list[Entity] = []
        for model in models:
            if any(e.model is model for e in self.entities):
                continue
            self.entities.append(Entity.from_model(model))
        logger.debug(f"Schema built for {[e.name for e in self.entities]}")

    def __iter__(self):
        return iter(self.entities)

    def __len__(self):
        return len(self.entities)

    def __contains__(self, model) -> bool:
        return any(e.model is model for e in self.entities)

    def entity_for(self, model_or_instance) -> Entity:
        model = model_or_instance if isinstance(model_or_instance, type) else type(model_or_instance)
        for e in self.entities:
            if e.model is model:
                return e
        raise SchemaError(f"{model.__name__} is not part of this schema")
