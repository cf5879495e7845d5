"""
Non-UI persistence container for the application's model types.

This class centralises:
    - Resolving the store location from a ModelConfiguration
    - Opening/closing the SQLite store (via QSqlDatabase)
    - Creating one table per schema entity
    - Inserting, saving, deleting and listing model instances
    - Exposing a QSqlTableModel per entity for Qt views

UI widgets (ContentView) should:
    - Hold a reference to the shared ModelContainer through the AppContext
    - Use its table models for their QTableView
    - Call its methods to add or remove items
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from PyQt5 import sip
from PyQt5.QtSql import QSqlDatabase, QSqlQuery, QSqlTableModel

from .. import config
from .schema import ID_COLUMN, Schema

logger = logging.getLogger(__name__)

MEMORY_LOCATION = ":memory:"


class ContainerError(RuntimeError):
    """Raised when the store cannot be opened, created or written."""


@dataclass
class ModelConfiguration:
    """
    Where and how a schema is stored.

    Attributes
    ----------
    schema : Schema
        Entities covered by this configuration.
    is_stored_in_memory_only : bool
        If True the store lives in memory and is lost on close.
    url : Path | str | None
        Explicit store file. None means the configured default location.
    """

    schema: Schema
    is_stored_in_memory_only: bool = False
    url: Optional[Path | str] = None

    @property
    def location(self) -> str:
        if self.is_stored_in_memory_only:
            return MEMORY_LOCATION
        if self.url is None:
            return str(config.default_store_path())
        return str(self.url)


class ModelContainer:
    """
    Headless owner of the store connection.

    No UI: no QFileDialog, QMessageBox, etc.
    Every failure is raised as ContainerError; callers decide how to report it.
    """

    def __init__(self, schema: Schema, configurations: Iterable[ModelConfiguration] = ()):
        self.schema = schema
        configurations = list(configurations) or [ModelConfiguration(schema)]
        # one store per container
        if len(configurations) > 1:
            raise ContainerError(
                f"Only one configuration is supported, got {len(configurations)}")
        if configurations[0].schema is not schema:
            raise ContainerError("Configuration schema does not match the container schema")
        self.configuration = configurations[0]
        self.location = self.configuration.location
        self.db: QSqlDatabase | None = None
        self._models: dict[type, QSqlTableModel] = {}

        self._open()
        try:
            for entity in self.schema:
                self._exec(entity.create_sql())
        except ContainerError:
            self.close()
            raise
        logger.info(f"Opened store at {self.location} ({len(self.schema)} entities)")

    # ------------------------------------------------------------------
    # DB lifecycle
    # ------------------------------------------------------------------
    @property
    def is_stored_in_memory_only(self) -> bool:
        return self.location == MEMORY_LOCATION

    def _open(self) -> None:
        if not self.is_stored_in_memory_only:
            try:
                Path(self.location).parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ContainerError(f"Store directory is not usable: {e}") from e

        conn_name = f"container_{id(self)}"
        db = QSqlDatabase.addDatabase("QSQLITE", conn_name)
        db.setDatabaseName(self.location)
        if not db.open():
            msg = db.lastError().text()
            db = None
            QSqlDatabase.removeDatabase(conn_name)
            raise ContainerError(f"Failed to open store {self.location}: {msg}")
        self.db = db

    def is_open(self) -> bool:
        return self.db is not None and self.db.isOpen()

    def close(self) -> None:
        """Close the store connection and drop any table models."""
        # models hold the connection; views attached to them are reset by Qt
        for model in self._models.values():
            if not sip.isdeleted(model):
                sip.delete(model)
        self._models.clear()

        if self.db is not None and self.db.isValid():
            conn_name = self.db.connectionName()
            if self.db.isOpen():
                self.db.close()
            self.db = None
            QSqlDatabase.removeDatabase(conn_name)
            logger.debug(f"Closed store at {self.location}")
        self.db = None

    def _exec(self, sql: str, params: Iterable = ()) -> QSqlQuery:
        if not self.is_open():
            raise ContainerError("Store is not open.")
        q = QSqlQuery(self.db)
        if not q.prepare(sql):
            raise ContainerError(f"Bad statement '{sql}': {q.lastError().text()}")
        for v in params:
            q.addBindValue(v)
        if not q.exec_():
            raise ContainerError(f"Statement failed '{sql}': {q.lastError().text()}")
        return q

    # ------------------------------------------------------------------
    # Instances
    # ------------------------------------------------------------------
    def insert(self, obj) -> None:
        """Persist a new instance and assign its persistent_id."""
        if obj.persistent_id is not None:
            raise ContainerError(f"{type(obj).__name__} {obj.persistent_id} is already stored.")
        entity = self.schema.entity_for(obj)
        names = entity.column_names
        placeholders = ",".join("?" for _ in names)
        q = self._exec(
            f"INSERT INTO {entity.table} ({','.join(names)}) VALUES ({placeholders})",
            entity.encode(obj),
        )
        obj.persistent_id = int(q.lastInsertId())
        self._refresh(entity.model)

    def save(self, obj) -> None:
        """Write the current attribute values of a stored instance."""
        if obj.persistent_id is None:
            raise ContainerError(f"{type(obj).__name__} has not been inserted.")
        entity = self.schema.entity_for(obj)
        assignments = ",".join(f"{n}=?" for n in entity.column_names)
        self._exec(
            f"UPDATE {entity.table} SET {assignments} WHERE {ID_COLUMN}=?",
            entity.encode(obj) + [obj.persistent_id],
        )
        self._refresh(entity.model)

    def delete(self, obj) -> None:
        """Remove a stored instance. Unstored instances are ignored."""
        if obj.persistent_id is None:
            return
        entity = self.schema.entity_for(obj)
        self._exec(f"DELETE FROM {entity.table} WHERE {ID_COLUMN}=?", [obj.persistent_id])
        obj.persistent_id = None
        self._refresh(entity.model)

    def fetch(self, model: type) -> list:
        """Return every stored instance of *model*, oldest insert first."""
        entity = self.schema.entity_for(model)
        names = entity.column_names
        q = self._exec(
            f"SELECT {ID_COLUMN},{','.join(names)} FROM {entity.table} ORDER BY {ID_COLUMN}")
        out = []
        while q.next():
            values = [q.value(i + 1) for i in range(len(names))]
            out.append(entity.decode(values, persistent_id=int(q.value(0))))
        return out

    def fetch_by_id(self, model: type, persistent_id: int):
        """Return the stored instance with this id, or None."""
        entity = self.schema.entity_for(model)
        names = entity.column_names
        q = self._exec(
            f"SELECT {','.join(names)} FROM {entity.table} WHERE {ID_COLUMN}=?",
            [int(persistent_id)],
        )
        if not q.next():
            return None
        values = [q.value(i) for i in range(len(names))]
        return entity.decode(values, persistent_id=int(persistent_id))

    def count(self, model: type) -> int:
        entity = self.schema.entity_for(model)
        q = self._exec(f"SELECT COUNT(*) FROM {entity.table}")
        return int(q.value(0)) if q.next() else 0

    # ------------------------------------------------------------------
    # Qt models
    # ------------------------------------------------------------------
    def table_model(self, model: type) -> QSqlTableModel:
        """
        Return the QSqlTableModel bound to *model*'s table, for a QTableView.

        The same Qt model is returned on every call and is re-selected after
        each write made through this container.
        """
        if model in self._models:
            return self._models[model]
        if not self.is_open():
            raise ContainerError("Store is not open.")
        entity = self.schema.entity_for(model)
        tm = QSqlTableModel(None, self.db)
        tm.setTable(entity.table)
        tm.setEditStrategy(QSqlTableModel.OnManualSubmit)
        if not tm.select():
            raise ContainerError(f"Failed to select {entity.table} table: {tm.lastError().text()}")
        self._models[model] = tm
        return tm

    def _refresh(self, model: type) -> None:
        tm = self._models.get(model)
        if tm is not None:
            tm.select()
