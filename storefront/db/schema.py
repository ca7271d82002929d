"""
Table provisioning for the collection tables.

Tables are created once at startup; the write path calls ``ensure_table``
again, which is a no-op for any table this process has already verified.
"""

import logging
import threading
from typing import Iterable, Set, Type

from fastapi import Request
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


class SchemaProvisioner:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._ready: Set[str] = set()
        self._lock = threading.Lock()

    def table_exists(self, name: str) -> bool:
        return inspect(self.engine).has_table(name)

    def ensure_table(self, model: Type[SQLModel]) -> None:
        """Create the model's table if it does not exist yet."""
        table = model.__table__
        if table.name in self._ready:
            return

        with self._lock:
            if table.name in self._ready:
                return
            if not self.table_exists(table.name):
                try:
                    table.create(self.engine)
                    logger.info('Table "%s" created successfully', table.name)
                except (OperationalError, ProgrammingError):
                    # Another process may have created it between the check and the CREATE
                    if not self.table_exists(table.name):
                        raise
                    logger.info('Table "%s" was created concurrently', table.name)
            self._ready.add(table.name)

    def provision(self, models: Iterable[Type[SQLModel]]) -> None:
        for model in models:
            self.ensure_table(model)


def get_provisioner(request: Request) -> SchemaProvisioner:
    return request.app.state.provisioner
