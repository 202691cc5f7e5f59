"""JSON file snapshot logger.

The whole sequence is written as one indented JSON array and read back the
same way; there is no incremental append on disk.  Writes go to a sibling
``.tmp`` file that is moved over the target only once fully written, so a
failed persist never truncates the previous snapshot.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from recordkeeper.domain.repositories.base import PersistentLog, RestoreStatus

from .memory import InMemoryLog

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class JsonFileLogger(InMemoryLog[M], PersistentLog[M]):
    """Append-only log of Pydantic records with whole-file JSON persistence."""

    def __init__(self, model: type[M], file_path: str | Path) -> None:
        super().__init__()
        self._adapter = TypeAdapter(list[model])
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def persist_all(self, path: str | Path | None = None) -> bool:
        target = Path(path) if path is not None else self._file_path
        tmp = target.with_name(f"{target.name}.tmp")
        try:
            payload = self._adapter.dump_json(self._items, indent=2)
            tmp.write_bytes(payload)
            os.replace(tmp, target)
        except (OSError, PydanticSerializationError) as exc:
            logger.error("Could not save data to %s: %s", target, exc)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False
        logger.info("Saved %d records to %s", len(self._items), target)
        return True

    def restore_all(self, path: str | Path | None = None) -> RestoreStatus:
        source = Path(path) if path is not None else self._file_path
        if not source.exists():
            logger.warning("No file found to load at %s", source)
            return RestoreStatus.MISSING
        try:
            items = self._adapter.validate_json(source.read_bytes())
        except (OSError, ValidationError) as exc:
            logger.error("Could not load data from %s: %s", source, exc)
            return RestoreStatus.FAILED
        self._items = items
        logger.info("Loaded %d records from %s", len(items), source)
        return RestoreStatus.LOADED
