"""
JSON File Storage Implementation

DESIGN DECISION: The ledger lives in a single JSON document because:
1. Users can read and hand-edit it
2. No database setup required
3. Data volume for a personal ledger is tiny

TRADEOFFS:
- Every save rewrites the whole file
- No locking (two concurrent invocations: last write wins)

Writes go through a temporary file in the same directory followed by
os.replace, so a crash mid-write never leaves a truncated ledger.
"""

import json
import os
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from expense_tracker.exceptions import CorruptStoreError, StorageError
from expense_tracker.models.expense import Ledger
from expense_tracker.services.storage.interface import LedgerStorageInterface


logger = structlog.get_logger(__name__)


class JsonFileLedgerStorage(LedgerStorageInterface):
    """
    JSON file implementation of ledger storage.

    Document shape:
        {"expenses": [{"id", "date", "description", "amount", "category"}],
         "budget": "..."}

    Amounts are written as decimal strings. JSON numbers are still
    accepted on read and parsed straight to Decimal.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Ledger:
        """Load the ledger, or an empty one if the file does not exist."""
        if not self._path.exists():
            logger.debug("ledger_file_missing", path=str(self._path))
            return Ledger()

        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle, parse_float=Decimal)
        except ValueError as e:
            raise CorruptStoreError(
                f"Ledger file is not valid JSON: {self._path} ({e})"
            ) from e
        except OSError as e:
            raise StorageError(f"Failed to read ledger file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise CorruptStoreError(
                f"Ledger file must contain a JSON object: {self._path}"
            )

        try:
            ledger = Ledger.model_validate(data)
        except PydanticValidationError as e:
            raise CorruptStoreError(
                f"Ledger file has invalid contents: {self._path} "
                f"({e.error_count()} errors)"
            ) from e

        logger.debug(
            "ledger_loaded",
            path=str(self._path),
            expense_count=len(ledger.expenses),
        )
        return ledger

    def save(self, ledger: Ledger) -> None:
        """Atomically replace the ledger file."""
        payload = ledger.model_dump(mode="json", exclude_none=True)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=".expenses_",
                suffix=".json",
                dir=str(self._path.parent),
            )
        except OSError as e:
            raise StorageError(f"Failed to prepare ledger file {self._path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
                handle.write("\n")
            os.replace(tmp_path, self._path)
        except OSError as e:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write ledger file {self._path}: {e}") from e

        logger.debug(
            "ledger_saved",
            path=str(self._path),
            expense_count=len(ledger.expenses),
        )
