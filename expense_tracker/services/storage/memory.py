"""In-memory ledger storage, used by tests and dry runs."""

from typing import Optional

from expense_tracker.models.expense import Ledger
from expense_tracker.services.storage.interface import LedgerStorageInterface


class InMemoryLedgerStorage(LedgerStorageInterface):
    """
    Keeps a private copy of the last saved ledger.

    Copies are taken on both load and save so callers can never
    mutate the stored state behind the store's back.
    """

    def __init__(self, ledger: Optional[Ledger] = None):
        self._ledger = ledger.model_copy(deep=True) if ledger else Ledger()
        self.save_count = 0

    def load(self) -> Ledger:
        return self._ledger.model_copy(deep=True)

    def save(self, ledger: Ledger) -> None:
        self._ledger = ledger.model_copy(deep=True)
        self.save_count += 1
