from __future__ import annotations

from typing import List


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class HistoryItemNotFound(KeyError):
    def __init__(self, item_id: str):
        super().__init__(item_id)
        self.item_id = item_id
