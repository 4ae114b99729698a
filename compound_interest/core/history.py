"""Bounded, most-recent-first list of saved calculations."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from compound_interest.core.errors import HistoryItemNotFound
from compound_interest.schemas.history import HistoryItem, ScenarioKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 20
DEFAULT_NAMES = {
    "compound": "Lump-sum calculation",
    "accumulation": "Accumulation calculation",
}

_items_adapter = TypeAdapter(List[HistoryItem])


class HistoryStore:
    """Keeps at most ``max_items`` snapshots; optionally mirrored to a JSON file."""

    def __init__(
        self,
        max_items: int = DEFAULT_MAX_ITEMS,
        path: Optional[Union[str, Path]] = None,
    ):
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self.max_items = max_items
        self.path = Path(path) if path else None
        self._lock = threading.Lock()
        self._items: List[HistoryItem] = self._load()

    def _load(self) -> List[HistoryItem]:
        if self.path is None or not self.path.exists():
            return []
        try:
            items = _items_adapter.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, exc)
            return []
        return items[: self.max_items]

    def _persist(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # the target file is only ever replaced whole
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(_items_adapter.dump_json(self._items, indent=2))
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def save(
        self,
        kind: ScenarioKind,
        state: Dict[str, Any],
        result: int,
        name: Optional[str] = None,
    ) -> HistoryItem:
        label = (name or "").strip() or DEFAULT_NAMES[kind]
        item = HistoryItem(
            id=uuid.uuid4().hex,
            name=label,
            kind=kind,
            # detach from the caller's dict
            state=json.loads(json.dumps(state)),
            result=result,
            timestamp=datetime.now(timezone.utc),
        )
        with self._lock:
            self._items.insert(0, item)
            dropped = self._items[self.max_items :]
            del self._items[self.max_items :]
            self._persist()
        if dropped:
            logger.debug("History full, dropped %d oldest item(s)", len(dropped))
        logger.info("Saved %s calculation %r (%s)", kind, label, item.id)
        return item

    def list(self) -> List[HistoryItem]:
        with self._lock:
            return list(self._items)

    def get(self, item_id: str) -> HistoryItem:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        raise HistoryItemNotFound(item_id)

    def delete(self, item_id: str) -> bool:
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            removed = len(remaining) != len(self._items)
            if removed:
                self._items = remaining
                self._persist()
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
