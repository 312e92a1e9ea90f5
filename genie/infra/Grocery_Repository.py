"""Grocery list persistence: JSON blob under a fixed key of a key-value store."""

import json
import logging
from enum import Enum
from typing import List, Optional, Sequence

from genie.domain.GroceryItem import GroceryItem
from genie.infra.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "groceryListData"


class GroceryPersistenceError(Exception):
    """Persisted grocery state could not be read or written."""


class GroceryDecodeError(GroceryPersistenceError):
    pass


class GroceryEncodeError(GroceryPersistenceError):
    pass


class PersistenceMode(Enum):
    BEST_EFFORT = "best_effort"
    STRICT = "strict"


class PersistencePolicy:
    """Decides what happens when storage fails.

    BEST_EFFORT logs the failure and lets the caller continue (an unreadable
    blob reads as an empty list, a failed write leaves only the in-memory list
    current). STRICT re-raises as GroceryPersistenceError.
    """

    def __init__(self, mode: PersistenceMode = PersistenceMode.BEST_EFFORT):
        self.mode = mode

    @classmethod
    def from_name(cls, name: str) -> "PersistencePolicy":
        try:
            return cls(PersistenceMode(name))
        except ValueError:
            logger.warning(f"Unknown persistence mode '{name}', using best_effort")
            return cls()

    @property
    def raises(self) -> bool:
        return self.mode is PersistenceMode.STRICT

    def absorb(self, error: GroceryPersistenceError):
        if self.raises:
            raise error
        logger.warning(f"Grocery persistence failure ignored: {error}")


def encode_items(items: Sequence[GroceryItem]) -> str:
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def decode_items(raw: str) -> List[GroceryItem]:
    '''Decodes a persisted blob. One malformed entry rejects the whole payload.'''
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Grocery payload is not a JSON array")
    return [GroceryItem.from_dict(entry) for entry in data]


class GroceryRepository:
    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY,
                 policy: Optional[PersistencePolicy] = None):
        self.store = store
        self.key = key
        self.policy = policy or PersistencePolicy()

    def load(self) -> List[GroceryItem]:
        """Read the persisted list; absent or undecodable data reads as empty."""
        try:
            raw = self.store.get(self.key)
        except (OSError, ValueError, RecursionError) as e:
            self.policy.absorb(GroceryDecodeError(f"Could not read '{self.key}': {e}"))
            return []
        if raw is None:
            return []
        try:
            return decode_items(raw)
        except (TypeError, ValueError, RecursionError) as e:
            self.policy.absorb(GroceryDecodeError(f"Could not decode '{self.key}': {e}"))
            return []

    def save(self, items: Sequence[GroceryItem]) -> bool:
        """Write the full list. Returns False when a best-effort write was dropped."""
        try:
            payload = encode_items(items)
        except (TypeError, ValueError) as e:
            self.policy.absorb(GroceryEncodeError(f"Could not encode grocery list: {e}"))
            return False
        try:
            self.store.set(self.key, payload)
        except OSError as e:
            self.policy.absorb(GroceryEncodeError(f"Could not write '{self.key}': {e}"))
            return False
        logger.debug(f"Grocery list saved ({len(items)} items)")
        return True
