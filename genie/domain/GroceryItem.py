"""GroceryItem domain entity: generated id, display name, checked flag."""
import itertools
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_ids() -> str:
    '''Default id strategy: a random UUID4 string per call.'''
    return str(uuid.uuid4())


class CounterIds:
    '''Deterministic id strategy (item-1, item-2, ...) for tests and fixtures.'''

    def __init__(self, prefix: str = "item-", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


class GroceryItem:
    def __init__(self, item_id: str, name: str, is_checked: bool = False):
        if not isinstance(item_id, str) or not item_id:
            raise ValueError("GroceryItem id must be a non-empty string")
        self._id = item_id
        self.name = name
        self.is_checked = is_checked

    @property
    def id(self) -> str:
        return self._id

    @classmethod
    def create(cls, name: str, id_factory: IdFactory = uuid_ids) -> "GroceryItem":
        '''Builds a new unchecked item, drawing its id from id_factory.'''
        return cls(id_factory(), name)

    def toggle(self) -> bool:
        self.is_checked = not self.is_checked
        return self.is_checked

    def __eq__(self, other) -> bool:
        if not isinstance(other, GroceryItem):
            return NotImplemented
        return (self.id, self.name, self.is_checked) == (other.id, other.name, other.is_checked)

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        mark = "x" if self.is_checked else " "
        return f"[{mark}] {self.name} ({self.id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "GroceryItem":
        '''Creates a GroceryItem from its persisted form. Raises on a malformed entry.'''
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        item_id = data.get("id")
        name = data.get("item")
        checked = data.get("isChecked", False)
        if not isinstance(item_id, str) or not isinstance(name, str) or not isinstance(checked, bool):
            raise ValueError(f"Malformed grocery item: {data!r}")
        return GroceryItem(item_id, name, checked)

    def to_dict(self):
        '''Converts the item to its persisted form {id, item, isChecked}.'''
        return {
            "id": self.id,
            "item": self.name,
            "isChecked": self.is_checked,
        }
