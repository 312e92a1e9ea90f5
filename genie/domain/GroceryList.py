"""GroceryList aggregate: the canonical grocery items, persisted on every change."""
import logging
from typing import Iterable, List, Optional

from genie.domain.GroceryItem import GroceryItem, IdFactory, uuid_ids
from genie.events.Event_Bus import GLOBAL_EVENT_BUS, GROCERY_LIST_CHANGED, Listener
from genie.events.event_helpers import publish_list_changed

logger = logging.getLogger(__name__)


def _check_unique_ids(items: Iterable[GroceryItem]):
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate grocery item id: {item.id}")
        seen.add(item.id)


class GroceryList:
    '''
    Owns the grocery items shown to the user.

    Every mutation rewrites the whole list through the repository and then
    publishes grocery.list_changed on the event bus. Callers sharing one
    list between threads must sequence access through an UpdateContext.
    '''

    def __init__(self, repository, id_factory: IdFactory = uuid_ids, event_bus=None):
        self.repository = repository
        self.id_factory = id_factory
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self._items: List[GroceryItem] = []
        self.load()

    # --- Observer helpers -------------------------------------------------
    def subscribe(self, callback: Listener):
        self._event_bus.subscribe(GROCERY_LIST_CHANGED, callback)

    def unsubscribe(self, callback: Listener):
        self._event_bus.unsubscribe(GROCERY_LIST_CHANGED, callback)

    def _changed(self, reason: str):
        publish_list_changed(reason, self._items, bus=self._event_bus)

    def _commit(self, reason: str):
        self.save()
        self._changed(reason)

    # --- Persistence ------------------------------------------------------
    def load(self) -> List[GroceryItem]:
        '''
        Replaces the in-memory list with the persisted one (empty if none).
        '''
        loaded = self.repository.load()
        try:
            _check_unique_ids(loaded)
        except ValueError as e:
            logger.warning(f"Discarding persisted grocery list: {e}")
            loaded = []
        self._items = loaded
        self._changed("load")
        return self.items

    def save(self, items: Optional[Iterable[GroceryItem]] = None) -> bool:
        '''
        Persists the full list. Given items first become the in-memory list,
        so storage never holds anything the list does not. No change event is
        published; use replace_all for a notified replacement.
        Failures follow the repository's policy.
        '''
        if items is not None:
            items = list(items)
            _check_unique_ids(items)
            self._items = items
        return self.repository.save(self._items)

    # --- Mutations --------------------------------------------------------
    def add_item(self, item: GroceryItem):
        '''
        Appends an item to the list.
        '''
        if self.find(item.id) is not None:
            raise ValueError(f"Duplicate grocery item id: {item.id}")
        self._items.append(item)
        self._commit("add")

    def new_item(self, name: str) -> GroceryItem:
        '''
        Creates an unchecked item with a fresh id and appends it.
        '''
        item = GroceryItem.create(name, self.id_factory)
        self.add_item(item)
        return item

    def remove_item(self, item_id: str):
        '''
        Removes the first item with this id. Unknown ids leave the list as is.
        '''
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                break
        self._commit("remove")

    def replace_all(self, new_items: Iterable[GroceryItem]):
        '''
        Discards every current item in favour of new_items.
        '''
        new_items = list(new_items)
        _check_unique_ids(new_items)
        self._items = new_items
        self._commit("replace")

    def toggle_item(self, item_id: str) -> Optional[GroceryItem]:
        item = self.find(item_id)
        if item is None:
            return None
        item.toggle()
        self._commit("toggle")
        return item

    # --- Queries ----------------------------------------------------------
    def find(self, item_id: str) -> Optional[GroceryItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    @property
    def items(self) -> List[GroceryItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_dict(self):
        return [item.to_dict() for item in self._items]

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self._items)
        return f"Grocery List:\n\t{items_str}"

    __repr__ = __str__
