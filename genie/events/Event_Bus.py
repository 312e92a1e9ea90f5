"""Simple Event Bus / Observer implementation for grocery list notifications.

Event names used so far:
  grocery.list_changed -> payload {"reason": str, "items": [item dict, ...]}
  grocery.sync_state   -> payload {"state": str, "previous": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
GROCERY_LIST_CHANGED = "grocery.list_changed"
GROCERY_SYNC_STATE = "grocery.sync_state"

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Listener]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Listener):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Listener):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			# a failing subscriber must not stop delivery to the others
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'Listener',
	'GROCERY_LIST_CHANGED', 'GROCERY_SYNC_STATE'
]
