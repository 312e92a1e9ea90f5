"""Event helper utilities.

Helpers that shape grocery payloads before publishing them on a bus.

Quick import:
    from genie.events.event_helpers import publish_list_changed, publish_sync_state
"""
from __future__ import annotations
from typing import Iterable, Optional

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    GROCERY_LIST_CHANGED, GROCERY_SYNC_STATE
)

__all__ = [
    'publish_list_changed', 'publish_sync_state',
    'GROCERY_LIST_CHANGED', 'GROCERY_SYNC_STATE'
]


def publish_list_changed(reason: str, items: Iterable, bus: Optional[EventBus] = None):
    """Publish a grocery.list_changed event.

    Payload structure:
        {
          'reason': 'add' | 'remove' | 'replace' | 'toggle' | 'load',
          'items': [ {id, item, isChecked}, ... ]
        }
    """
    (bus or GLOBAL_EVENT_BUS).publish(GROCERY_LIST_CHANGED, {
        'reason': reason,
        'items': [it.to_dict() for it in items],
    })


def publish_sync_state(state: str, previous: str, bus: Optional[EventBus] = None):
    """Publish a grocery.sync_state event."""
    (bus or GLOBAL_EVENT_BUS).publish(GROCERY_SYNC_STATE, {
        'state': state,
        'previous': previous,
    })
