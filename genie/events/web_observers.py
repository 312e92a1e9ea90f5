"""Web-facing observers for grocery events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - grocery.list_changed
  - grocery.sync_state

and stores a lightweight in-memory ring buffer of recent events that can be
queried by the web layer (FastAPI endpoint) so clients refresh the list
without refetching it on a timer.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * Thread-safety ensured with a simple Lock (uvicorn runs sync endpoints
    in a threadpool).
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from genie.utilities.constants import MAX_EVENTS
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS, GROCERY_LIST_CHANGED, GROCERY_SYNC_STATE
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_bus: Optional[EventBus] = None


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            if event_name == GROCERY_LIST_CHANGED:
                evt['reason'] = payload.get('reason', '')
                evt['count'] = len(payload.get('items') or [])
            else:
                for k in ('state', 'previous'):
                    if k in payload:
                        evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: Optional[EventBus] = None):
    """Idempotent start: subscribe observers once per bus."""
    global _bus
    target = bus or GLOBAL_EVENT_BUS
    if _bus is target:
        return
    if _bus is not None:
        stop()
    target.subscribe(GROCERY_LIST_CHANGED, _record)
    target.subscribe(GROCERY_SYNC_STATE, _record)
    _bus = target
    logger.debug("Web observers subscribed to grocery events")


def stop():
    """Unsubscribe from the current bus and forget recorded events."""
    global _bus, _next_id
    if _bus is not None:
        _bus.unsubscribe(GROCERY_LIST_CHANGED, _record)
        _bus.unsubscribe(GROCERY_SYNC_STATE, _record)
        _bus = None
    with _lock:
        _events.clear()
        _next_id = 1


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'stop', 'get_events']
