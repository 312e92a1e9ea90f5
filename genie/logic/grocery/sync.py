"""Confirmation-gated sync of the grocery list with the meal plan.

State machine:
    IDLE --request_sync--> CONFIRMATION_PENDING
    CONFIRMATION_PENDING --cancel--> IDLE
    CONFIRMATION_PENDING --confirm--> SYNCING --(replace done)--> IDLE

Nothing touches the grocery list until confirm(); the replace itself runs
as a job on the UpdateContext that owns the list.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from genie.domain.GroceryList import GroceryList
from genie.domain.MealPlan import MealPlan
from genie.events.Event_Bus import GLOBAL_EVENT_BUS, EventBus
from genie.events.event_helpers import publish_sync_state
from genie.logic.grocery.extractor import derive_grocery_items
from genie.logic.grocery.update_context import UpdateContext
from genie.utilities.constants import (
    SYNC_PROMPT_TITLE, SYNC_PROMPT_MESSAGE, SYNC_CANCEL_LABEL, SYNC_CONFIRM_LABEL
)

logger = logging.getLogger(__name__)

MealPlanProvider = Callable[[], MealPlan]


class SyncState(Enum):
    IDLE = "idle"
    CONFIRMATION_PENDING = "confirmation_pending"
    SYNCING = "syncing"


class SyncNotPendingError(RuntimeError):
    """confirm() was called without a pending sync request."""


@dataclass(frozen=True)
class SyncPrompt:
    title: str = SYNC_PROMPT_TITLE
    message: str = SYNC_PROMPT_MESSAGE
    actions: List[str] = field(default_factory=lambda: [SYNC_CANCEL_LABEL, SYNC_CONFIRM_LABEL])

    def to_dict(self):
        return {"title": self.title, "message": self.message, "actions": list(self.actions)}


class SyncCoordinator:
    def __init__(self, grocery_list: GroceryList, meal_plan_provider: MealPlanProvider,
                 context: UpdateContext, event_bus: Optional[EventBus] = None):
        self.grocery_list = grocery_list
        self.meal_plan_provider = meal_plan_provider
        self.context = context
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self._state = SyncState.IDLE

    @property
    def state(self) -> SyncState:
        return self._state

    def _transition(self, new_state: SyncState):
        previous = self._state
        self._state = new_state
        logger.debug(f"Grocery sync {previous.value} -> {new_state.value}")
        publish_sync_state(new_state.value, previous.value, bus=self._event_bus)

    def request_sync(self) -> SyncPrompt:
        """Ask for confirmation; the list stays untouched."""
        if self._state is SyncState.IDLE:
            self._transition(SyncState.CONFIRMATION_PENDING)
        return SyncPrompt()

    def cancel(self) -> None:
        if self._state is SyncState.CONFIRMATION_PENDING:
            self._transition(SyncState.IDLE)

    def confirm(self) -> None:
        """Replace the grocery list with items derived from the current meal plan."""
        if self._state is not SyncState.CONFIRMATION_PENDING:
            raise SyncNotPendingError(f"No sync awaiting confirmation (state: {self._state.value})")
        self._transition(SyncState.SYNCING)
        self.context.post(self._sync_job)

    def _sync_job(self):
        try:
            plan = self.meal_plan_provider()
            items = derive_grocery_items(plan.meals_by_day, self.grocery_list.id_factory)
            self.grocery_list.replace_all(items)
            logger.info(f"Grocery list synced with meal plan ({len(items)} items)")
        finally:
            self._transition(SyncState.IDLE)
