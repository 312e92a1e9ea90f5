"""Application context: the objects one running service shares across requests."""
from pathlib import Path
from typing import Optional, Union

from fastapi import Request

from genie.domain.GroceryItem import IdFactory, uuid_ids
from genie.domain.GroceryList import GroceryList
from genie.events.Event_Bus import GLOBAL_EVENT_BUS, EventBus
from genie.infra.Grocery_Repository import GroceryRepository, PersistencePolicy
from genie.infra.Plan_Repository import MealPlanRepository
from genie.infra.auth import AuthenticationService, SessionAuthenticationService
from genie.infra.kv_store import JsonFileKeyValueStore, KeyValueStore
from genie.logic.grocery.sync import SyncCoordinator
from genie.logic.grocery.update_context import UpdateContext
from genie.utilities import config


class GenieContext:
    def __init__(self, grocery_list: GroceryList, plan_repository: MealPlanRepository,
                 sync: SyncCoordinator, context: UpdateContext,
                 auth: AuthenticationService, event_bus: EventBus):
        self.grocery_list = grocery_list
        self.plan_repository = plan_repository
        self.sync = sync
        self.context = context
        self.auth = auth
        self.event_bus = event_bus


def build_context(kv_store: Optional[KeyValueStore] = None,
                  plan_path: Optional[Union[str, Path]] = None,
                  policy: Optional[PersistencePolicy] = None,
                  id_factory: IdFactory = uuid_ids,
                  auth: Optional[AuthenticationService] = None,
                  event_bus: Optional[EventBus] = None) -> GenieContext:
    """Wire a context; any collaborator left out comes from configuration."""
    bus = event_bus or GLOBAL_EVENT_BUS
    repository = GroceryRepository(
        kv_store if kv_store is not None else JsonFileKeyValueStore(config.GROCERY_STORE_FILE),
        key=config.GROCERY_STORAGE_KEY,
        policy=policy or PersistencePolicy.from_name(config.PERSISTENCE_MODE),
    )
    update_context = UpdateContext()
    grocery_list = update_context.call(lambda: GroceryList(repository, id_factory=id_factory, event_bus=bus))
    plan_repository = MealPlanRepository(plan_path or config.MEAL_PLAN_FILE)
    sync = SyncCoordinator(grocery_list, plan_repository.load, update_context, event_bus=bus)
    return GenieContext(
        grocery_list=grocery_list,
        plan_repository=plan_repository,
        sync=sync,
        context=update_context,
        auth=auth or SessionAuthenticationService(),
        event_bus=bus,
    )


def get_genie(request: Request) -> GenieContext:
    return request.app.state.genie
