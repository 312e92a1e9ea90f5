from fastapi import APIRouter, Depends, HTTPException
import logging

from genie.api.context import GenieContext, get_genie
from genie.logic.grocery.sync import SyncNotPendingError
from genie.utilities.constants import GROCERY_LIST_TITLE, GROCERY_LIST_HEADER
from genie.utilities.validators import GroceryItemInput

router = APIRouter(prefix="/api/grocery-list", tags=["grocery"])
logger = logging.getLogger(__name__)


def _list_payload(genie: GenieContext):
    items = genie.grocery_list.to_dict()
    return {
        "title": GROCERY_LIST_TITLE,
        "header": GROCERY_LIST_HEADER,
        "items": items,
        "count": len(items),
    }


def _sync_payload(genie: GenieContext):
    return {"state": genie.sync.state.value}


@router.get("")
def get_grocery_list(genie: GenieContext = Depends(get_genie)):
    return genie.context.call(lambda: _list_payload(genie))


@router.post("/items", status_code=201)
def add_grocery_item(payload: GroceryItemInput, genie: GenieContext = Depends(get_genie)):
    item = genie.context.call(lambda: genie.grocery_list.new_item(payload.name))
    return item.to_dict()


@router.delete("/items/{item_id}")
def remove_grocery_item(item_id: str, genie: GenieContext = Depends(get_genie)):
    def _remove():
        genie.grocery_list.remove_item(item_id)
        return _list_payload(genie)
    return genie.context.call(_remove)


@router.post("/items/{item_id}/toggle")
def toggle_grocery_item(item_id: str, genie: GenieContext = Depends(get_genie)):
    item = genie.context.call(lambda: genie.grocery_list.toggle_item(item_id))
    if item is None:
        raise HTTPException(status_code=404, detail="Grocery item not found")
    return item.to_dict()


# -------------------- Sync with meal plan --------------------
@router.post("/sync")
def request_sync(genie: GenieContext = Depends(get_genie)):
    prompt = genie.context.call(genie.sync.request_sync)
    return {**_sync_payload(genie), "prompt": prompt.to_dict()}


@router.post("/sync/confirm")
def confirm_sync(genie: GenieContext = Depends(get_genie)):
    def _confirm():
        genie.sync.confirm()
        return {**_sync_payload(genie), **_list_payload(genie)}
    try:
        return genie.context.call(_confirm)
    except SyncNotPendingError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sync/cancel")
def cancel_sync(genie: GenieContext = Depends(get_genie)):
    genie.context.call(genie.sync.cancel)
    return _sync_payload(genie)


@router.get("/sync")
def sync_status(genie: GenieContext = Depends(get_genie)):
    return _sync_payload(genie)
