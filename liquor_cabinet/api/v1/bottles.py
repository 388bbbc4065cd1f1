from fastapi import APIRouter, Depends
import logging

from liquor_cabinet.core.dependencies import get_bottle_service
from liquor_cabinet.core.security import get_current_user_id
from liquor_cabinet.schemas.bottle import BottleCreate, BottleUpdate, BottleResponse
from liquor_cabinet.schemas.inventory_event import InventoryEventResponse
from liquor_cabinet.services.bottle_service import BottleService
from liquor_cabinet.services.presentation import group_bottles_by_category

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bottles", tags=["Bottles"])


def _serialize(bottle) -> dict:
    return BottleResponse.model_validate(bottle).model_dump(mode="json")


@router.post("")
def add_bottle(
    request: BottleCreate,
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    """
    Ajoute une bouteille (quantité 1 par défaut).
    Une bouteille active identique (marque + nom, casse ignorée) est incrémentée.
    """
    bottle = service.add_bottle(user_id, request)
    return {"success": True, "bottle": _serialize(bottle)}


@router.get("")
def list_bottles(
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    bottles = service.list_active(user_id)
    return {"success": True, "bottles": [_serialize(b) for b in bottles]}


@router.get("/grouped")
def list_bottles_grouped(
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    """Bouteilles actives regroupées par catégorie, pour l'affichage"""
    bottles = service.list_active(user_id)
    return {"success": True, "groups": group_bottles_by_category(bottles)}


@router.get("/{bottle_id}")
def get_bottle(
    bottle_id: int,
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    bottle = service.get_bottle(user_id, bottle_id)
    return {"success": True, "bottle": _serialize(bottle)}


@router.put("/{bottle_id}")
def update_bottle(
    bottle_id: int,
    request: BottleUpdate,
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    bottle = service.update_bottle(user_id, bottle_id, request)
    return {"success": True, "bottle": _serialize(bottle)}


@router.delete("/{bottle_id}")
def delete_bottle(
    bottle_id: int,
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    service.delete_bottle(user_id, bottle_id)
    return {"success": True}


@router.post("/{bottle_id}/finish")
def finish_bottle(
    bottle_id: int,
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    bottle = service.finish_bottle(user_id, bottle_id)
    return {"success": True, "bottle": _serialize(bottle)}


@router.get("/{bottle_id}/events")
def list_bottle_events(
    bottle_id: int,
    user_id: int = Depends(get_current_user_id),
    service: BottleService = Depends(get_bottle_service),
):
    events = service.list_events(user_id, bottle_id)
    return {
        "success": True,
        "events": [
            InventoryEventResponse.model_validate(e).model_dump(mode="json")
            for e in events
        ],
    }
