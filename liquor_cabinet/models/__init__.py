from liquor_cabinet.models.user import User
from liquor_cabinet.models.bottle import Bottle
from liquor_cabinet.models.inventory_event import InventoryEvent

__all__ = [
    "User",
    "Bottle",
    "InventoryEvent",
]
