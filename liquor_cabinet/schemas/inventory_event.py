from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class InventoryEventResponse(BaseModel):
    id: int
    bottle_id: int
    event_type: str
    quantity_change: int
    purchase_price: Optional[float] = None
    purchase_source: Optional[str] = None
    notes: Optional[str] = None
    event_date: datetime

    class Config:
        from_attributes = True
