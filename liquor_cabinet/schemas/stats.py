from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class InventoryStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_bottles: int
    categories: int
    cocktails_available: Optional[int] = None
    finished_this_month: int
