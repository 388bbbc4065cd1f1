from sqlalchemy import func
from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional
import logging

from liquor_cabinet.models.bottle import Bottle
from liquor_cabinet.models.inventory_event import InventoryEvent
from liquor_cabinet.schemas.stats import InventoryStats
from liquor_cabinet.utils.date_helpers import start_of_current_month

logger = logging.getLogger(__name__)


class StatsService:
    def __init__(self, db: Session):
        self.db = db

    def get_stats(self, user_id: int, now: Optional[datetime] = None) -> InventoryStats:
        """
        - total_bottles : somme des quantités (toutes bouteilles)
        - categories : catégories distinctes parmi les bouteilles actives
        - finished_this_month : bouteilles terminées depuis le 1er du mois
        """
        total = (
            self.db.query(func.coalesce(func.sum(Bottle.quantity), 0))
            .filter(Bottle.user_id == user_id)
            .scalar()
        )

        categories = (
            self.db.query(func.count(func.distinct(Bottle.category)))
            .filter(Bottle.user_id == user_id, Bottle.quantity > 0)
            .scalar()
        )

        month_start = start_of_current_month(now)
        finished = (
            self.db.query(
                func.coalesce(func.sum(func.abs(InventoryEvent.quantity_change)), 0)
            )
            .filter(
                InventoryEvent.user_id == user_id,
                InventoryEvent.event_type == "finished",
                InventoryEvent.event_date >= month_start,
            )
            .scalar()
        )

        logger.info(
            f"Stats for user {user_id}: total={total}, categories={categories}, "
            f"finished_since={month_start.isoformat()}={finished}"
        )

        return InventoryStats(
            total_bottles=int(total or 0),
            categories=int(categories or 0),
            cocktails_available=None,
            finished_this_month=int(finished or 0),
        )
