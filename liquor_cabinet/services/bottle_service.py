from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List
from datetime import datetime
import logging

from liquor_cabinet.middleware.transaction_handler import transactional
from liquor_cabinet.models.bottle import Bottle
from liquor_cabinet.models.inventory_event import InventoryEvent
from liquor_cabinet.schemas.bottle import BottleCreate, BottleUpdate
from liquor_cabinet.utils.exceptions import BottleNotFoundException

logger = logging.getLogger(__name__)


class BottleService:
    """
    Accès aux bouteilles d'un utilisateur.
    Toute variation de quantité ajoute un InventoryEvent dans la même transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get_owned(self, user_id: int, bottle_id: int, for_update: bool = False) -> Bottle:
        query = self.db.query(Bottle).filter(
            Bottle.id == bottle_id, Bottle.user_id == user_id
        )
        if for_update:
            query = query.with_for_update()

        bottle = query.first()
        if not bottle:
            raise BottleNotFoundException()
        return bottle

    def _record_event(
        self, user_id: int, bottle_id: int, event_type: str, quantity_change: int
    ) -> InventoryEvent:
        event = InventoryEvent(
            user_id=user_id,
            bottle_id=bottle_id,
            event_type=event_type,
            quantity_change=quantity_change,
        )
        self.db.add(event)
        return event

    @transactional
    def add_bottle(self, user_id: int, data: BottleCreate) -> Bottle:
        """
        Ajoute une bouteille SANS DUPLICATION :
        une bouteille active (quantity > 0) de même marque et même nom
        (insensible à la casse) voit sa quantité incrémentée.
        Une bouteille terminée n'est jamais réactivée.
        """
        quantity = data.quantity or 1

        existing = (
            self.db.query(Bottle)
            .filter(
                Bottle.user_id == user_id,
                func.lower(Bottle.brand) == func.lower(data.brand),
                func.lower(Bottle.product_name) == func.lower(data.product_name),
                Bottle.quantity > 0,
            )
            .with_for_update()
            .first()
        )

        if existing:
            existing.quantity = Bottle.quantity + quantity
            existing.updated_at = datetime.utcnow()
            bottle = existing
            logger.info(f"Merged into bottle {bottle.id} (+{quantity})")
        else:
            bottle = Bottle(
                user_id=user_id,
                quantity=quantity,
                **data.model_dump(exclude={"quantity"}),
            )
            self.db.add(bottle)

        self.db.flush()
        self._record_event(user_id, bottle.id, "added", quantity)
        self.db.flush()
        self.db.refresh(bottle)

        logger.info(
            f"Bottle added: {bottle.id} - {bottle.brand} {bottle.product_name} "
            f"(quantity={bottle.quantity})"
        )
        return bottle

    def list_active(self, user_id: int) -> List[Bottle]:
        """Bouteilles actives, les plus récentes d'abord"""
        return (
            self.db.query(Bottle)
            .filter(Bottle.user_id == user_id, Bottle.quantity > 0)
            .order_by(Bottle.created_at.desc(), Bottle.id.desc())
            .all()
        )

    def get_bottle(self, user_id: int, bottle_id: int) -> Bottle:
        return self._get_owned(user_id, bottle_id)

    @transactional
    def update_bottle(self, user_id: int, bottle_id: int, data: BottleUpdate) -> Bottle:
        bottle = self._get_owned(user_id, bottle_id, for_update=True)

        for field, value in data.field_changes().items():
            setattr(bottle, field, value)
        bottle.updated_at = datetime.utcnow()

        if data.quantity is not None and data.event_type:
            self._record_event(
                user_id, bottle.id, data.event_type, data.quantity_change or 0
            )
            logger.info(
                f"Bottle {bottle.id} quantity set to {data.quantity} "
                f"({data.event_type}, {data.quantity_change or 0})"
            )

        self.db.flush()
        self.db.refresh(bottle)
        return bottle

    @transactional
    def finish_bottle(self, user_id: int, bottle_id: int) -> Bottle:
        """
        Retire une bouteille : quantité - 1, jamais en dessous de 0.
        Pas d'erreur si la quantité est déjà à 0.
        """
        bottle = self._get_owned(user_id, bottle_id, for_update=True)

        bottle.quantity = max(bottle.quantity - 1, 0)
        bottle.updated_at = datetime.utcnow()
        self._record_event(user_id, bottle.id, "finished", -1)

        self.db.flush()
        self.db.refresh(bottle)

        logger.info(f"Bottle finished: {bottle.id} (remaining={bottle.quantity})")
        return bottle

    @transactional
    def delete_bottle(self, user_id: int, bottle_id: int) -> None:
        """Supprime la bouteille et tout son historique"""
        bottle = self._get_owned(user_id, bottle_id)
        self.db.delete(bottle)
        logger.info(f"Bottle deleted: {bottle_id}")

    def list_events(self, user_id: int, bottle_id: int) -> List[InventoryEvent]:
        bottle = self._get_owned(user_id, bottle_id)
        return (
            self.db.query(InventoryEvent)
            .filter(InventoryEvent.bottle_id == bottle.id)
            .order_by(InventoryEvent.event_date.asc(), InventoryEvent.id.asc())
            .all()
        )
