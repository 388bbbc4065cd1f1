"""
Import de bouteilles et d'événements depuis des exports CSV.

Les identifiants d'origine (UUID) sont remplacés par les nôtres :
import_bottles retourne la correspondance utilisée ensuite par import_events.
"""

from sqlalchemy.orm import Session
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, Mapping, Optional
import logging

from liquor_cabinet.models.bottle import BOTTLE_CATEGORIES, Bottle
from liquor_cabinet.models.inventory_event import EVENT_TYPES, InventoryEvent

logger = logging.getLogger(__name__)

BOTTLE_TEXT_FIELDS = (
    "sub_category",
    "country_of_origin",
    "region",
    "description",
    "tasting_notes",
    "image_url",
    "notes",
    "dan_murphys_url",
)


@dataclass
class ImportResult:
    imported: int = 0
    skipped: int = 0
    id_map: Dict[str, int] = field(default_factory=dict)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_float(value: Optional[str]) -> Optional[float]:
    value = _blank_to_none(value)
    return float(value) if value is not None else None


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    value = _blank_to_none(value)
    if value is None:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class ImportService:
    def __init__(self, db: Session):
        self.db = db

    def _bottle_from_row(self, user_id: int, row: Mapping[str, str]) -> Bottle:
        brand = _blank_to_none(row.get("brand"))
        product_name = _blank_to_none(row.get("product_name"))
        if not brand or not product_name:
            raise ValueError("brand and product_name are required")

        category = (_blank_to_none(row.get("category")) or "other").lower()
        if category not in BOTTLE_CATEGORIES:
            category = "other"

        quantity = _blank_to_none(row.get("quantity"))
        created_at = _parse_datetime(row.get("created_at")) or datetime.utcnow()

        return Bottle(
            user_id=user_id,
            brand=brand,
            product_name=product_name,
            category=category,
            abv=_parse_float(row.get("abv")),
            size_ml=_parse_float(row.get("size_ml")),
            quantity=max(int(quantity), 0) if quantity is not None else 1,
            created_at=created_at,
            updated_at=_parse_datetime(row.get("updated_at")) or created_at,
            **{name: _blank_to_none(row.get(name)) for name in BOTTLE_TEXT_FIELDS},
        )

    def _already_imported(self, bottle: Bottle) -> Optional[Bottle]:
        return (
            self.db.query(Bottle)
            .filter(
                Bottle.user_id == bottle.user_id,
                Bottle.brand == bottle.brand,
                Bottle.product_name == bottle.product_name,
                Bottle.created_at == bottle.created_at,
            )
            .first()
        )

    def _event_already_imported(self, event: InventoryEvent) -> bool:
        # un second import remappe les bouteilles existantes : l'historique ne doit pas doubler
        return (
            self.db.query(InventoryEvent.id)
            .filter(
                InventoryEvent.bottle_id == event.bottle_id,
                InventoryEvent.event_type == event.event_type,
                InventoryEvent.quantity_change == event.quantity_change,
                InventoryEvent.event_date == event.event_date,
            )
            .first()
            is not None
        )

    def import_bottles(self, user_id: int, rows: Iterable[Mapping[str, str]]) -> ImportResult:
        result = ImportResult()

        for row in rows:
            try:
                bottle = self._bottle_from_row(user_id, row)
            except ValueError as e:
                logger.warning(f"Skipping bottle row {row.get('id')}: {e}")
                result.skipped += 1
                continue

            existing = self._already_imported(bottle)
            if existing:
                if row.get("id"):
                    result.id_map[row["id"]] = existing.id
                result.skipped += 1
                continue

            self.db.add(bottle)
            self.db.flush()
            if row.get("id"):
                result.id_map[row["id"]] = bottle.id
            result.imported += 1

        logger.info(f"Bottles import: {result.imported} imported, {result.skipped} skipped")
        return result

    def import_events(
        self,
        user_id: int,
        rows: Iterable[Mapping[str, str]],
        bottle_ids: Mapping[str, int],
    ) -> ImportResult:
        result = ImportResult()

        for row in rows:
            bottle_id = bottle_ids.get(row.get("bottle_id") or "")
            event_type = _blank_to_none(row.get("event_type"))

            if bottle_id is None or event_type not in EVENT_TYPES:
                logger.warning(
                    f"Skipping event row {row.get('id')}: unknown bottle or type"
                )
                result.skipped += 1
                continue

            try:
                event = InventoryEvent(
                    user_id=user_id,
                    bottle_id=bottle_id,
                    event_type=event_type,
                    quantity_change=int(row.get("quantity_change") or 0),
                    purchase_price=_parse_float(row.get("purchase_price")),
                    purchase_source=_blank_to_none(row.get("purchase_source")),
                    notes=_blank_to_none(row.get("notes")),
                    event_date=_parse_datetime(row.get("event_date"))
                    or datetime.utcnow(),
                )
            except ValueError as e:
                logger.warning(f"Skipping event row {row.get('id')}: {e}")
                result.skipped += 1
                continue

            if self._event_already_imported(event):
                result.skipped += 1
                continue

            self.db.add(event)
            self.db.flush()
            result.imported += 1

        logger.info(f"Events import: {result.imported} imported, {result.skipped} skipped")
        return result
