from sqlalchemy import Column, Integer, Float, String, Text, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from liquor_cabinet.core.database import Base


EVENT_TYPES = ("added", "finished", "adjusted")


class InventoryEvent(Base):
    """Journal immuable des variations de quantité d'une bouteille."""

    __tablename__ = "inventory_events"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    bottle_id = Column(
        Integer, ForeignKey("bottles.id", ondelete="CASCADE"), nullable=False
    )

    event_type = Column(String, nullable=False, index=True)
    quantity_change = Column(Integer, nullable=False)

    purchase_price = Column(Float)
    purchase_source = Column(String)
    notes = Column(Text)

    event_date = Column(DateTime, default=datetime.utcnow, index=True)

    bottle = relationship("Bottle", back_populates="events")

    __table_args__ = (
        Index("ix_event_user_type_date", "user_id", "event_type", "event_date"),
        Index("ix_event_bottle_date", "bottle_id", "event_date"),
    )

    def __repr__(self):
        return f"<InventoryEvent(id={self.id}, type={self.event_type}, change={self.quantity_change}, bottle_id={self.bottle_id})>"
