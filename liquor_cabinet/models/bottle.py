from sqlalchemy import (
    Column,
    Integer,
    Float,
    String,
    Text,
    ForeignKey,
    DateTime,
    Index,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from datetime import datetime
from liquor_cabinet.core.database import Base


BOTTLE_CATEGORIES = (
    "whisky",
    "gin",
    "rum",
    "vodka",
    "tequila",
    "brandy",
    "liqueur",
    "wine",
    "beer",
    "other",
)


class Bottle(Base):
    __tablename__ = "bottles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    brand = Column(String, nullable=False)
    product_name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    sub_category = Column(String)

    country_of_origin = Column(String)
    region = Column(String)
    abv = Column(Float)
    size_ml = Column(Float)
    description = Column(Text)
    tasting_notes = Column(Text)
    notes = Column(Text)
    dan_murphys_url = Column(String)
    image_url = Column(String)

    # quantity = 0 : bouteille terminée, conservée pour l'historique
    quantity = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="bottles")
    events = relationship(
        "InventoryEvent",
        back_populates="bottle",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_bottle_quantity_non_negative"),
        Index("ix_bottle_user_quantity", "user_id", "quantity"),
        Index("ix_bottle_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<Bottle(id={self.id}, brand={self.brand}, product_name={self.product_name}, quantity={self.quantity})>"
