from storefront.models.base import BaseModel, utcnow
from storefront.extensions import db
from storefront.enums import DiscountType


discount_stores = db.Table(
    "discount_stores",
    db.Column("discount_id", db.String(36), db.ForeignKey("discounts.id", ondelete="CASCADE"), primary_key=True),
    db.Column("store_id", db.String(36), db.ForeignKey("stores.id", ondelete="CASCADE"), primary_key=True),
)


class Discount(BaseModel):
    """Discount model"""

    __tablename__ = "discounts"

    name = db.Column(db.String(255), nullable=False)
    discount_type = db.Column(db.Integer, default=DiscountType.ASSIGNED_TO_ORDER_TOTAL, nullable=False, index=True)
    is_enabled = db.Column(db.Boolean, default=True, nullable=False)
    start_date = db.Column(db.DateTime, nullable=True)
    end_date = db.Column(db.DateTime, nullable=True)
    limited_to_stores = db.Column(db.Boolean, default=False, nullable=False)

    # Relationships
    stores = db.relationship("Store", secondary=discount_stores, lazy="selectin")

    def is_active_at(self, moment=None) -> bool:
        """Enabled and inside its (optional) date window"""
        if not self.is_enabled:
            return False
        moment = (moment or utcnow()).replace(tzinfo=None)
        if self.start_date and moment < self.start_date.replace(tzinfo=None):
            return False
        if self.end_date and moment > self.end_date.replace(tzinfo=None):
            return False
        return True

    def to_dict(self):
        data = super().to_dict()
        data["stores"] = [s.id for s in self.stores]
        return data
