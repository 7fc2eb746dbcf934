from storefront.models.base import BaseModel
from storefront.extensions import db


class Store(BaseModel):
    """Store (storefront instance) model"""

    __tablename__ = "stores"

    name = db.Column(db.String(255), nullable=False)
    shortcut = db.Column(db.String(50), nullable=False)
    url = db.Column(db.String(500))
    display_order = db.Column(db.Integer, default=0, nullable=False)


class Vendor(BaseModel):
    """Vendor model"""

    __tablename__ = "vendors"

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255))
    active = db.Column(db.Boolean, default=True, nullable=False)
    deleted = db.Column(db.Boolean, default=False, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)
