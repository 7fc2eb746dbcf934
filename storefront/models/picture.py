from storefront.models.base import BaseModel
from storefront.extensions import db


class Picture(BaseModel):
    """Picture model"""

    __tablename__ = "pictures"

    mime_type = db.Column(db.String(100), nullable=False)
    seo_filename = db.Column(db.String(300))
    alt_attribute = db.Column(db.String(255))
    title_attribute = db.Column(db.String(255))
    virtual_path = db.Column(db.String(500))
