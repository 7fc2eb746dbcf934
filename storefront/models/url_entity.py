from storefront.models.base import BaseModel
from storefront.extensions import db


class UrlEntity(BaseModel):
    """SEO slug record pointing at an entity"""

    __tablename__ = "url_entities"

    entity_id = db.Column(db.String(36), nullable=False, index=True)
    entity_name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(400), nullable=False, index=True)
    language_id = db.Column(db.String(36), default="", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
