from storefront.models.base import BaseModel
from storefront.extensions import db


class Language(BaseModel):
    """Language model"""

    __tablename__ = "languages"

    name = db.Column(db.String(100), nullable=False)
    language_culture = db.Column(db.String(20), nullable=False)
    unique_seo_code = db.Column(db.String(2), nullable=False)
    published = db.Column(db.Boolean, default=True, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)


class TranslationResource(BaseModel):
    """Localized string resource, e.g. "Admin.Common.All" -> "All" """

    __tablename__ = "translation_resources"
    __table_args__ = (
        db.UniqueConstraint("language_id", "name", name="uq_translation_language_name"),
    )

    language_id = db.Column(
        db.String(36),
        db.ForeignKey("languages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(200), nullable=False, index=True)
    value = db.Column(db.Text, nullable=False)
