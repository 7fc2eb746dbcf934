from storefront.extensions import db
from storefront.models.category import CategoryLayout
from storefront.models.language import Language
from storefront.models.store import Store
from storefront.services.category_service import CategoryLayoutService
from storefront.services.language_service import TranslationService

DEFAULT_RESOURCES = {
    "Admin.Common.All": "All",
}


def seed_defaults() -> list:
    """Create the records a fresh database needs; returns what was created"""
    created = []

    language = Language.query.filter_by(unique_seo_code="en").first()
    if language is None:
        language = Language(name="English", language_culture="en-US", unique_seo_code="en", display_order=1)
        db.session.add(language)
        created.append("language")

    if Store.query.count() == 0:
        db.session.add(Store(name="Your store name", shortcut="Store", url="http://localhost:5000/"))
        created.append("store")

    if CategoryLayout.query.count() == 0:
        CategoryLayoutService.insert_category_layout("Grid or Lines", "CategoryLayout.GridOrLines", 1)
        created.append("category layout")

    db.session.commit()

    for name, value in DEFAULT_RESOURCES.items():
        TranslationService.set_resource(language.id, name, value)
    created.append("translation resources")
    return created
