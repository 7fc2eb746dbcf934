import logging

from storefront.extensions import db
from storefront.models.language import Language, TranslationResource

logger = logging.getLogger(__name__)


class LanguageService:
    """Language lookups"""

    @staticmethod
    def get_all_languages(show_hidden: bool = False):
        query = Language.query
        if not show_hidden:
            query = query.filter_by(published=True)
        return query.order_by(Language.display_order, Language.name).all()

    @staticmethod
    def get_language_by_id(language_id: str):
        if not language_id:
            return None
        return db.session.get(Language, language_id)

    @staticmethod
    def get_default_language():
        return (
            Language.query.filter_by(published=True)
            .order_by(Language.display_order, Language.name)
            .first()
        )


class TranslationService:
    """Localized string resources"""

    @staticmethod
    def get_resource(name: str, language_id: str = None) -> str:
        """Resource value for the language, or the resource name when missing"""
        if not language_id:
            language = LanguageService.get_default_language()
            if language is None:
                return name
            language_id = language.id

        resource = TranslationResource.query.filter_by(
            language_id=language_id, name=name
        ).first()
        if resource is None:
            logger.debug(f"Missing translation resource: {name} ({language_id})")
            return name
        return resource.value

    @staticmethod
    def set_resource(language_id: str, name: str, value: str) -> TranslationResource:
        resource = TranslationResource.query.filter_by(
            language_id=language_id, name=name
        ).first()
        if resource is None:
            resource = TranslationResource(language_id=language_id, name=name, value=value)
            db.session.add(resource)
        else:
            resource.value = value
        db.session.commit()
        return resource
