import logging

from flask import current_app
from sqlalchemy import func

from storefront.extensions import db
from storefront.models.url_entity import UrlEntity
from storefront.services.language_service import LanguageService
from storefront.utils.helpers import slugify

logger = logging.getLogger(__name__)


class SlugService:
    """SEO names (slugs) of catalog entities"""

    @staticmethod
    def get_se_name(name: str, allow_unicode: bool = None) -> str:
        """Normalize text into a URL slug; `allow_unicode` defaults to the SEO setting"""
        if allow_unicode is None:
            allow_unicode = current_app.config.get("SEO_ALLOW_UNICODE_CHARS_IN_URLS", False)
        return slugify(name or "", allow_unicode=allow_unicode)

    @staticmethod
    def get_by_slug(slug: str):
        if not slug:
            return None
        return UrlEntity.query.filter(func.lower(UrlEntity.slug) == slug.lower()).first()

    @staticmethod
    def get_active_slug(entity_id: str, entity_name: str, language_id: str = ""):
        return UrlEntity.query.filter_by(
            entity_id=entity_id,
            entity_name=entity_name,
            language_id=language_id or "",
            is_active=True,
        ).first()

    @staticmethod
    def validate_se_name(entity, se_name: str, name: str, ensure_not_empty: bool) -> str:
        """Return a slug for `entity` that no other entity or language code uses.

        A blank `se_name` falls back to `name`. Collisions get a numeric suffix
        starting at 2 ("phones", "phones-2", "phones-3", ...).
        """
        entity_name = type(entity).__name__

        if not (se_name or "").strip() and name:
            se_name = name
        se_name = SlugService.get_se_name(se_name)

        max_length = current_app.config.get("SEO_NAME_MAX_LENGTH", 200)
        se_name = se_name[:max_length]

        if not se_name:
            if ensure_not_empty:
                se_name = entity.id
            else:
                return se_name

        seo_codes = {
            language.unique_seo_code.lower()
            for language in LanguageService.get_all_languages(show_hidden=True)
        }

        candidate = se_name
        suffix = 2
        while True:
            url_entity = SlugService.get_by_slug(candidate)
            taken = url_entity is not None and not (
                url_entity.entity_id == entity.id and url_entity.entity_name == entity_name
            )
            if not taken and candidate.lower() not in seo_codes:
                break
            candidate = f"{se_name}-{suffix}"
            suffix += 1

        return candidate

    @staticmethod
    def save_slug(entity, slug: str, language_id: str = ""):
        """Make `slug` the single active slug of `entity` for the language"""
        entity_name = type(entity).__name__
        language_id = language_id or ""
        slug = slug or ""

        records = (
            UrlEntity.query.filter_by(
                entity_id=entity.id, entity_name=entity_name, language_id=language_id
            )
            .order_by(UrlEntity.created_at.desc())
            .all()
        )
        active = next((r for r in records if r.is_active), None)
        previous = next(
            (r for r in records if not r.is_active and r.slug.lower() == slug.lower()),
            None,
        )

        if active is None:
            if not slug:
                return None
            if previous is not None:
                previous.is_active = True
                active = previous
            else:
                active = UrlEntity(
                    entity_id=entity.id,
                    entity_name=entity_name,
                    slug=slug,
                    language_id=language_id,
                    is_active=True,
                )
                db.session.add(active)
        elif not slug:
            active.is_active = False
            active = None
        elif active.slug.lower() != slug.lower():
            active.is_active = False
            if previous is not None:
                previous.is_active = True
                active = previous
            else:
                active = UrlEntity(
                    entity_id=entity.id,
                    entity_name=entity_name,
                    slug=slug,
                    language_id=language_id,
                    is_active=True,
                )
                db.session.add(active)

        db.session.commit()
        logger.debug(f"Slug of {entity_name} {entity.id} ({language_id or 'default'}): {slug}")
        return active

    @staticmethod
    def delete_entity_slugs(entity_id: str, entity_name: str):
        UrlEntity.query.filter_by(entity_id=entity_id, entity_name=entity_name).delete()
        db.session.commit()
