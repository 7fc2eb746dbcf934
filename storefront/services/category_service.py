import logging

from flask import current_app
from sqlalchemy import or_

from storefront.extensions import db
from storefront.models.category import Category, CategoryLayout
from storefront.models.product import ProductCategory
from storefront.models.store import Store
from storefront.services.slug_service import SlugService

logger = logging.getLogger(__name__)


class CategoryService:
    """Category persistence and hierarchy"""

    @staticmethod
    def get_category_by_id(category_id: str):
        if not category_id:
            return None
        return db.session.get(Category, category_id)

    @staticmethod
    def get_all_categories(category_name: str = "", store_id: str = "", page: int = 1,
    page_size: int = None, show_hidden: bool = False, parent_category_id: str = None):
        """Paged categories ordered by display order, then name"""
        if page_size is None:
            page_size = current_app.config.get("DEFAULT_CATEGORY_PAGE_SIZE", 6)

        query = Category.query

        if not show_hidden:
            query = query.filter_by(published=True)

        if category_name:
            query = query.filter(Category.name.contains(category_name, autoescape=True))

        if store_id and store_id.strip():
            query = query.filter(
                or_(
                    Category.limited_to_stores.is_(False),
                    Category.stores.any(Store.id == store_id),
                )
            )

        if parent_category_id is not None:
            query = query.filter(Category.parent_category_id == (parent_category_id or None))

        return query.order_by(Category.display_order, Category.name).paginate(
            page=page, per_page=page_size, error_out=False
        )

    @staticmethod
    def get_category_breadcrumb(category: Category, show_hidden: bool = False):
        """Category and its ancestors, root first"""
        breadcrumb = []
        processed = set()
        while (
            category is not None
            and (show_hidden or category.published)
            and category.id not in processed
        ):
            breadcrumb.append(category)
            processed.add(category.id)
            category = CategoryService.get_category_by_id(category.parent_category_id)

        breadcrumb.reverse()
        return breadcrumb

    @staticmethod
    def get_formatted_breadcrumb(category: Category, separator: str = ">>", language_id: str = "") -> str:
        """e.g. "Computers >> Notebooks >> Gaming" """
        names = [
            c.get_translation("name", language_id)
            for c in CategoryService.get_category_breadcrumb(category, show_hidden=True)
        ]
        return f" {separator} ".join(names)

    @staticmethod
    def insert_category(category: Category) -> Category:
        db.session.add(category)
        db.session.commit()
        logger.info(f"Category inserted: {category.id} ({category.name})")
        return category

    @staticmethod
    def update_category(category: Category) -> Category:
        """Persist changes; a parent that would close a cycle is reset to root"""
        parent = CategoryService.get_category_by_id(category.parent_category_id)
        visited = set()
        while parent is not None and parent.id not in visited:
            if parent.id == category.id:
                logger.warning(f"Category {category.id} cannot be its own ancestor, moved to root")
                category.parent_category_id = None
                break
            visited.add(parent.id)
            parent = CategoryService.get_category_by_id(parent.parent_category_id)

        db.session.commit()
        return category

    @staticmethod
    def delete_category(category: Category):
        """Delete a category; subcategories move to root"""
        Category.query.filter_by(parent_category_id=category.id).update(
            {"parent_category_id": None}, synchronize_session="fetch"
        )
        ProductCategory.query.filter_by(category_id=category.id).delete(
            synchronize_session="fetch"
        )
        SlugService.delete_entity_slugs(category.id, Category.__name__)

        db.session.delete(category)
        db.session.commit()
        logger.info(f"Category deleted: {category.id} ({category.name})")


class CategoryLayoutService:

    @staticmethod
    def get_all_category_layouts():
        return CategoryLayout.query.order_by(CategoryLayout.display_order).all()

    @staticmethod
    def get_category_layout_by_id(layout_id: str):
        if not layout_id:
            return None
        return db.session.get(CategoryLayout, layout_id)

    @staticmethod
    def insert_category_layout(name: str, view_path: str, display_order: int = 0) -> CategoryLayout:
        layout = CategoryLayout(name=name, view_path=view_path, display_order=display_order)
        return layout.save()
