from flask import current_app

from storefront.extensions import db
from storefront.models.product import Product, ProductCategory


class ProductCategoryService:
    """Product <-> category mappings"""

    @staticmethod
    def get_product_categories_by_category_id(category_id: str, page: int = 1,
    page_size: int = None, show_hidden: bool = False):
        if page_size is None:
            page_size = current_app.config.get("DEFAULT_CATEGORY_PAGE_SIZE", 6)

        query = ProductCategory.query.join(Product).filter(
            ProductCategory.category_id == category_id
        )
        if not show_hidden:
            query = query.filter(Product.published.is_(True))

        return query.order_by(ProductCategory.display_order, Product.name).paginate(
            page=page, per_page=page_size, error_out=False
        )

    @staticmethod
    def insert_product_category(product_category: ProductCategory, product_id: str) -> ProductCategory:
        product_category.product_id = product_id
        db.session.add(product_category)
        db.session.commit()
        return product_category

    @staticmethod
    def update_product_category(product_category: ProductCategory, product_id: str) -> ProductCategory:
        if product_category.product_id != product_id:
            raise ValueError("Product category mapping does not belong to the product")
        db.session.commit()
        return product_category

    @staticmethod
    def delete_product_category(product_category: ProductCategory, product_id: str):
        if product_category.product_id != product_id:
            raise ValueError("Product category mapping does not belong to the product")
        db.session.delete(product_category)
        db.session.commit()
