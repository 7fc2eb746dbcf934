from sqlalchemy import or_

from storefront.extensions import db
from storefront.models.product import Product, ProductCategory
from storefront.models.store import Store
from storefront.enums import ProductType


def _blank(value) -> bool:
    # select lists use " " for "All"
    return not value or not str(value).strip()


class ProductService:
    """Product service handling product operations"""

    @staticmethod
    def get_product_by_id(product_id: str):
        """Product or None"""
        if not product_id:
            return None
        return db.session.get(Product, product_id)

    @staticmethod
    def insert_product(name: str, **kwargs) -> Product:
        product = Product(
            name=name,
            sku=kwargs.get("sku"),
            short_description=kwargs.get("short_description"),
            product_type=int(kwargs.get("product_type", ProductType.SIMPLE_PRODUCT)),
            vendor_id=kwargs.get("vendor_id"),
            brand_id=kwargs.get("brand_id"),
            collection_id=kwargs.get("collection_id"),
            published=kwargs.get("published", True),
            limited_to_stores=kwargs.get("limited_to_stores", False),
            stores=kwargs.get("stores", []),
        )
        return product.save()

    @staticmethod
    def prepare_product_list(category_id: str = "", brand_id: str = "", collection_id: str = "",
    store_id: str = "", vendor_id: str = "", product_type: int = 0, product_name: str = "",
    page: int = 1, page_size: int = 20):
        """Search products with the admin filters"""
        query = Product.query

        if not _blank(category_id):
            query = query.filter(
                Product.product_categories.any(ProductCategory.category_id == category_id)
            )

        if not _blank(brand_id):
            query = query.filter_by(brand_id=brand_id)

        if not _blank(collection_id):
            query = query.filter_by(collection_id=collection_id)

        if not _blank(store_id):
            query = query.filter(
                or_(
                    Product.limited_to_stores.is_(False),
                    Product.stores.any(Store.id == store_id),
                )
            )

        if not _blank(vendor_id):
            query = query.filter_by(vendor_id=vendor_id)

        if product_type:
            query = query.filter_by(product_type=int(product_type))

        if product_name:
            query = query.filter(Product.name.contains(product_name, autoescape=True))

        return query.order_by(Product.name).paginate(
            page=page, per_page=page_size, error_out=False
        )
