import logging

from flask import current_app

from storefront.enums import DiscountType, ProductSorting, ProductType, to_select_list
from storefront.models.category import Category, CategoryLocale
from storefront.models.product import ProductCategory
from storefront.schemas.catalog_schema import (
    TRANSLATABLE_CATEGORY_FIELDS,
    DiscountSchema,
    ProductSchema,
    to_entity,
    to_model,
)
from storefront.services.category_service import CategoryService, CategoryLayoutService
from storefront.services.discount_service import DiscountService
from storefront.services.language_service import TranslationService
from storefront.services.picture_service import PictureService
from storefront.services.product_category_service import ProductCategoryService
from storefront.services.product_service import ProductService
from storefront.services.slug_service import SlugService
from storefront.services.store_service import StoreService, VendorService
from storefront.utils.helpers import select_item

logger = logging.getLogger(__name__)


class CategoryViewModelService:
    """Builds the admin category view models and writes submitted edits back.

    View models are plain dicts (see `storefront.schemas.catalog_schema`);
    entities never leave the service layer through the HTTP routes.
    """

    @staticmethod
    def _prepare_layouts(model: dict):
        model["available_category_layouts"] = [
            select_item(layout.name, layout.id)
            for layout in CategoryLayoutService.get_all_category_layouts()
        ]

    @staticmethod
    def _prepare_discounts(model: dict, category, exclude_properties: bool, store_id: str):
        discounts = DiscountService.get_all_discounts(
            DiscountType.ASSIGNED_TO_CATEGORIES, store_id=store_id, show_hidden=True
        )
        model["available_discounts"] = DiscountSchema(many=True).dump(discounts)

        if not exclude_properties and category is not None:
            model["selected_discount_ids"] = [d.id for d in category.applied_discounts]

    @staticmethod
    def _prepare_sort_options(model: dict):
        model["available_sort_options"] = [select_item("None", "-1")] + to_select_list(ProductSorting)

    @staticmethod
    def _available_stores(store_id: str, all_value: str):
        stores = [select_item(TranslationService.get_resource("Admin.Common.All"), all_value)]
        for store in StoreService.get_all_stores():
            if not (store_id or "").strip() or store.id == store_id:
                stores.append(select_item(store.shortcut, store.id))
        return stores

    @staticmethod
    def _category_discounts(selected_ids):
        selected = set(selected_ids or [])
        return [
            d
            for d in DiscountService.get_all_discounts(
                DiscountType.ASSIGNED_TO_CATEGORIES, show_hidden=True
            )
            if d.id in selected
        ]

    @staticmethod
    def _translate_locales(category: Category, locales):
        """Locale rows of the submitted translations; localized slugs are saved too"""
        rows = []
        for locale in locales or []:
            language_id = locale["language_id"]
            for key in TRANSLATABLE_CATEGORY_FIELDS:
                value = locale.get(key)
                if value:
                    rows.append(CategoryLocale(language_id=language_id, locale_key=key, locale_value=value))

            if "se_name" in locale:
                se_name = SlugService.validate_se_name(
                    category, locale.get("se_name"), locale.get("name") or category.name, False
                )
                SlugService.save_slug(category, se_name, language_id)
                if se_name:
                    rows.append(CategoryLocale(language_id=language_id, locale_key="se_name", locale_value=se_name))
        return rows

    @staticmethod
    def prepare_category_list_model(store_id: str = "") -> dict:
        return {"available_stores": CategoryViewModelService._available_stores(store_id, "")}

    @staticmethod
    def prepare_category_list(search_category_name: str = "", search_store_id: str = "",
    page: int = 1, page_size: int = 20):
        categories = CategoryService.get_all_categories(
            category_name=search_category_name,
            store_id=search_store_id,
            page=page,
            page_size=page_size,
            show_hidden=True,
        )

        category_models = []
        for category in categories.items:
            category_model = to_model(category)
            category_model["breadcrumb"] = CategoryService.get_formatted_breadcrumb(category)
            category_models.append(category_model)
        return category_models, categories.total

    @staticmethod
    def prepare_new_category_model(store_id: str = "") -> dict:
        model = {}
        CategoryViewModelService._prepare_sort_options(model)
        CategoryViewModelService._prepare_layouts(model)
        CategoryViewModelService._prepare_discounts(model, None, True, store_id)

        # default values
        model["page_size"] = current_app.config["DEFAULT_CATEGORY_PAGE_SIZE"]
        model["page_size_options"] = current_app.config["DEFAULT_CATEGORY_PAGE_SIZE_OPTIONS"]
        model["published"] = True
        model["include_in_menu"] = True
        model["allow_customers_to_select_page_size"] = True
        return model

    @staticmethod
    def prepare_category_model(model: dict, category: Category, store_id: str = "") -> dict:
        CategoryViewModelService._prepare_sort_options(model)
        CategoryViewModelService._prepare_layouts(model)
        CategoryViewModelService._prepare_discounts(model, category, False, store_id)
        return model

    @staticmethod
    def insert_category_model(model: dict) -> Category:
        category = to_entity(model)
        category.applied_discounts = CategoryViewModelService._category_discounts(
            model.get("selected_discount_ids")
        )
        CategoryService.insert_category(category)

        # locales
        category.locales = CategoryViewModelService._translate_locales(category, model.get("locales"))
        model["se_name"] = SlugService.validate_se_name(
            category, model.get("se_name"), category.name, True
        )
        category.se_name = model["se_name"]
        CategoryService.update_category(category)

        SlugService.save_slug(category, model["se_name"], "")

        PictureService.update_picture_seo_names(category.picture_id, category.name)
        return category

    @staticmethod
    def update_category_model(category: Category, model: dict) -> Category:
        prev_picture_id = category.picture_id
        category = to_entity(model, category)
        model["se_name"] = SlugService.validate_se_name(
            category, model.get("se_name"), category.name, True
        )
        category.se_name = model["se_name"]

        # locales
        if "locales" in model:
            category.locales = CategoryViewModelService._translate_locales(category, model["locales"])

        # discounts
        selected = set(model.get("selected_discount_ids") or [])
        for discount in DiscountService.get_all_discounts(
            DiscountType.ASSIGNED_TO_CATEGORIES, show_hidden=True
        ):
            applied = discount in category.applied_discounts
            if discount.id in selected and not applied:
                category.applied_discounts.append(discount)
            elif discount.id not in selected and applied:
                category.applied_discounts.remove(discount)
        CategoryService.update_category(category)

        SlugService.save_slug(category, model["se_name"], "")

        # delete an old picture (if deleted or updated)
        if prev_picture_id and prev_picture_id != category.picture_id:
            prev_picture = PictureService.get_picture_by_id(prev_picture_id)
            if prev_picture is not None:
                PictureService.delete_picture(prev_picture)

        PictureService.update_picture_seo_names(category.picture_id, category.name)
        return category

    @staticmethod
    def delete_category(category: Category):
        CategoryService.delete_category(category)

    @staticmethod
    def prepare_category_product_model(category_id: str, page: int = 1, page_size: int = 20):
        product_categories = ProductCategoryService.get_product_categories_by_category_id(
            category_id, page, page_size, True
        )

        category_products = []
        for item in product_categories.items:
            product = ProductService.get_product_by_id(item.product_id)
            category_products.append(
                {
                    "id": item.id,
                    "category_id": item.category_id,
                    "product_id": item.product_id,
                    "product_name": product.name if product else None,
                    "is_featured_product": item.is_featured_product,
                    "display_order": item.display_order,
                }
            )
        return category_products, product_categories.total

    @staticmethod
    def update_product_category_model(model: dict) -> ProductCategory:
        product = ProductService.get_product_by_id(model["product_id"])
        if product is None:
            raise ValueError("No product found with the specified id")

        product_category = next(
            (pc for pc in product.product_categories if pc.id == model["id"]), None
        )
        if product_category is not None and model.get("category_id") \
                and product_category.category_id != model["category_id"]:
            product_category = None
        if product_category is None:
            raise ValueError("No product category mapping found with the specified id")

        product_category.is_featured_product = model["is_featured_product"]
        product_category.display_order = model["display_order"]
        ProductCategoryService.update_product_category(product_category, product.id)
        return product_category

    @staticmethod
    def delete_product_category_model(product_category_id: str, product_id: str, category_id: str = ""):
        product = ProductService.get_product_by_id(product_id)
        if product is None:
            raise ValueError("No product found with the specified id")

        product_category = next(
            (pc for pc in product.product_categories if pc.id == product_category_id), None
        )
        if product_category is not None and category_id and product_category.category_id != category_id:
            product_category = None
        if product_category is None:
            raise ValueError("No product category mapping found with the specified id")
        ProductCategoryService.delete_product_category(product_category, product.id)

    @staticmethod
    def prepare_add_category_product_model(store_id: str = "") -> dict:
        all_text = TranslationService.get_resource("Admin.Common.All")
        model = {"available_stores": CategoryViewModelService._available_stores(store_id, " ")}

        model["available_vendors"] = [select_item(all_text, " ")] + [
            select_item(v.name, v.id) for v in VendorService.get_all_vendors(show_hidden=True)
        ]

        model["available_product_types"] = [select_item(all_text, "0")] + to_select_list(ProductType)
        return model

    @staticmethod
    def insert_category_product_model(model: dict):
        category_id = model["category_id"]
        for product_id in model.get("selected_product_ids") or []:
            product = ProductService.get_product_by_id(product_id)
            if product is None:
                logger.debug(f"Skipping unknown product {product_id}")
                continue
            if any(pc.category_id == category_id for pc in product.product_categories):
                continue
            ProductCategoryService.insert_product_category(
                ProductCategory(
                    category_id=category_id,
                    is_featured_product=False,
                    display_order=1,
                ),
                product.id,
            )

    @staticmethod
    def prepare_product_model(model: dict, page: int = 1, page_size: int = 20):
        products = ProductService.prepare_product_list(
            category_id=model.get("search_category_id"),
            brand_id=model.get("search_brand_id"),
            collection_id=model.get("search_collection_id"),
            store_id=model.get("search_store_id"),
            vendor_id=model.get("search_vendor_id"),
            product_type=model.get("search_product_type_id", 0),
            product_name=model.get("search_product_name"),
            page=page,
            page_size=page_size,
        )
        return ProductSchema(many=True).dump(products.items), products.total
