"""Catalog view models.

Entities are dumped into plain dicts for the admin UI and submitted forms are
loaded back through the same schemas, so the presentation shape stays separate
from the SQLAlchemy models.
"""
from marshmallow import Schema, fields, validate, EXCLUDE

from storefront.enums import ProductSorting, ProductType
from storefront.models.category import Category
from storefront.services.store_service import StoreService


TRANSLATABLE_CATEGORY_FIELDS = (
    "name",
    "description",
    "bottom_description",
    "meta_keywords",
    "meta_description",
    "meta_title",
)


class CategoryLocaleSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    language_id = fields.Str(required=True)
    name = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True)
    bottom_description = fields.Str(allow_none=True)
    meta_keywords = fields.Str(allow_none=True)
    meta_description = fields.Str(allow_none=True)
    meta_title = fields.Str(allow_none=True)
    se_name = fields.Str(allow_none=True)


class CategorySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=400))
    description = fields.Str(allow_none=True)
    bottom_description = fields.Str(allow_none=True)
    parent_category_id = fields.Str(allow_none=True)
    se_name = fields.Str(allow_none=True, validate=validate.Length(max=400))
    picture_id = fields.Str(allow_none=True)
    category_layout_id = fields.Str(allow_none=True)
    meta_keywords = fields.Str(allow_none=True)
    meta_description = fields.Str(allow_none=True)
    meta_title = fields.Str(allow_none=True)
    page_size = fields.Int(validate=validate.Range(min=1))
    allow_customers_to_select_page_size = fields.Bool()
    page_size_options = fields.Str(allow_none=True)
    default_sort = fields.Int(
        validate=validate.OneOf([int(s) for s in ProductSorting] + [-1])
    )
    show_on_home_page = fields.Bool()
    include_in_menu = fields.Bool()
    hide_on_catalog = fields.Bool()
    published = fields.Bool()
    display_order = fields.Int()
    flag = fields.Str(allow_none=True)
    flag_style = fields.Str(allow_none=True)
    icon = fields.Str(allow_none=True)
    limited_to_stores = fields.Bool()
    stores = fields.Method("get_store_ids", deserialize="load_store_ids")
    selected_discount_ids = fields.List(fields.Str(), load_default=None)
    locales = fields.Method("get_locales", deserialize="load_locales")
    breadcrumb = fields.Str(dump_only=True)

    def get_store_ids(self, obj):
        return [s.id for s in obj.stores]

    def load_store_ids(self, value):
        return [str(v) for v in (value or [])]

    def get_locales(self, obj):
        by_language = {}
        for locale in obj.locales:
            entry = by_language.setdefault(locale.language_id, {"language_id": locale.language_id})
            entry[locale.locale_key] = locale.locale_value
        return list(by_language.values())

    def load_locales(self, value):
        return CategoryLocaleSchema(many=True).load(value or [])


class CategoryListSearchSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    search_category_name = fields.Str(load_default="")
    search_store_id = fields.Str(load_default="")


class DiscountSchema(Schema):
    id = fields.Str()
    name = fields.Str()
    discount_type = fields.Int()
    is_enabled = fields.Bool()
    start_date = fields.DateTime(allow_none=True)
    end_date = fields.DateTime(allow_none=True)


class ProductSchema(Schema):
    id = fields.Str()
    name = fields.Str()
    sku = fields.Str(allow_none=True)
    product_type = fields.Int()
    vendor_id = fields.Str(allow_none=True)
    brand_id = fields.Str(allow_none=True)
    collection_id = fields.Str(allow_none=True)
    published = fields.Bool()


class CategoryProductSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(required=True)
    category_id = fields.Str()
    product_id = fields.Str(required=True)
    product_name = fields.Str(dump_only=True, allow_none=True)
    is_featured_product = fields.Bool(load_default=False)
    display_order = fields.Int(load_default=0)


class AddCategoryProductSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    category_id = fields.Str()
    selected_product_ids = fields.List(fields.Str(), load_default=list)
    search_product_name = fields.Str(load_default="")
    search_category_id = fields.Str(load_default="")
    search_brand_id = fields.Str(load_default="")
    search_collection_id = fields.Str(load_default="")
    search_store_id = fields.Str(load_default="")
    search_vendor_id = fields.Str(load_default="")
    search_product_type_id = fields.Int(
        load_default=0,
        validate=validate.OneOf([0] + [int(t) for t in ProductType]),
    )


def to_model(category) -> dict:
    """Category entity -> view model"""
    return CategorySchema().dump(category)


ENTITY_FIELDS = (
    "name",
    "description",
    "bottom_description",
    "parent_category_id",
    "picture_id",
    "category_layout_id",
    "meta_keywords",
    "meta_description",
    "meta_title",
    "page_size",
    "allow_customers_to_select_page_size",
    "page_size_options",
    "default_sort",
    "show_on_home_page",
    "include_in_menu",
    "hide_on_catalog",
    "published",
    "display_order",
    "flag",
    "flag_style",
    "icon",
    "limited_to_stores",
)


def to_entity(model: dict, category=None):
    """Copy the editable view-model fields onto a (new or existing) Category.

    Applied discounts, locales and the SEO name are reconciled separately by
    the view-model service.
    """
    if category is None:
        category = Category()
    for key in ENTITY_FIELDS:
        if key in model:
            value = model[key]
            if key in ("parent_category_id", "picture_id", "category_layout_id") and not value:
                value = None
            setattr(category, key, value)
    if "stores" in model:
        category.stores = StoreService.get_stores_by_ids(model["stores"])
    return category
