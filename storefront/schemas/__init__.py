from marshmallow import Schema, fields, validate
from storefront.enums import UserRole
from .catalog_schema import (
    CategorySchema,
    CategoryLocaleSchema,
    CategoryListSearchSchema,
    CategoryProductSchema,
    AddCategoryProductSchema,
    DiscountSchema,
    ProductSchema,
)
from .contact_schema import ContactUsSchema, ContactUsCreateSchema, CustomAttributeSchema


class UserRegisterSchema(Schema):
    email = fields.Email(required=True)
    username = fields.Str(required=True, validate=validate.Length(min=3, max=100))
    password = fields.Str(required=True, validate=validate.Length(min=6))
    full_name = fields.Str(validate=validate.Length(max=255))
    phone = fields.Str(validate=validate.Length(max=20))
    role = fields.Str(
        load_default=UserRole.CUSTOMER.value,
        validate=validate.OneOf([UserRole.CUSTOMER.value]),
    )


class UserLoginSchema(Schema):
    username = fields.Str(required=True)
    password = fields.Str(required=True)


__all__ = [
    "UserRegisterSchema",
    "UserLoginSchema",
    "CategorySchema",
    "CategoryLocaleSchema",
    "CategoryListSearchSchema",
    "CategoryProductSchema",
    "AddCategoryProductSchema",
    "DiscountSchema",
    "ProductSchema",
    "ContactUsSchema",
    "ContactUsCreateSchema",
    "CustomAttributeSchema",
]
