from .user import User
from .store import Store, Vendor
from .language import Language, TranslationResource
from .discount import Discount
from .picture import Picture
from .category import Category, CategoryLocale, CategoryLayout
from .product import Product, ProductCategory
from .url_entity import UrlEntity
from .contact_us import ContactUs

__all__ = [
    "User",
    "Store",
    "Vendor",
    "Language",
    "TranslationResource",
    "Discount",
    "Picture",
    "Category",
    "CategoryLocale",
    "CategoryLayout",
    "Product",
    "ProductCategory",
    "UrlEntity",
    "ContactUs",
]
