from enum import Enum, IntEnum


class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class DiscountType(IntEnum):
    ASSIGNED_TO_ORDER_TOTAL = 0
    ASSIGNED_TO_SKUS = 2
    ASSIGNED_TO_CATEGORIES = 5
    ASSIGNED_TO_BRANDS = 10
    ASSIGNED_TO_COLLECTIONS = 15
    ASSIGNED_TO_SHIPPING = 20
    ASSIGNED_TO_ORDER_SUBTOTAL = 25


class ProductSorting(IntEnum):
    POSITION = 0
    NAME_ASC = 5
    NAME_DESC = 6
    PRICE_ASC = 10
    PRICE_DESC = 11
    CREATED_ON = 15


class ProductType(IntEnum):
    SIMPLE_PRODUCT = 5
    GROUPED_PRODUCT = 10
    RESERVATION = 15
    BUNDLED_PRODUCT = 20
    AUCTION = 25


def to_select_list(enum_class):
    """Build [{"text", "value"}] items from an enum, e.g. NAME_ASC -> "Name asc"."""
    return [
        {"text": member.name.replace("_", " ").capitalize(), "value": str(member.value)}
        for member in enum_class
    ]
