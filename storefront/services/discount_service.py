from sqlalchemy import or_

from storefront.extensions import db
from storefront.models.discount import Discount
from storefront.models.store import Store


class DiscountService:
    """Discount queries"""

    @staticmethod
    def get_discount_by_id(discount_id: str):
        if not discount_id:
            return None
        return db.session.get(Discount, discount_id)

    @staticmethod
    def get_all_discounts(discount_type=None, store_id: str = "", show_hidden: bool = False):
        """Discounts of a type, visible in the store.

        Hidden discounts (disabled, or outside their date window) are only
        returned with `show_hidden`.
        """
        query = Discount.query
        if discount_type is not None:
            query = query.filter(Discount.discount_type == int(discount_type))
        if store_id and store_id.strip():
            query = query.filter(
                or_(
                    Discount.limited_to_stores.is_(False),
                    Discount.stores.any(Store.id == store_id),
                )
            )

        discounts = query.order_by(Discount.name).all()
        if not show_hidden:
            discounts = [d for d in discounts if d.is_active_at()]
        return discounts

    @staticmethod
    def insert_discount(name: str, discount_type, **kwargs) -> Discount:
        discount = Discount(
            name=name,
            discount_type=int(discount_type),
            is_enabled=kwargs.get("is_enabled", True),
            start_date=kwargs.get("start_date"),
            end_date=kwargs.get("end_date"),
            limited_to_stores=kwargs.get("limited_to_stores", False),
            stores=kwargs.get("stores", []),
        )
        return discount.save()
