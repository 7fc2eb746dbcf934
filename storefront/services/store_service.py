from storefront.extensions import db
from storefront.models.store import Store, Vendor


class StoreService:
    """Store lookups"""

    @staticmethod
    def get_all_stores():
        return Store.query.order_by(Store.display_order, Store.name).all()

    @staticmethod
    def get_store_by_id(store_id: str):
        if not store_id:
            return None
        return db.session.get(Store, store_id)

    @staticmethod
    def get_stores_by_ids(store_ids):
        if not store_ids:
            return []
        return Store.query.filter(Store.id.in_(list(store_ids))).all()

    @staticmethod
    def insert_store(name: str, shortcut: str, **kwargs) -> Store:
        store = Store(
            name=name,
            shortcut=shortcut,
            url=kwargs.get("url"),
            display_order=kwargs.get("display_order", 0),
        )
        return store.save()


class VendorService:
    """Vendor lookups"""

    @staticmethod
    def get_all_vendors(name: str = "", show_hidden: bool = False):
        query = Vendor.query.filter_by(deleted=False)
        if not show_hidden:
            query = query.filter_by(active=True)
        if name:
            query = query.filter(Vendor.name.contains(name, autoescape=True))
        return query.order_by(Vendor.display_order, Vendor.name).all()

    @staticmethod
    def get_vendor_by_id(vendor_id: str):
        if not vendor_id:
            return None
        return db.session.get(Vendor, vendor_id)
