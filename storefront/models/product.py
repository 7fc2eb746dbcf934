from storefront.models.base import BaseModel
from storefront.extensions import db
from storefront.enums import ProductType


product_stores = db.Table(
    "product_stores",
    db.Column("product_id", db.String(36), db.ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    db.Column("store_id", db.String(36), db.ForeignKey("stores.id", ondelete="CASCADE"), primary_key=True),
)


class Product(BaseModel):
    __tablename__ = "products"

    name = db.Column(db.String(400), nullable=False, index=True)
    sku = db.Column(db.String(100), index=True)
    short_description = db.Column(db.Text)
    product_type = db.Column(db.Integer, default=int(ProductType.SIMPLE_PRODUCT), nullable=False)
    vendor_id = db.Column(
        db.String(36),
        db.ForeignKey("vendors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    brand_id = db.Column(db.String(36), nullable=True, index=True)
    collection_id = db.Column(db.String(36), nullable=True, index=True)
    published = db.Column(db.Boolean, default=True, nullable=False)
    limited_to_stores = db.Column(db.Boolean, default=False, nullable=False)

    # Relationships
    stores = db.relationship("Store", secondary=product_stores, lazy="selectin")
    product_categories = db.relationship(
        "ProductCategory",
        backref="product",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    def to_dict(self):
        data = super().to_dict()
        data["stores"] = [s.id for s in self.stores]
        return data


class ProductCategory(BaseModel):
    """Product <-> category mapping"""

    __tablename__ = "product_categories"
    __table_args__ = (
        db.UniqueConstraint("product_id", "category_id", name="uq_product_category"),
    )

    product_id = db.Column(
        db.String(36),
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_featured_product = db.Column(db.Boolean, default=False, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)
