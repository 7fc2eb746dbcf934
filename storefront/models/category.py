from storefront.models.base import BaseModel
from storefront.extensions import db
from storefront.enums import ProductSorting


category_stores = db.Table(
    "category_stores",
    db.Column("category_id", db.String(36), db.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
    db.Column("store_id", db.String(36), db.ForeignKey("stores.id", ondelete="CASCADE"), primary_key=True),
)

# composite primary key keeps a discount applied at most once per category
category_discounts = db.Table(
    "category_discounts",
    db.Column("category_id", db.String(36), db.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
    db.Column("discount_id", db.String(36), db.ForeignKey("discounts.id", ondelete="CASCADE"), primary_key=True),
)


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(400), nullable=False, index=True)
    description = db.Column(db.Text)
    bottom_description = db.Column(db.Text)
    parent_category_id = db.Column(db.String(36), nullable=True, index=True)
    se_name = db.Column(db.String(400), index=True)
    picture_id = db.Column(db.String(36), nullable=True)
    category_layout_id = db.Column(db.String(36), nullable=True)
    meta_keywords = db.Column(db.String(400))
    meta_description = db.Column(db.Text)
    meta_title = db.Column(db.String(400))
    page_size = db.Column(db.Integer, default=6, nullable=False)
    allow_customers_to_select_page_size = db.Column(db.Boolean, default=True, nullable=False)
    page_size_options = db.Column(db.String(200))
    default_sort = db.Column(db.Integer, default=int(ProductSorting.POSITION), nullable=False)
    show_on_home_page = db.Column(db.Boolean, default=False, nullable=False)
    include_in_menu = db.Column(db.Boolean, default=True, nullable=False)
    hide_on_catalog = db.Column(db.Boolean, default=False, nullable=False)
    published = db.Column(db.Boolean, default=True, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)
    flag = db.Column(db.String(100))
    flag_style = db.Column(db.String(100))
    icon = db.Column(db.String(100))
    limited_to_stores = db.Column(db.Boolean, default=False, nullable=False)

    # Relationships
    stores = db.relationship("Store", secondary=category_stores, lazy="selectin")
    applied_discounts = db.relationship("Discount", secondary=category_discounts, lazy="selectin")
    locales = db.relationship(
        "CategoryLocale", backref="category", lazy="selectin", cascade="all, delete-orphan"
    )

    def get_translation(self, key: str, language_id: str = "") -> str:
        """Localized value of `key`, falling back to the column value"""
        if language_id:
            for locale in self.locales:
                if locale.language_id == language_id and locale.locale_key == key and locale.locale_value:
                    return locale.locale_value
        return getattr(self, key)

    def to_dict(self):
        data = super().to_dict()
        data["stores"] = [s.id for s in self.stores]
        data["applied_discounts"] = [d.id for d in self.applied_discounts]
        return data


class CategoryLocale(BaseModel):
    """Per-language value of a translatable category field"""
    __tablename__ = 'category_locales'

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_id = db.Column(db.String(36), nullable=False)
    locale_key = db.Column(db.String(100), nullable=False)
    locale_value = db.Column(db.Text)


class CategoryLayout(BaseModel):
    """Category layout (template) model"""
    __tablename__ = 'category_layouts'

    name = db.Column(db.String(255), nullable=False)
    view_path = db.Column(db.String(500), nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)
