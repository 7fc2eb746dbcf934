import pytest
from datetime import datetime, timedelta, timezone
from storefront.extensions import db
from storefront.enums import DiscountType
from storefront.models import Category, CategoryLocale, Discount, User


class TestUserModel:
    """Test User model"""

    def test_set_password(self, app):
        """Test password hashing"""
        user = User(username="test", email="test@test.com", role="customer")
        user.set_password("password123")

        assert user.password_hash != "password123"
        assert user.check_password("password123")
        assert not user.check_password("wrongpassword")

    def test_has_role(self, app, customer_user, admin_user):
        """Test role checking"""
        assert customer_user.has_role("customer")
        assert not customer_user.has_role("admin")
        assert admin_user.has_role("admin")

    def test_to_dict_excludes_password(self, app, customer_user):
        """Test to_dict excludes sensitive data"""
        data = customer_user.to_dict()
        assert "password_hash" not in data
        assert data["role"] == "customer"

    def test_soft_delete(self, app, customer_user):
        customer_user.soft_delete()
        assert customer_user.is_deleted
        customer_user.restore()
        assert not customer_user.is_deleted


class TestDiscountModel:
    """Test Discount model"""

    def test_disabled_discount_is_inactive(self, app):
        discount = Discount(name="Off", discount_type=DiscountType.ASSIGNED_TO_CATEGORIES, is_enabled=False)
        assert not discount.is_active_at()

    def test_date_window(self, app):
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        discount = Discount(
            name="Week",
            discount_type=DiscountType.ASSIGNED_TO_CATEGORIES,
            is_enabled=True,
            start_date=now - timedelta(days=1),
            end_date=now + timedelta(days=6),
        )
        assert discount.is_active_at(now)
        assert not discount.is_active_at(now - timedelta(days=2))
        assert not discount.is_active_at(now + timedelta(days=7))


class TestCategoryModel:
    """Test Category model"""

    def test_defaults(self, app, category):
        assert category.published is True
        assert category.include_in_menu is True
        assert category.page_size == 6
        assert category.applied_discounts == []

    def test_update_ignores_unknown_fields(self, app, category):
        category.update(name="Gadgets", display_order=4, not_a_column="x")

        stored = db.session.get(Category, category.id)
        assert stored.name == "Gadgets"
        assert stored.display_order == 4
        assert not hasattr(stored, "not_a_column")

    def test_get_translation(self, app, category, language):
        category.locales = [
            CategoryLocale(language_id=language.id, locale_key="name", locale_value="Elektronika")
        ]
        db.session.commit()

        assert category.get_translation("name", language.id) == "Elektronika"
        assert category.get_translation("name") == "Electronics"
        assert category.get_translation("name", "other-language") == "Electronics"

    def test_discount_applied_once(self, app, category, category_discounts):
        """A discount can be applied to a category only once"""
        from sqlalchemy.exc import IntegrityError
        from storefront.models.category import category_discounts as association

        category.applied_discounts = [category_discounts[0]]
        db.session.commit()

        with pytest.raises(IntegrityError):
            db.session.execute(
                association.insert().values(category_id=category.id, discount_id=category_discounts[0].id)
            )
            db.session.commit()
        db.session.rollback()

    def test_to_dict_lists_ids(self, app, category, category_discounts, store):
        category.applied_discounts = [category_discounts[1]]
        category.stores = [store]
        db.session.commit()

        data = category.to_dict()
        assert data["applied_discounts"] == [category_discounts[1].id]
        assert data["stores"] == [store.id]
