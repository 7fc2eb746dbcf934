import pytest
from storefront import create_app, db
from storefront.config import TestingConfig
from storefront.enums import DiscountType, UserRole
from storefront.models import (
    User,
    Store,
    Vendor,
    Language,
    TranslationResource,
    Discount,
    Picture,
    Category,
    CategoryLayout,
    Product,
    ProductCategory,
)


@pytest.fixture(scope="function")
def app(tmp_path):
    """Create application for testing"""

    class Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path)

    app = create_app(Config)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


# User fixtures
@pytest.fixture
def customer_user(app):
    """Create a customer user"""
    user = User(
        email="customer@test.com",
        username="customer",
        full_name="Test Customer",
        phone="0901234567",
        role=UserRole.CUSTOMER,
        is_active=True,
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    """Create an admin user"""
    user = User(
        email="admin@test.com",
        username="admin",
        full_name="Test Admin",
        role=UserRole.ADMIN,
        is_active=True,
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


# Auth token fixtures
@pytest.fixture
def customer_token(client, customer_user):
    """Get customer authentication token"""
    response = client.post(
        "/api/auth/login", json={"username": "customer", "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["access_token"]


@pytest.fixture
def admin_token(client, admin_user):
    """Get admin authentication token"""
    response = client.post(
        "/api/auth/login", json={"username": "admin", "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["access_token"]


@pytest.fixture
def customer_headers(customer_token):
    """Customer authentication headers"""
    return {"Authorization": f"Bearer {customer_token}"}


@pytest.fixture
def admin_headers(admin_token):
    """Admin authentication headers"""
    return {"Authorization": f"Bearer {admin_token}"}


# Data fixtures
@pytest.fixture
def language(app):
    """Default language with the "All" resource"""
    language = Language(name="English", language_culture="en-US", unique_seo_code="en", display_order=1)
    db.session.add(language)
    db.session.flush()
    db.session.add(TranslationResource(language_id=language.id, name="Admin.Common.All", value="All"))
    db.session.commit()
    return language


@pytest.fixture
def store(app):
    store = Store(name="Main store", shortcut="Main", display_order=1)
    db.session.add(store)
    db.session.commit()
    return store


@pytest.fixture
def second_store(app):
    store = Store(name="Outlet store", shortcut="Outlet", display_order=2)
    db.session.add(store)
    db.session.commit()
    return store


@pytest.fixture
def vendor(app):
    vendor = Vendor(name="Acme", email="acme@test.com", active=True)
    db.session.add(vendor)
    db.session.commit()
    return vendor


@pytest.fixture
def layout(app):
    layout = CategoryLayout(name="Grid or Lines", view_path="CategoryLayout.GridOrLines", display_order=1)
    db.session.add(layout)
    db.session.commit()
    return layout


@pytest.fixture
def category_discounts(app):
    """Three category discounts and one order-total discount"""
    discounts = [
        Discount(name="Autumn sale", discount_type=DiscountType.ASSIGNED_TO_CATEGORIES),
        Discount(name="Black friday", discount_type=DiscountType.ASSIGNED_TO_CATEGORIES),
        Discount(name="Clearance", discount_type=DiscountType.ASSIGNED_TO_CATEGORIES, is_enabled=False),
        Discount(name="Order total", discount_type=DiscountType.ASSIGNED_TO_ORDER_TOTAL),
    ]
    db.session.add_all(discounts)
    db.session.commit()
    return discounts


@pytest.fixture
def picture(app):
    picture = Picture(mime_type="image/jpeg", seo_filename="old-name")
    db.session.add(picture)
    db.session.commit()
    return picture


@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(name="Electronics", se_name="electronics", description="Electronic devices")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def subcategory(app, category):
    subcategory = Category(name="Phones", se_name="phones", parent_category_id=category.id)
    db.session.add(subcategory)
    db.session.commit()
    return subcategory


@pytest.fixture
def product(app, vendor):
    """Create a test product"""
    product = Product(name="iPhone 15 Pro Max", sku="IP15PM", vendor_id=vendor.id, published=True)
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def product_category(app, product, category):
    """Map the test product to the test category"""
    mapping = ProductCategory(product_id=product.id, category_id=category.id, display_order=3)
    db.session.add(mapping)
    db.session.commit()
    return mapping
