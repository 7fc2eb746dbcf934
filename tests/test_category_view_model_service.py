import pytest
from storefront.extensions import db
from storefront.models import Category, Picture, Product, ProductCategory
from storefront.services.category_service import CategoryService
from storefront.services.category_view_model_service import CategoryViewModelService
from storefront.services.slug_service import SlugService


class TestPrepareModels:
    """Test view-model preparation"""

    def test_prepare_category_list_model(self, app, language, store, second_store):
        model = CategoryViewModelService.prepare_category_list_model()

        assert model["available_stores"] == [
            {"text": "All", "value": ""},
            {"text": "Main", "value": store.id},
            {"text": "Outlet", "value": second_store.id},
        ]

    def test_prepare_category_list_model_for_store(self, app, language, store, second_store):
        model = CategoryViewModelService.prepare_category_list_model(second_store.id)

        assert [s["text"] for s in model["available_stores"]] == ["All", "Outlet"]

    def test_prepare_category_list_with_breadcrumbs(self, app, category, subcategory):
        models, total = CategoryViewModelService.prepare_category_list(page=1, page_size=10)

        assert total == 2
        breadcrumbs = {m["name"]: m["breadcrumb"] for m in models}
        assert breadcrumbs == {"Electronics": "Electronics", "Phones": "Electronics >> Phones"}

    def test_prepare_new_category_model(self, app, layout, category_discounts):
        model = CategoryViewModelService.prepare_new_category_model()

        assert model["available_sort_options"][0] == {"text": "None", "value": "-1"}
        assert model["available_sort_options"][1] == {"text": "Position", "value": "0"}
        assert model["available_category_layouts"] == [{"text": "Grid or Lines", "value": layout.id}]
        # hidden category discounts are offered too, order-total ones are not
        assert [d["name"] for d in model["available_discounts"]] == ["Autumn sale", "Black friday", "Clearance"]
        assert "selected_discount_ids" not in model
        assert model["page_size"] == 6
        assert model["page_size_options"] == "6, 3, 9"
        assert model["published"] is True
        assert model["include_in_menu"] is True
        assert model["allow_customers_to_select_page_size"] is True

    def test_prepare_category_model_selects_applied_discounts(self, app, category, category_discounts):
        category.applied_discounts = [category_discounts[1]]
        db.session.commit()

        model = CategoryViewModelService.prepare_category_model({"id": category.id}, category)

        assert model["selected_discount_ids"] == [category_discounts[1].id]
        assert len(model["available_discounts"]) == 3

    def test_prepare_add_category_product_model(self, app, language, store, vendor):
        model = CategoryViewModelService.prepare_add_category_product_model()

        assert model["available_stores"] == [
            {"text": "All", "value": " "},
            {"text": "Main", "value": store.id},
        ]
        assert model["available_vendors"] == [
            {"text": "All", "value": " "},
            {"text": "Acme", "value": vendor.id},
        ]
        assert model["available_product_types"][0] == {"text": "All", "value": "0"}
        assert {"text": "Simple product", "value": "5"} in model["available_product_types"]


class TestInsertCategoryModel:
    """Test creating a category from a submitted form"""

    def test_insert_is_retrievable(self, app, store):
        model = {
            "name": "Garden Tools",
            "description": "Everything for the garden",
            "published": False,
            "display_order": 4,
            "limited_to_stores": True,
            "stores": [store.id],
        }

        category = CategoryViewModelService.insert_category_model(model)
        stored = CategoryService.get_category_by_id(category.id)

        assert stored.name == "Garden Tools"
        assert stored.description == "Everything for the garden"
        assert stored.published is False
        assert stored.display_order == 4
        assert [s.id for s in stored.stores] == [store.id]
        assert stored.se_name == "garden-tools"
        assert model["se_name"] == "garden-tools"
        assert SlugService.get_active_slug(category.id, "Category").slug == "garden-tools"

    def test_insert_applies_selected_category_discounts(self, app, category_discounts):
        autumn, black_friday, clearance, order_total = category_discounts
        model = {
            "name": "Shoes",
            "selected_discount_ids": [black_friday.id, order_total.id, "unknown"],
        }

        category = CategoryViewModelService.insert_category_model(model)

        assert [d.id for d in category.applied_discounts] == [black_friday.id]

    def test_insert_syncs_picture_seo_name(self, app, picture):
        category = CategoryViewModelService.insert_category_model(
            {"name": "Summer Hats", "picture_id": picture.id}
        )

        assert category.picture_id == picture.id
        assert db.session.get(Picture, picture.id).seo_filename == "summer-hats"

    def test_insert_with_colliding_se_name(self, app, category):
        SlugService.save_slug(category, "electronics")

        created = CategoryViewModelService.insert_category_model(
            {"name": "Electronics", "se_name": "electronics"}
        )

        assert created.se_name == "electronics-2"

    def test_insert_locales(self, app, language):
        category = CategoryViewModelService.insert_category_model(
            {
                "name": "Books",
                "locales": [
                    {"language_id": language.id, "name": "Bücher", "description": "", "se_name": ""},
                ],
            }
        )

        keys = {(l.language_id, l.locale_key): l.locale_value for l in category.locales}
        assert keys[(language.id, "name")] == "Bücher"
        assert (language.id, "description") not in keys
        # a blank localized se name is derived from the localized name
        assert keys[(language.id, "se_name")] == "bucher"
        assert SlugService.get_active_slug(category.id, "Category", language.id).slug == "bucher"


class TestUpdateCategoryModel:
    """Test editing a category"""

    def test_update_fields_and_slug(self, app, category):
        SlugService.save_slug(category, "electronics")

        updated = CategoryViewModelService.update_category_model(
            category, {"name": "Consumer Electronics", "se_name": "", "meta_title": "Buy electronics"}
        )

        assert updated.name == "Consumer Electronics"
        assert updated.meta_title == "Buy electronics"
        assert updated.se_name == "consumer-electronics"
        assert SlugService.get_active_slug(category.id, "Category").slug == "consumer-electronics"

    @pytest.mark.parametrize(
        "initial, selected",
        [
            ([], [0, 1]),
            ([0, 1], [1]),
            ([0], [1, 2]),
            ([0, 1, 2], []),
        ],
    )
    def test_discount_reconciliation(self, app, category, category_discounts, initial, selected):
        """Applied discounts equal exactly the submitted selection"""
        category.applied_discounts = [category_discounts[i] for i in initial]
        db.session.commit()

        selected_ids = [category_discounts[i].id for i in selected]
        updated = CategoryViewModelService.update_category_model(
            category, {"name": category.name, "selected_discount_ids": selected_ids}
        )

        assert sorted(d.id for d in updated.applied_discounts) == sorted(selected_ids)

    def test_non_category_discounts_are_never_applied(self, app, category, category_discounts):
        order_total = category_discounts[3]

        updated = CategoryViewModelService.update_category_model(
            category, {"name": category.name, "selected_discount_ids": [order_total.id]}
        )

        assert updated.applied_discounts == []

    def test_replaced_picture_is_deleted(self, app, category, picture):
        category.picture_id = picture.id
        db.session.commit()
        new_picture = Picture(mime_type="image/png", seo_filename="")
        db.session.add(new_picture)
        db.session.commit()
        old_picture_id = picture.id

        CategoryViewModelService.update_category_model(
            category, {"name": "Electronics", "picture_id": new_picture.id}
        )

        assert db.session.get(Picture, old_picture_id) is None
        assert db.session.get(Picture, new_picture.id).seo_filename == "electronics"

    def test_cleared_picture_is_deleted(self, app, category, picture):
        category.picture_id = picture.id
        db.session.commit()
        old_picture_id = picture.id

        updated = CategoryViewModelService.update_category_model(
            category, {"name": "Electronics", "picture_id": None}
        )

        assert updated.picture_id is None
        assert db.session.get(Picture, old_picture_id) is None

    def test_unchanged_picture_is_kept(self, app, category, picture):
        category.picture_id = picture.id
        db.session.commit()

        CategoryViewModelService.update_category_model(category, {"name": "Electronics"})

        assert db.session.get(Picture, picture.id).seo_filename == "electronics"


class TestDeleteCategory:

    def test_deleted_category_leaves_listing(self, app, category, subcategory):
        CategoryViewModelService.delete_category(category)

        models, total = CategoryViewModelService.prepare_category_list(page=1, page_size=10)
        assert total == 1
        assert [m["name"] for m in models] == ["Phones"]
        assert models[0]["breadcrumb"] == "Phones"


class TestCategoryProducts:
    """Test product <-> category assignment"""

    def test_prepare_category_product_model(self, app, category, product, product_category):
        models, total = CategoryViewModelService.prepare_category_product_model(category.id)

        assert total == 1
        assert models == [
            {
                "id": product_category.id,
                "category_id": category.id,
                "product_id": product.id,
                "product_name": "iPhone 15 Pro Max",
                "is_featured_product": False,
                "display_order": 3,
            }
        ]

    def test_update_product_category_model(self, app, product, product_category):
        updated = CategoryViewModelService.update_product_category_model(
            {
                "id": product_category.id,
                "product_id": product.id,
                "is_featured_product": True,
                "display_order": 9,
            }
        )

        assert updated.is_featured_product is True
        assert db.session.get(ProductCategory, product_category.id).display_order == 9

    def test_update_product_category_model_unknown_mapping(self, app, product, product_category):
        with pytest.raises(ValueError, match="No product category mapping found"):
            CategoryViewModelService.update_product_category_model(
                {"id": "missing", "product_id": product.id, "is_featured_product": True, "display_order": 1}
            )

    def test_update_product_category_model_unknown_product(self, app):
        with pytest.raises(ValueError, match="No product found"):
            CategoryViewModelService.update_product_category_model(
                {"id": "missing", "product_id": "missing", "is_featured_product": True, "display_order": 1}
            )

    def test_delete_product_category_model(self, app, product, product_category):
        CategoryViewModelService.delete_product_category_model(product_category.id, product.id)

        assert db.session.get(ProductCategory, product_category.id) is None

    def test_delete_product_category_model_errors(self, app, product, product_category):
        with pytest.raises(ValueError, match="No product found"):
            CategoryViewModelService.delete_product_category_model(product_category.id, "missing")

        with pytest.raises(ValueError, match="No product category mapping found"):
            CategoryViewModelService.delete_product_category_model("missing", product.id)

    def test_insert_category_product_model(self, app, category, product, product_category):
        other = Product(name="Pixel 9")
        db.session.add(other)
        db.session.commit()

        CategoryViewModelService.insert_category_product_model(
            {"category_id": category.id, "selected_product_ids": [product.id, other.id, "missing"]}
        )

        mappings = ProductCategory.query.filter_by(category_id=category.id).all()
        assert len(mappings) == 2
        added = next(m for m in mappings if m.product_id == other.id)
        assert added.is_featured_product is False
        assert added.display_order == 1

    def test_prepare_product_model(self, app, product, vendor):
        db.session.add(Product(name="Pixel 9"))
        db.session.commit()

        models, total = CategoryViewModelService.prepare_product_model(
            {"search_vendor_id": vendor.id, "search_product_name": "", "search_product_type_id": 0}
        )

        assert total == 1
        assert models[0]["name"] == "iPhone 15 Pro Max"
