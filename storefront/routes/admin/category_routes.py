from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from storefront.enums import UserRole
from storefront.schemas import (
    CategorySchema,
    CategoryProductSchema,
    AddCategoryProductSchema,
)
from storefront.schemas.catalog_schema import to_model
from storefront.services.category_service import CategoryService
from storefront.services.category_view_model_service import CategoryViewModelService
from storefront.utils.decorators import role_required
from storefront.utils.validators import validate_schema, validate_pagination

category_admin_bp = Blueprint("categories", __name__)


def _get_category_or_404(category_id):
    category = CategoryService.get_category_by_id(category_id)
    if category is None:
        return None, (jsonify({"error": "Category not found"}), 404)
    return category, None


@category_admin_bp.route("/list-model", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_list_model(current_user):
    """Search form of the category list"""
    model = CategoryViewModelService.prepare_category_list_model(request.args.get("store_id", ""))
    return jsonify(model), 200


@category_admin_bp.route("", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_categories(current_user):
    """Get all categories"""
    page, per_page = validate_pagination()
    categories, total = CategoryViewModelService.prepare_category_list(
        search_category_name=request.args.get("search_category_name", ""),
        search_store_id=request.args.get("search_store_id", ""),
        page=page,
        page_size=per_page,
    )
    return jsonify({"categories": categories, "total": total, "page": page}), 200


@category_admin_bp.route("/create-model", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_create_model(current_user):
    """Defaults of the create form"""
    model = CategoryViewModelService.prepare_new_category_model(request.args.get("store_id", ""))
    return jsonify({"category": model}), 200


@category_admin_bp.route("", methods=["POST"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(CategorySchema)
def create_category(current_user):
    model = request.validated_data
    category = CategoryViewModelService.insert_category_model(model)
    return (
        jsonify({"message": "Category created successfully", "category": to_model(category)}),
        201,
    )


@category_admin_bp.route("/<category_id>", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_category(category_id, current_user):
    """Edit form of a category"""
    category, error = _get_category_or_404(category_id)
    if error:
        return error

    model = CategoryViewModelService.prepare_category_model(
        to_model(category), category, request.args.get("store_id", "")
    )
    return jsonify({"category": model}), 200


@category_admin_bp.route("/<category_id>", methods=["PUT"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(CategorySchema)
def update_category(category_id, current_user):
    category, error = _get_category_or_404(category_id)
    if error:
        return error

    category = CategoryViewModelService.update_category_model(category, request.validated_data)
    return (
        jsonify({"message": "Category updated successfully", "category": to_model(category)}),
        200,
    )


@category_admin_bp.route("/<category_id>", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def delete_category(category_id, current_user):
    category, error = _get_category_or_404(category_id)
    if error:
        return error

    CategoryViewModelService.delete_category(category)
    return jsonify({"message": "Category deleted successfully"}), 200


@category_admin_bp.route("/<category_id>/products", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_category_products(category_id, current_user):
    """Products assigned to a category"""
    page, per_page = validate_pagination()
    products, total = CategoryViewModelService.prepare_category_product_model(
        category_id, page, per_page
    )
    return jsonify({"products": products, "total": total, "page": page}), 200


@category_admin_bp.route("/<category_id>/products/<product_category_id>", methods=["PUT"])
@jwt_required()
@role_required(UserRole.ADMIN)
def update_category_product(category_id, product_category_id, current_user):
    data = dict(request.get_json(silent=True) or {})
    data["id"] = product_category_id
    data["category_id"] = category_id
    model = CategoryProductSchema().load(data)
    try:
        product_category = CategoryViewModelService.update_product_category_model(model)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return (
        jsonify(
            {
                "message": "Product category updated successfully",
                "product_category": product_category.to_dict(),
            }
        ),
        200,
    )


@category_admin_bp.route("/<category_id>/products/<product_category_id>", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def delete_category_product(category_id, product_category_id, current_user):
    product_id = request.args.get("product_id") or (request.get_json(silent=True) or {}).get("product_id")
    if not product_id:
        return jsonify({"error": "product_id is required"}), 400
    try:
        CategoryViewModelService.delete_product_category_model(
            product_category_id, product_id, category_id
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify({"message": "Product category deleted successfully"}), 200


@category_admin_bp.route("/<category_id>/products/add-model", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_add_products_model(category_id, current_user):
    """Search form of the add-products popup"""
    model = CategoryViewModelService.prepare_add_category_product_model(request.args.get("store_id", ""))
    model["category_id"] = category_id
    return jsonify(model), 200


@category_admin_bp.route("/<category_id>/products/search", methods=["POST"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(AddCategoryProductSchema)
def search_products(category_id, current_user):
    page, per_page = validate_pagination()
    products, total = CategoryViewModelService.prepare_product_model(
        request.validated_data, page, per_page
    )
    return jsonify({"products": products, "total": total, "page": page}), 200


@category_admin_bp.route("/<category_id>/products", methods=["POST"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(AddCategoryProductSchema)
def add_category_products(category_id, current_user):
    category, error = _get_category_or_404(category_id)
    if error:
        return error

    model = request.validated_data
    model["category_id"] = category.id
    CategoryViewModelService.insert_category_product_model(model)
    return jsonify({"message": "Products added successfully"}), 201
