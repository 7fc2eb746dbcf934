from datetime import date, datetime, time

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from storefront.enums import UserRole
from storefront.schemas import ContactUsSchema
from storefront.services.contact_us_service import ContactUsService
from storefront.utils.decorators import role_required
from storefront.utils.validators import validate_pagination

contact_admin_bp = Blueprint("contact_admin", __name__)


def _parse_date(name, end_of_day=False):
    value = request.args.get(name)
    if not value:
        return None
    if end_of_day and len(value) == 10:
        # date only, the whole day is included
        return datetime.combine(date.fromisoformat(value), time.max)
    return datetime.fromisoformat(value)


@contact_admin_bp.route("", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_enquiries(current_user):
    """Get contact-us enquiries, newest first"""
    page, per_page = validate_pagination()
    try:
        from_date = _parse_date("from_date")
        to_date = _parse_date("to_date", end_of_day=True)
    except ValueError:
        return jsonify({"error": "Invalid date, expected ISO 8601"}), 400

    pagination = ContactUsService.get_all_contact_us(
        from_date=from_date,
        to_date=to_date,
        email=request.args.get("email", ""),
        vendor_id=request.args.get("vendor_id", ""),
        customer_id=request.args.get("customer_id", ""),
        store_id=request.args.get("store_id", ""),
        page=page,
        page_size=per_page,
    )
    return (
        jsonify(
            {
                "contact_us": ContactUsSchema(many=True).dump(pagination.items),
                "total": pagination.total,
                "page": page,
                "pages": pagination.pages,
            }
        ),
        200,
    )


@contact_admin_bp.route("/<contact_us_id>", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_enquiry(contact_us_id, current_user):
    contact_us = ContactUsService.get_contact_us_by_id(contact_us_id)
    if contact_us is None:
        return jsonify({"error": "Contact us not found"}), 404
    return jsonify({"contact_us": ContactUsSchema().dump(contact_us)}), 200


@contact_admin_bp.route("/<contact_us_id>", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def delete_enquiry(contact_us_id, current_user):
    contact_us = ContactUsService.get_contact_us_by_id(contact_us_id)
    if contact_us is None:
        return jsonify({"error": "Contact us not found"}), 404
    ContactUsService.delete_contact_us(contact_us)
    return jsonify({"message": "Contact us deleted successfully"}), 200


@contact_admin_bp.route("", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def clear_enquiries(current_user):
    deleted = ContactUsService.clear_table()
    return jsonify({"message": "Contact us cleared", "deleted": deleted}), 200
