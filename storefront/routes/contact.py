from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from storefront.schemas import ContactUsCreateSchema, ContactUsSchema
from storefront.services.contact_us_service import ContactUsService
from storefront.services.store_service import StoreService
from storefront.utils.helpers import client_ip
from storefront.utils.validators import validate_schema

contact_bp = Blueprint("contact", __name__)


@contact_bp.route("", methods=["POST"])
@jwt_required(optional=True)
@validate_schema(ContactUsCreateSchema)
def submit_enquiry():
    """Storefront contact-us form"""
    data = request.validated_data

    store_id = data.pop("store_id", None)
    if store_id and StoreService.get_store_by_id(store_id) is None:
        return jsonify({"error": "Store not found"}), 400

    contact_us = ContactUsService.insert_contact_us(
        customer_id=get_jwt_identity(),
        store_id=store_id,
        ip_address=client_ip(request),
        **data,
    )
    return (
        jsonify(
            {
                "message": "Your enquiry has been successfully sent",
                "contact_us": ContactUsSchema().dump(contact_us),
            }
        ),
        201,
    )
