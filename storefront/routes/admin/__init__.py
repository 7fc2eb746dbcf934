from flask import Blueprint
from .category_routes import category_admin_bp
from .contact_routes import contact_admin_bp

admin_bp = Blueprint("admin", __name__)

admin_bp.register_blueprint(category_admin_bp, url_prefix="/categories")
admin_bp.register_blueprint(contact_admin_bp, url_prefix="/contactus")
