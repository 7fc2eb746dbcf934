from storefront.routes.auth import auth_bp
from storefront.routes.contact import contact_bp
from storefront.routes.admin import admin_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(contact_bp, url_prefix='/api/contactus')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
