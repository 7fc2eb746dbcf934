from storefront.models.base import BaseModel
from storefront.extensions import db


class ContactUs(BaseModel):
    """Contact-us enquiry submitted from the storefront"""

    __tablename__ = "contact_us"

    customer_id = db.Column(db.String(36), nullable=True, index=True)
    store_id = db.Column(db.String(36), nullable=True, index=True)
    ip_address = db.Column(db.String(100))
    email = db.Column(db.String(255), nullable=False, index=True)
    full_name = db.Column(db.String(255))
    subject = db.Column(db.String(500))
    enquiry = db.Column(db.Text, nullable=False)
    email_account_id = db.Column(db.String(36), nullable=True)
    vendor_id = db.Column(db.String(36), nullable=True, index=True)
    contact_attribute_description = db.Column(db.Text)
    # list of {"key": ..., "value": ...}
    attributes = db.Column(db.JSON, default=list, nullable=False)
