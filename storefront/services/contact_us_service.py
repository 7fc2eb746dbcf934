import logging

from markupsafe import escape

from storefront.extensions import db
from storefront.models.contact_us import ContactUs

logger = logging.getLogger(__name__)


class ContactAttributeFormatter:
    """Renders contact form custom attributes for display"""

    @staticmethod
    def format_attributes(attributes, separator: str = "<br />") -> str:
        lines = []
        for attribute in attributes or []:
            key = attribute.get("key")
            if not key:
                continue
            lines.append(f"{escape(key)}: {escape(attribute.get('value') or '')}")
        return separator.join(lines)


class ContactUsService:
    """Contact-us enquiries"""

    @staticmethod
    def insert_contact_us(email: str, enquiry: str, **kwargs) -> ContactUs:
        attributes = kwargs.get("attributes") or []
        description = kwargs.get("contact_attribute_description")
        if description is None:
            description = ContactAttributeFormatter.format_attributes(attributes)

        contact_us = ContactUs(
            email=email,
            enquiry=enquiry,
            full_name=kwargs.get("full_name"),
            subject=kwargs.get("subject"),
            customer_id=kwargs.get("customer_id"),
            store_id=kwargs.get("store_id"),
            vendor_id=kwargs.get("vendor_id"),
            ip_address=kwargs.get("ip_address"),
            email_account_id=kwargs.get("email_account_id"),
            contact_attribute_description=description,
            attributes=attributes,
        )
        db.session.add(contact_us)
        db.session.commit()
        logger.info(f"Contact-us enquiry {contact_us.id} from {email}")
        return contact_us

    @staticmethod
    def get_contact_us_by_id(contact_us_id: str):
        if not contact_us_id:
            return None
        return db.session.get(ContactUs, contact_us_id)

    @staticmethod
    def get_all_contact_us(from_date=None, to_date=None, email: str = "", vendor_id: str = "",
    customer_id: str = "", store_id: str = "", page: int = 1, page_size: int = 20):
        """Paged enquiries, newest first"""
        query = ContactUs.query

        if from_date:
            query = query.filter(ContactUs.created_at >= from_date)
        if to_date:
            query = query.filter(ContactUs.created_at <= to_date)
        if email:
            query = query.filter(ContactUs.email.contains(email, autoescape=True))
        if vendor_id:
            query = query.filter_by(vendor_id=vendor_id)
        if customer_id:
            query = query.filter_by(customer_id=customer_id)
        if store_id:
            query = query.filter_by(store_id=store_id)

        return query.order_by(ContactUs.created_at.desc()).paginate(
            page=page, per_page=page_size, error_out=False
        )

    @staticmethod
    def delete_contact_us(contact_us: ContactUs):
        db.session.delete(contact_us)
        db.session.commit()

    @staticmethod
    def clear_table() -> int:
        deleted = ContactUs.query.delete()
        db.session.commit()
        logger.info(f"Cleared {deleted} contact-us enquiries")
        return deleted
