from marshmallow import Schema, fields, validate, EXCLUDE


class CustomAttributeSchema(Schema):
    key = fields.Str(required=True)
    value = fields.Str(load_default="")


class ContactUsCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    full_name = fields.Str(validate=validate.Length(max=255))
    subject = fields.Str(validate=validate.Length(max=500))
    enquiry = fields.Str(required=True, validate=validate.Length(min=1))
    store_id = fields.Str(allow_none=True)
    vendor_id = fields.Str(allow_none=True)
    attributes = fields.List(fields.Nested(CustomAttributeSchema), load_default=list)


class ContactUsSchema(Schema):
    id = fields.Str()
    customer_id = fields.Str(allow_none=True)
    store_id = fields.Str(allow_none=True)
    ip_address = fields.Str(allow_none=True)
    email = fields.Str()
    full_name = fields.Str(allow_none=True)
    subject = fields.Str(allow_none=True)
    enquiry = fields.Str()
    email_account_id = fields.Str(allow_none=True)
    vendor_id = fields.Str(allow_none=True)
    contact_attribute_description = fields.Str(allow_none=True)
    attributes = fields.List(fields.Nested(CustomAttributeSchema))
    created_at = fields.DateTime()
