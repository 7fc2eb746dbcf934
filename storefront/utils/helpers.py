from slugify import slugify as python_slugify


def slugify(text: str, allow_unicode: bool = False, max_length: int = 0) -> str:
    """Generate URL-friendly slug"""
    if not text:
        return ""
    return python_slugify(text, allow_unicode=allow_unicode, max_length=max_length)


def select_item(text, value) -> dict:
    """Option of a drop-down list in a view model"""
    return {"text": text, "value": value}


def client_ip(request) -> str:
    """Best effort client address, honouring a proxy's X-Forwarded-For"""
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or ""
