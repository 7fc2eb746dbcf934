import os
from urllib.parse import quote_plus

BASEDIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _postgres_uri():
    db_user = os.getenv("DB_USER")
    db_password = quote_plus(os.getenv("DB_PASSWORD", ""))
    db_host = os.getenv("DB_HOST")
    db_port = os.getenv("DB_PORT")
    db_name = os.getenv("DB_NAME")
    return (
        f"postgresql+psycopg2://{db_user}:{db_password}"
        f"@{db_host}:{db_port}/{db_name}"
    )


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "secret")

    SQLALCHEMY_DATABASE_URI = os.getenv("DB_URI") or _postgres_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "jwt-secret")

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASEDIR, "uploads"))
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024

    # Catalog settings
    DEFAULT_CATEGORY_PAGE_SIZE = int(os.getenv("DEFAULT_CATEGORY_PAGE_SIZE", 6))
    DEFAULT_CATEGORY_PAGE_SIZE_OPTIONS = os.getenv(
        "DEFAULT_CATEGORY_PAGE_SIZE_OPTIONS", "6, 3, 9"
    )

    # SEO settings
    SEO_ALLOW_UNICODE_CHARS_IN_URLS = (
        os.getenv("SEO_ALLOW_UNICODE_CHARS_IN_URLS", "False") == "True"
    )
    SEO_NAME_MAX_LENGTH = int(os.getenv("SEO_NAME_MAX_LENGTH", 200))


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "test-secret-key"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length"
