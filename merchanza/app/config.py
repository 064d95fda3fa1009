import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///merchanza.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False

    # Session tokens. No default: the factory refuses to start without a secret.
    TOKEN_SECRET = os.getenv("TOKEN_SECRET")
    TOKEN_SALT = os.getenv("TOKEN_SALT", "merchanza-session")
    AUTH_HEADER = os.getenv("AUTH_HEADER", "auth-token")

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.abspath(os.path.join("upload", "images")))
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_SIZE_MB", "16")) * 1024 * 1024
    ALLOWED_IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

    CART_UPDATE_ATTEMPTS = int(os.getenv("CART_UPDATE_ATTEMPTS", "5"))

    # Storefront slices
    NEW_COLLECTION_SIZE = int(os.getenv("NEW_COLLECTION_SIZE", "8"))
    POPULAR_SIZE = int(os.getenv("POPULAR_SIZE", "4"))
    POPULAR_CATEGORY = os.getenv("POPULAR_CATEGORY", "clothing")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "4000"))
