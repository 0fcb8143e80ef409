# blogapi/config.py
import os


def _database_url():
    url = os.environ.get("DATABASE_URL")
    # SQLAlchemy only accepts the postgresql:// scheme
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""


class Config:
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_HOURS = int(os.environ.get("JWT_EXPIRES_HOURS", 8))

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    BLOGS_PER_PAGE = 10
    BLOGS_MAX_PER_PAGE = 50


REQUIRED_SETTINGS = ("JWT_SECRET_KEY", "SQLALCHEMY_DATABASE_URI")


def validate_config(config):
    missing = [key for key in REQUIRED_SETTINGS if not config.get(key)]
    if missing:
        raise ConfigurationError(
            f"Missing required configuration: {', '.join(missing)}"
        )
