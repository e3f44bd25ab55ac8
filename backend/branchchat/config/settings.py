"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


class Config:
    DEBUG = _as_bool(os.getenv("DEBUG", "false"))

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3001"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Record stores (one JSON array file per entity type)
    STORAGE_DIR = os.getenv("STORAGE_DIR", "./storage")
    USERS_FILE = os.getenv("USERS_FILE", "users.json")
    CONVERSATIONS_FILE = os.getenv("CONVERSATIONS_FILE", "conversations.json")
    MESSAGES_FILE = os.getenv("MESSAGES_FILE", "messages.json")

    # Video upload
    VIDEO_DIR = os.getenv("VIDEO_DIR", "")  # empty -> <STORAGE_DIR>/videos
    VIDEO_URL_PREFIX = os.getenv("VIDEO_URL_PREFIX", "/videos")
    MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "100"))
    ALLOWED_VIDEO_EXTENSIONS = os.getenv(
        "ALLOWED_VIDEO_EXTENSIONS", "webm,mp4,ogg,mov,mkv"
    ).split(",")

    # Auth
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
    AUTH_TOKEN_SECRET = os.getenv(
        "AUTH_TOKEN_SECRET", "change-me-branchchat-development-signing-key"
    )
    AUTH_TOKEN_ISSUER = os.getenv("AUTH_TOKEN_ISSUER", "branchchat")
    AUTH_TOKEN_AUDIENCE = os.getenv("AUTH_TOKEN_AUDIENCE", "branchchat-web")
    AUTH_TOKEN_TTL_MINUTES = int(os.getenv("AUTH_TOKEN_TTL_MINUTES", "720"))

    @classmethod
    def users_path(cls) -> str:
        return os.path.join(cls.STORAGE_DIR, cls.USERS_FILE)

    @classmethod
    def conversations_path(cls) -> str:
        return os.path.join(cls.STORAGE_DIR, cls.CONVERSATIONS_FILE)

    @classmethod
    def messages_path(cls) -> str:
        return os.path.join(cls.STORAGE_DIR, cls.MESSAGES_FILE)

    @classmethod
    def video_dir(cls) -> str:
        return cls.VIDEO_DIR or os.path.join(cls.STORAGE_DIR, "videos")


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    BCRYPT_ROUNDS = 4


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
