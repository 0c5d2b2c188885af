from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./profgui.db"

    # Session tokens
    SECRET_KEY: str = "profgui-secret-key-dev"
    ALGORITHM: str = "HS256"
    SESSION_TTL_HOURS: int = 24
    SESSION_COOKIE_NAME: str = "profgui_session"
    SESSION_COOKIE_SECURE: bool = False

    # Password hashing (bcrypt accepts 4..31)
    BCRYPT_ROUNDS: int = 12

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
        "http://localhost:5173",
    ]

    # First administrator, created at startup when missing
    SEED_ADMIN_ON_STARTUP: bool = True
    ADMIN_PHONE: str = "620000000"
    ADMIN_EMAIL: str = "admin@profgui.com"
    ADMIN_PASSWORD: str = "admin123"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
