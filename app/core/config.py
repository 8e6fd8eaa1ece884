from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"

    DATABASE_URL: str = "sqlite:///./app.db"
    PROJECT_NAME: str = "FastAPI Quiz Backend"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Identity forwarded by the upstream auth gateway
    AUTH_USER_HEADER: str = "X-Authenticated-User"

    # Notification dispatcher
    NOTIFICATION_DELAY_SECONDS: float = 0.0
    NOTIFICATION_EMAIL_DOMAIN: str = "example.com"
    NOTIFICATION_SMS_NUMBER: str = "+1234567890"

    # Quiz listing
    QUIZ_PAGE_SIZE_DEFAULT: int = 5
    QUIZ_PAGE_SIZE_MAX: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
