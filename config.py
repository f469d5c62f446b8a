import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Email settings
    enable_email_notifications: bool = os.getenv("ENABLE_EMAIL_NOTIFICATIONS", "True").lower() in ("true", "1", "yes")
    smtp_from_name: str = os.getenv("SMTP_FROM_NAME", "Library System")


settings = Settings()
