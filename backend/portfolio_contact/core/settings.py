# portfolio_contact/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Portfolio Contact API", alias="API_TITLE")
    cors_origins: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Mail account: notifications are sent from and to this address
    email_address: Optional[str] = Field(default=None, alias="EMAIL_ADDRESS")
    # Gmail app password, not the account password
    gmail_passkey: Optional[str] = Field(default=None, alias="GMAIL_PASSKEY")
    smtp_host: str = Field(default="smtp.gmail.com", alias="SMTP_HOST")
    smtp_port: int = Field(default=587, alias="SMTP_PORT")
    mail_from_name: str = Field(default="Portfolio Contact", alias="MAIL_FROM_NAME")

    telegram_bot_token: Optional[str] = Field(default=None, alias="TELEGRAM_BOT_TOKEN")
    telegram_chat_id: Optional[str] = Field(default=None, alias="TELEGRAM_CHAT_ID")
    telegram_api_base: str = Field(default="https://api.telegram.org", alias="TELEGRAM_API_BASE")

    # Applies to each channel separately
    notify_timeout_seconds: float = Field(default=15.0, alias="NOTIFY_TIMEOUT_SECONDS")

    def missing_secrets(self) -> List[str]:
        """Names of the required secrets that are unset or blank."""
        required = {
            "EMAIL_ADDRESS": self.email_address,
            "GMAIL_PASSKEY": self.gmail_passkey,
            "TELEGRAM_BOT_TOKEN": self.telegram_bot_token,
            "TELEGRAM_CHAT_ID": self.telegram_chat_id,
        }
        return [name for name, value in required.items() if not (value or "").strip()]


def get_settings() -> Settings:
    # Re-read on every call so a long-lived process sees env changes
    return Settings()


settings = Settings()
