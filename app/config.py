import logging
import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application configuration from environment variables"""

    # App
    app_name: str = "Table Reservations"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5001"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:5001/api")

    # Storage
    bookings_file: str = os.getenv("BOOKINGS_FILE", "data/bookings.json")

    # Restaurant
    restaurant_name: str = os.getenv("RESTAURANT_NAME", "Our Restaurant")

    # Twilio
    twilio_account_sid: str = os.getenv("TWILIO_ACCOUNT_SID", "")
    twilio_auth_token: str = os.getenv("TWILIO_AUTH_TOKEN", "")
    twilio_phone_number: str = os.getenv("TWILIO_PHONE_NUMBER", "")

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list, from the comma-separated setting"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def configure_logging(level: str) -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


settings = Settings()
