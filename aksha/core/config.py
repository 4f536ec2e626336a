"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "aksha"
    debug: bool = False
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    database_url: str = "sqlite:///./aksha.db"

    # Remote Aksha backend
    api_url: str = "http://192.168.52.118:5001"
    api_prefix: str = "/api/v1"
    api_timeout_seconds: float = 15.0

    # AI chat relay
    chat_path: str = "/ai/chat"  # some deployments expose /api/ai/chat
    emergency_path: str = "/ai/emergency"
    models_path: str = "/ai/models"
    chat_default_model: str = "gemma3"

    # SOS pipeline
    location_timeout_seconds: float = 3.0
    sms_number_separator: str = ";"  # ";" (Android) or "&" (iOS)

    # Local storage and device channel
    secure_store_secret: str = "change-me-in-production-use-openssl-rand-hex-32"
    device_key: str = "change-me-device-key"


settings = Settings()
