"""Application configuration."""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "QR Menu"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["*"]

    # Menu
    menu_seed_file: Optional[str] = None
    default_drink_image: str = (
        "https://api.builder.io/api/v1/image/assets/TEMP/"
        "2e811b0fa84092c929b579286fded5e620c45c19?width=347"
    )
    default_food_image: str = (
        "https://api.builder.io/api/v1/image/assets/TEMP/"
        "977e1ee7cf4be018cd9e90c67e54df15c36e50b0?width=347"
    )
    default_food_set_image: str = (
        "https://api.builder.io/api/v1/image/assets/TEMP/"
        "f2aaa14515154ad18f8cfe5439814ab435d6222d?width=347"
    )

    # Client
    api_base_url: str = "http://localhost:8000"
    request_timeout: float = 10.0  # seconds

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
