"""
Application configuration
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings
from typing import Optional, List, Union
from pydantic import field_validator


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Garage Billing API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # CORS Origins
    CORS_ORIGINS: Union[List[str], str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Branding printed on receipts and documents
    BRAND_NAME: str = "FUSION GEAR"
    BRAND_TAGLINE: str = "Bike Service Center"
    BRAND_PHONE: str = "8073670402"

    # Timestamps are rendered in this zone
    DISPLAY_TIMEZONE: str = "Asia/Kolkata"

    # Printing: PDFs are dropped here for the print daemon
    PRINT_SPOOL_DIR: Optional[str] = None

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list"""
        if isinstance(v, list):
            return v

        if isinstance(v, str):
            if not v.strip():
                return []
            origins = [origin.strip() for origin in v.split(",")]
            return [origin for origin in origins if origin]

        return ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("PRINT_SPOOL_DIR", mode="before")
    @classmethod
    def blank_spool_dir(cls, v):
        """Treat an empty spool dir as not configured"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
