"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Mealbox", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/mealbox",
        description="SQLAlchemy connection URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Authentication
    jwt_secret: str = Field(
        default="change-me-in-production", description="Secret used to sign JWTs"
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    jwt_expire_minutes: int = Field(
        default=60 * 24, ge=1, description="Access token lifetime in minutes"
    )

    # Klarna Checkout
    klarna_api_url: str = Field(
        default="https://api.playground.klarna.com",
        description="Klarna API base URL",
    )
    klarna_username: str = Field(default="", description="Klarna API username (UID)")
    klarna_password: str = Field(default="", description="Klarna API password")
    klarna_purchase_country: str = Field(default="FI", min_length=2, max_length=2)
    klarna_purchase_currency: str = Field(default="EUR", min_length=3, max_length=3)
    klarna_locale: str = Field(default="fi-FI")
    klarna_tax_rate: int = Field(
        default=1400,
        ge=0,
        le=10000,
        description="Tax rate in Klarna units (percent * 100, e.g. 1400 = 14%)",
    )
    klarna_timeout_sec: float = Field(default=10.0, gt=0)
    klarna_terms_url: str = Field(default="http://localhost:5173/terms")
    klarna_checkout_url: str = Field(default="http://localhost:5173/checkout")
    klarna_confirmation_url: str = Field(
        default="http://localhost:5173/confirmation?order_id={checkout.order.id}"
    )
    klarna_push_url: str = Field(
        default="http://localhost:3000/api/v1/klarna/push?order_id={checkout.order.id}"
    )

    # Static files
    upload_dir: str = Field(
        default="public/uploads", description="Directory served under /uploads"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://10.120.32.65"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["Content-Type", "Authorization"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/api/v1", description="API route prefix")
    api_title: str = Field(default="Mealbox API", description="API documentation title")
    api_description: str = Field(
        default="Meal package shop: users, meals, orders, newsletters and Klarna checkout",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("klarna_purchase_country", "klarna_purchase_currency")
    @classmethod
    def upper_codes(cls, v: str) -> str:
        return v.upper()

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
