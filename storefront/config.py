"""
Storefront configuration.

Reads the same variables the browser build uses: ``VITE_AUTH_API`` for the
REST API base URL and ``VITE_IMG_SERVE_URL`` for the image host.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    api_url: str = Field(
        default="http://localhost:3000/api/v1",
        validation_alias=AliasChoices("VITE_AUTH_API", "api_url"),
        description="REST API base URL",
    )
    img_serve_url: str = Field(
        default="http://localhost:3000/uploads/",
        validation_alias=AliasChoices("VITE_IMG_SERVE_URL", "img_serve_url"),
        description="Prefix for meal image paths",
    )
    request_timeout_sec: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    def image_url(self, image: str) -> str:
        return self.img_serve_url + (image or "")


storefront_settings = StorefrontSettings()
