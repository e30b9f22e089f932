"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 5
    bcrypt_rounds: int = 10
    session_cookie_name: str = "session_token"
    session_cookie_secure: bool = False
    profile_picture_bucket: str = "profile-pictures"
    recipe_image_base_url: str = (
        "https://whattocookapp-ed9fe9a2a3d4.herokuapp.com/recipe_images"
    )
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
