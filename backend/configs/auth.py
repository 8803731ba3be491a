"""
Authentication configuration settings.

Signing parameters for access tokens and the cookie that carries them.

Dependencies: pydantic, pydantic_settings
System role: Token issuance and verification configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Access token configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    secret_key: str = Field(
        default="change-me-in-production",
        description="HMAC secret used to sign access tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(
        default=60,
        description="Access token lifetime in minutes",
    )
    cookie_name: str = Field(
        default="access_token",
        description="Cookie carrying the access token",
    )
    cookie_secure: bool = Field(
        default=False,
        description="Send the token cookie over HTTPS only",
    )
