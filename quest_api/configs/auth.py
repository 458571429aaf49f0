"""
Authentication configuration settings.

JWT signing parameters and session cookie attributes.

Dependencies: pydantic_settings
System role: Auth token configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """JWT and session cookie configuration."""

    model_config = SettingsConfigDict(
        env_prefix="JWT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    secret_key: str = Field(
        default="change-me-in-production",
        description="HMAC secret used to sign session tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expire_hours: int = Field(default=8, description="Session token lifetime in hours")
    cookie_name: str = Field(default="session_token", description="Session cookie name")
    cookie_secure: bool = Field(default=True, description="Mark the session cookie Secure")
