"""
Runtime settings for wires and the loopback server.

Values come from keyword arguments or ``VERANO_*`` environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WireSettings(BaseSettings):
    """Transport limits and defaults."""

    model_config = SettingsConfigDict(
        env_prefix="VERANO_",
        case_sensitive=False,
        extra="ignore",
    )

    timeout: float = Field(
        default=30.0, gt=0, description="Seconds allowed for each connect, read or write"
    )
    max_header_bytes: int = Field(
        default=64 * 1024, gt=0, description="Upper bound for a message head"
    )
    max_body_bytes: int = Field(
        default=10 * 1024 * 1024, gt=0, description="Upper bound for a message body"
    )
    user_agent: str = Field(
        default="verano/0.1", description="User-Agent sent when the request has none"
    )
    verify_tls: bool = Field(
        default=True, description="Verify server certificates for https"
    )
