"""
Configuration settings for the Agentic Caller application.
Centralizes all environment variables and configuration constants.
"""

from dataclasses import dataclass
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class TwilioCredentials:
    """Credentials and caller ID needed to place a Twilio call."""
    account_sid: str
    auth_token: str
    from_number: str


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Twilio Configuration (checked when a call is dispatched, not at startup)
    twilio_account_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None
    twilio_from_number: Optional[str] = None
    twilio_voice: str = "Polly.Joey"
    twilio_language: str = "en-US"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # Client Configuration
    call_service_url: str = "http://localhost:8000"

    log_level: str = "INFO"

    @field_validator("twilio_account_sid", "twilio_auth_token", "twilio_from_number")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank environment values as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("call_service_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def twilio_credentials(self) -> Optional[TwilioCredentials]:
        """
        Build the Twilio credentials from the loaded settings.

        Returns:
            TwilioCredentials if all three values are present, otherwise None
        """
        if not (self.twilio_account_sid and self.twilio_auth_token and self.twilio_from_number):
            return None
        return TwilioCredentials(
            account_sid=self.twilio_account_sid,
            auth_token=self.twilio_auth_token,
            from_number=self.twilio_from_number,
        )


# Global settings instance
settings = Settings()
