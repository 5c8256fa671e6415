"""
Application configuration.
All settings are loaded from environment variables.
Use env.example as a reference for available variables.
"""
import json

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Paywall constants (preview percent, lock message, header names) are part of
    the response contract and live in app.paywall.config, not here.
    """

    # ===========================================
    # APPLICATION
    # ===========================================
    # CORS: comma-separated (e.g. http://localhost:3000,http://web:80). Empty = default list in code.
    cors_origins: str = ""

    # ===========================================
    # PRICING
    # ===========================================
    # Provider shown first in the pricing catalogue
    pricing_default_provider: str = "anthropic"

    # ===========================================
    # FREE TIER TOKEN LIMITS
    # ===========================================
    token_free_input_limit: int = 500
    token_free_output_limit: int = 300
    token_free_daily_limit: int = 1000
    # {dollars: tokens granted}
    token_credit_tiers: str = '{"1": 2000, "10": 30000, "100": 600000, "1000": 10000000}'

    # ===========================================
    # LOGGING
    # ===========================================
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("token_credit_tiers")
    @classmethod
    def validate_credit_tiers(cls, v: str) -> str:
        """Ensure credit tiers are a JSON object of numbers."""
        raw = json.loads(v)
        if not isinstance(raw, dict):
            raise ValueError("token_credit_tiers must be a JSON object")
        for k, tokens in raw.items():
            int(k)
            int(tokens)
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper().strip()

    @property
    def credit_tiers_map(self) -> dict[int, int]:
        """Credit tiers as {dollars: tokens}, sorted by price."""
        raw = json.loads(self.token_credit_tiers)
        return {int(k): int(v) for k, v in sorted(raw.items(), key=lambda kv: int(kv[0]))}

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
