"""Application settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Token Bridge"
    api_prefix: str = ""
    host: str = "0.0.0.0"
    port: int = 8080
    bridge_backend_url: str | None = None
    bridge_backend_timeout_seconds: float = 10.0
    bridge_retry_delay_seconds: float = 0.5
    bridge_confirmation_delay_seconds: float = 2.0
    simulated_min_latency_seconds: float = 1.0
    simulated_max_latency_seconds: float = 3.0
    simulated_success_ratio: float = 0.7
    price_api_base_url: str = "https://api.coingecko.com/api/v3"
    price_cache_ttl_seconds: float = 60.0
    price_timeout_seconds: float = 10.0

    @model_validator(mode="after")
    def validate_timing_settings(self) -> "Settings":
        """Ensure delays, timeouts, and ratios are usable."""

        if self.bridge_backend_timeout_seconds <= 0:
            raise ValueError("TOKEN_BRIDGE_BRIDGE_BACKEND_TIMEOUT_SECONDS must be > 0.")
        if self.bridge_retry_delay_seconds < 0:
            raise ValueError("TOKEN_BRIDGE_BRIDGE_RETRY_DELAY_SECONDS must be >= 0.")
        if self.bridge_confirmation_delay_seconds < 0:
            raise ValueError("TOKEN_BRIDGE_BRIDGE_CONFIRMATION_DELAY_SECONDS must be >= 0.")
        if self.simulated_min_latency_seconds < 0:
            raise ValueError("TOKEN_BRIDGE_SIMULATED_MIN_LATENCY_SECONDS must be >= 0.")
        if self.simulated_max_latency_seconds < self.simulated_min_latency_seconds:
            raise ValueError(
                "TOKEN_BRIDGE_SIMULATED_MAX_LATENCY_SECONDS must be >= "
                "TOKEN_BRIDGE_SIMULATED_MIN_LATENCY_SECONDS."
            )
        if not 0 <= self.simulated_success_ratio <= 1:
            raise ValueError("TOKEN_BRIDGE_SIMULATED_SUCCESS_RATIO must be between 0 and 1.")
        if self.price_cache_ttl_seconds < 0:
            raise ValueError("TOKEN_BRIDGE_PRICE_CACHE_TTL_SECONDS must be >= 0.")
        if self.price_timeout_seconds <= 0:
            raise ValueError("TOKEN_BRIDGE_PRICE_TIMEOUT_SECONDS must be > 0.")
        if self.bridge_backend_url is not None and not self.bridge_backend_url.strip():
            raise ValueError("TOKEN_BRIDGE_BRIDGE_BACKEND_URL cannot be blank.")
        return self

    model_config = SettingsConfigDict(env_prefix="TOKEN_BRIDGE_", extra="ignore")


__all__ = ["Settings"]
