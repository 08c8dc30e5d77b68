import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from weather_lookup.services.aligner import DEFAULT_WINDOW
from weather_lookup.services.forecast import FORECAST_URL
from weather_lookup.services.geocoder import GEOCODING_URL
from weather_lookup.services.transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Helper to read environment variables with a default value."""
    val = os.getenv(name)
    return val if val is not None and val != "" else default


def _get_number(name: str, default, cast):
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Invalid value %r for %s, using %r", raw, name, default)
        return default


@dataclass
class Settings:
    """
    Runtime configuration for the lookup service and its outer surfaces.

    Attributes
    ----------
    geocoding_url : str
        Geocoding endpoint.
    forecast_url : str
        Forecast endpoint.
    http_timeout : float
        Transport timeout in seconds.
    forecast_days : int
        Number of upcoming days returned by a lookup.
    tool_credits : int
        Flat credit price of the paywalled MCP tool.
    log_level : str
        Logging level name.
    nvm_api_key : str
        Nevermined server key; the paywall is disabled when empty.
    nvm_environment : str
        Nevermined environment name.
    agent_id : str
        Nevermined agent identifier.
    """

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    http_timeout: float = DEFAULT_TIMEOUT
    forecast_days: int = DEFAULT_WINDOW
    tool_credits: int = 5
    log_level: str = "INFO"
    nvm_api_key: str = ""
    nvm_environment: str = "staging_sandbox"
    agent_id: str = ""

    @property
    def paywall_enabled(self) -> bool:
        return bool(self.nvm_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            geocoding_url=get_env("WEATHER_GEOCODING_URL", GEOCODING_URL),
            forecast_url=get_env("WEATHER_FORECAST_URL", FORECAST_URL),
            http_timeout=_get_number("WEATHER_HTTP_TIMEOUT", DEFAULT_TIMEOUT, float),
            forecast_days=_get_number("WEATHER_FORECAST_DAYS", DEFAULT_WINDOW, int),
            tool_credits=_get_number("WEATHER_TOOL_CREDITS", 5, int),
            log_level=get_env("LOG_LEVEL", "INFO"),
            nvm_api_key=get_env("NVM_SERVER_API_KEY", ""),
            nvm_environment=get_env("NVM_ENV", "staging_sandbox"),
            agent_id=get_env("NVM_AGENT_ID", ""),
        )
