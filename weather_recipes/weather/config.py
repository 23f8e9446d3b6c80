from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class WeatherConfig:
    geocoding_url: str = os.getenv(
        "WEATHER_GEOCODING_URL", "https://nominatim.openstreetmap.org/search"
    )
    forecast_url: str = os.getenv(
        "WEATHER_FORECAST_URL", "https://api.open-meteo.com/v1/forecast"
    )
    timeout: float = float(os.getenv("WEATHER_TIMEOUT", "10"))
    user_agent: str = os.getenv("WEATHER_USER_AGENT", "weather-recipes/1.0")
    mock_fallback: bool = _env_flag("WEATHER_MOCK_FALLBACK", True)


DEFAULT_WEATHER_CONFIG = WeatherConfig()
