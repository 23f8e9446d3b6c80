from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import requests

from ..recommendations.constants import WeatherCondition
from ..recommendations.models import Temperature, WeatherSnapshot
from .config import DEFAULT_WEATHER_CONFIG, WeatherConfig

logger = logging.getLogger(__name__)

# WMO weather interpretation codes reported by Open-Meteo.
WEATHER_CODE_CONDITIONS: dict[int, WeatherCondition] = {
    0: WeatherCondition.clear,
    1: WeatherCondition.partly_cloudy,
    2: WeatherCondition.partly_cloudy,
    3: WeatherCondition.cloudy,
    45: WeatherCondition.fog,
    48: WeatherCondition.fog,
    51: WeatherCondition.drizzle,
    53: WeatherCondition.drizzle,
    55: WeatherCondition.drizzle,
    61: WeatherCondition.rainy,
    63: WeatherCondition.rainy,
    65: WeatherCondition.rainy,
    71: WeatherCondition.snow,
    73: WeatherCondition.snow,
    75: WeatherCondition.snow,
    80: WeatherCondition.rainy,
    81: WeatherCondition.rainy,
    82: WeatherCondition.rainy,
    95: WeatherCondition.rainy,
    96: WeatherCondition.rainy,
    99: WeatherCondition.rainy,
}
DEFAULT_CONDITION = WeatherCondition.partly_cloudy
DEFAULT_HUMIDITY = 50

_CONDITION_PHRASES: dict[WeatherCondition, str] = {
    WeatherCondition.clear: "Clear",
    WeatherCondition.sunny: "Sunny",
    WeatherCondition.partly_cloudy: "Partly cloudy",
    WeatherCondition.cloudy: "Cloudy",
    WeatherCondition.overcast: "Overcast",
    WeatherCondition.rainy: "Rainy",
    WeatherCondition.drizzle: "Light drizzle",
    WeatherCondition.snow: "Snowy",
    WeatherCondition.fog: "Foggy",
}

MOCK_CONDITIONS = (
    WeatherCondition.clear,
    WeatherCondition.partly_cloudy,
    WeatherCondition.cloudy,
    WeatherCondition.rainy,
    WeatherCondition.sunny,
)


class WeatherServiceError(Exception):
    """Raised when geocoding or the forecast API cannot produce a snapshot."""


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float
    display_name: str = ""


def _to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def describe_weather(condition: WeatherCondition, celsius: float) -> str:
    """Human readable summary such as "Rainy and cool".

    Uses its own, softer thresholds than the recommendation buckets.
    """
    if celsius > 25:
        feel = "hot"
    elif celsius > 15:
        feel = "warm"
    elif celsius > 5:
        feel = "cool"
    else:
        feel = "cold"
    return f"{_CONDITION_PHRASES[condition]} and {feel}"


def geocode_city(city: str, config: WeatherConfig = DEFAULT_WEATHER_CONFIG) -> Coordinates | None:
    """Look up the best coordinate match for a city, or None if nothing matches."""
    try:
        resp = requests.get(
            config.geocoding_url,
            params={"format": "json", "q": city, "limit": 1},
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise WeatherServiceError(f"Geocoding failed for {city!r}: {exc}") from exc

    if not isinstance(data, list):
        raise WeatherServiceError(f"Unexpected geocoding response for {city!r}: {data!r}")
    if not data:
        return None

    try:
        first = data[0]
        return Coordinates(
            lat=float(first["lat"]),
            lon=float(first["lon"]),
            display_name=first.get("display_name", ""),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WeatherServiceError(f"Malformed geocoding result for {city!r}") from exc


def transform_open_meteo(data: dict[str, Any], location: str = "") -> WeatherSnapshot:
    current = data["current_weather"]
    code = current.get("weathercode", current.get("weather_code"))
    condition = WEATHER_CODE_CONDITIONS.get(code, DEFAULT_CONDITION)
    celsius = float(current["temperature"])

    humidity_series = (data.get("hourly") or {}).get("relative_humidity_2m") or []
    humidity = humidity_series[0] if humidity_series and humidity_series[0] is not None else DEFAULT_HUMIDITY

    return WeatherSnapshot(
        temperature=Temperature(
            celsius=round(celsius),
            fahrenheit=round(_to_fahrenheit(celsius)),
        ),
        condition=condition,
        description=describe_weather(condition, celsius),
        humidity=humidity,
        wind_speed=current.get("windspeed", 0),
        timestamp=datetime.now(timezone.utc),
        location=location,
    )


def fetch_weather_by_coordinates(
    lat: float,
    lon: float,
    location: str = "",
    config: WeatherConfig = DEFAULT_WEATHER_CONFIG,
) -> WeatherSnapshot:
    try:
        resp = requests.get(
            config.forecast_url,
            params={
                "latitude": lat,
                "longitude": lon,
                "current_weather": "true",
                "hourly": "temperature_2m,relative_humidity_2m,weather_code",
                "timezone": "auto",
            },
            timeout=config.timeout,
        )
        resp.raise_for_status()
        return transform_open_meteo(resp.json(), location=location)
    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as exc:
        raise WeatherServiceError(f"Weather lookup failed for ({lat}, {lon}): {exc}") from exc


def generate_mock_weather(city: str, rng: random.Random | None = None) -> WeatherSnapshot:
    """Plausible random weather used when the real services are unavailable."""
    rng = rng or random.Random()
    condition = rng.choice(MOCK_CONDITIONS)
    celsius = rng.randint(5, 34)

    return WeatherSnapshot(
        temperature=Temperature(celsius=celsius, fahrenheit=round(_to_fahrenheit(celsius))),
        condition=condition,
        description=describe_weather(condition, celsius),
        humidity=rng.randint(40, 79),
        wind_speed=rng.randint(5, 24),
        timestamp=datetime.now(timezone.utc),
        location=city,
        is_mock_data=True,
    )


def fetch_weather_for_city(
    city: str, config: WeatherConfig = DEFAULT_WEATHER_CONFIG,
) -> WeatherSnapshot:
    """
    Resolve a city and fetch its current weather.

    Falls back to mock weather on any upstream failure unless
    ``config.mock_fallback`` is disabled, in which case the
    ``WeatherServiceError`` propagates.
    """
    try:
        coordinates = geocode_city(city, config)
        if coordinates is None:
            raise WeatherServiceError(f"Could not find coordinates for city: {city}")
        return fetch_weather_by_coordinates(
            coordinates.lat, coordinates.lon, location=city, config=config,
        )
    except WeatherServiceError:
        if not config.mock_fallback:
            raise
        logger.warning("Weather lookup failed for %s, using mock weather", city, exc_info=True)
        return generate_mock_weather(city)
