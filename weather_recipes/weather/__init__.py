"""
Weather provider.

Responsibilities:
- Resolve a city name to coordinates (Nominatim).
- Fetch current conditions for those coordinates (Open-Meteo).
- Normalise the response into a WeatherSnapshot.
- Substitute a mock snapshot when the upstream services fail.
"""
