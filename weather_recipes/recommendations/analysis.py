from __future__ import annotations

from datetime import date

from .constants import (
    BRIGHT_CONDITIONS,
    DREARY_CONDITIONS,
    GLOOMY_CONDITIONS,
    SEASON_BY_MONTH,
    TEMPERATURE_MOODS,
    WEATHER_MOODS,
    Level,
    Season,
    TemperatureCategory,
    WeatherCondition,
)
from .models import (
    ComfortFoodNeed,
    CookingMotivation,
    TemperatureAnalysis,
    WeatherAnalysis,
    WeatherSnapshot,
)


def categorize_temperature(celsius: float) -> TemperatureCategory:
    if celsius >= 30:
        return TemperatureCategory.hot
    if celsius >= 20:
        return TemperatureCategory.warm
    if celsius >= 10:
        return TemperatureCategory.cool
    return TemperatureCategory.cold


def season_for_month(month: int) -> Season:
    """Northern-hemisphere season for a 1-12 calendar month."""
    try:
        return SEASON_BY_MONTH[month]
    except KeyError:
        raise ValueError(f"Month must be between 1 and 12, got {month!r}") from None


def current_season(today: date | None = None) -> Season:
    return season_for_month((today or date.today()).month)


def mood_categories(
    condition: WeatherCondition, category: TemperatureCategory,
) -> list[str]:
    """Condition moods followed by temperature moods, first occurrence wins."""
    moods: list[str] = []
    for mood in (*WEATHER_MOODS[condition], *TEMPERATURE_MOODS[category]):
        if mood not in moods:
            moods.append(mood)
    return moods


def determine_cooking_motivation(
    category: TemperatureCategory, condition: WeatherCondition,
) -> CookingMotivation:
    level = Level.moderate
    reasons: list[str] = []

    if category is TemperatureCategory.cold:
        level = Level.high
        reasons.append("Cold weather makes warm, cooked meals more appealing")

    if category is TemperatureCategory.hot:
        level = Level.low
        reasons.append("Hot weather makes people prefer minimal cooking")

    if condition in GLOOMY_CONDITIONS:
        level = Level.moderate if level is Level.low else Level.high
        reasons.append("Gloomy weather increases desire for comfort cooking")

    if condition in BRIGHT_CONDITIONS:
        reasons.append("Nice weather encourages fresh, light meal preparation")

    return CookingMotivation(level=level, reasons=reasons)


def assess_comfort_food_need(
    celsius: float, condition: WeatherCondition, humidity: float | None = None,
) -> ComfortFoodNeed:
    level = Level.low
    factors: list[str] = []

    if celsius < 10:
        level = Level.high
        factors.append("Very cold temperature increases comfort food craving")
    elif celsius < 20:
        level = Level.moderate
        factors.append("Cool temperature moderately increases comfort food appeal")

    if condition in DREARY_CONDITIONS:
        level = Level.moderate if level is Level.low else Level.high
        factors.append("Dreary weather conditions increase comfort food desire")

    if humidity is not None and humidity > 80:
        factors.append("High humidity may affect food preferences")

    return ComfortFoodNeed(level=level, factors=factors)


def analyze_weather(snapshot: WeatherSnapshot, today: date | None = None) -> WeatherAnalysis:
    celsius = snapshot.temperature.celsius
    category = categorize_temperature(celsius)
    condition = snapshot.condition

    return WeatherAnalysis(
        temperature=TemperatureAnalysis(
            value=celsius,
            category=category,
            fahrenheit=snapshot.temperature.fahrenheit,
        ),
        condition=condition.value,
        season=current_season(today),
        mood_categories=mood_categories(condition, category),
        cooking_motivation=determine_cooking_motivation(category, condition),
        comfort_food_need=assess_comfort_food_need(celsius, condition, snapshot.humidity),
        humidity=snapshot.humidity,
        weather_description=snapshot.description,
        location=snapshot.location,
    )
