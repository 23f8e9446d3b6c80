from datetime import date

import pytest

from weather_recipes.recommendations.analysis import (
    analyze_weather,
    assess_comfort_food_need,
    categorize_temperature,
    current_season,
    determine_cooking_motivation,
    mood_categories,
    season_for_month,
)
from weather_recipes.recommendations.constants import (
    Level,
    Season,
    TemperatureCategory,
    WeatherCondition,
)
from weather_recipes.recommendations.models import WeatherSnapshot


@pytest.mark.parametrize(
    "celsius, expected",
    [
        (35, TemperatureCategory.hot),
        (30, TemperatureCategory.hot),
        (29.9, TemperatureCategory.warm),
        (20, TemperatureCategory.warm),
        (19.5, TemperatureCategory.cool),
        (10, TemperatureCategory.cool),
        (9.9, TemperatureCategory.cold),
        (-12, TemperatureCategory.cold),
    ],
)
def test_categorize_temperature_thresholds(celsius, expected):
    assert categorize_temperature(celsius) is expected


@pytest.mark.parametrize(
    "month, expected",
    [
        (1, Season.winter), (2, Season.winter), (3, Season.spring),
        (4, Season.spring), (5, Season.spring), (6, Season.summer),
        (7, Season.summer), (8, Season.summer), (9, Season.fall),
        (10, Season.fall), (11, Season.fall), (12, Season.winter),
    ],
)
def test_season_for_every_month(month, expected):
    assert season_for_month(month) is expected


def test_season_rejects_invalid_month():
    with pytest.raises(ValueError):
        season_for_month(13)


def test_current_season_uses_injected_date():
    assert current_season(date(2024, 7, 4)) is Season.summer
    assert current_season(date(2024, 12, 31)) is Season.winter


def test_mood_categories_union_is_ordered_and_unique():
    moods = mood_categories(WeatherCondition.sunny, TemperatureCategory.hot)
    assert moods == ["light", "refreshing", "cooling"]

    moods = mood_categories(WeatherCondition.rainy, TemperatureCategory.cold)
    assert moods == ["comfort", "warming"]


def test_cooking_motivation_cold_is_high():
    motivation = determine_cooking_motivation(TemperatureCategory.cold, WeatherCondition.snow)
    assert motivation.level is Level.high
    assert len(motivation.reasons) == 1


def test_cooking_motivation_hot_and_sunny_is_low():
    motivation = determine_cooking_motivation(TemperatureCategory.hot, WeatherCondition.sunny)
    assert motivation.level is Level.low
    assert motivation.reasons == [
        "Hot weather makes people prefer minimal cooking",
        "Nice weather encourages fresh, light meal preparation",
    ]


def test_cooking_motivation_gloom_lifts_low_to_moderate():
    motivation = determine_cooking_motivation(TemperatureCategory.hot, WeatherCondition.rainy)
    assert motivation.level is Level.moderate


def test_cooking_motivation_gloom_lifts_moderate_to_high():
    motivation = determine_cooking_motivation(TemperatureCategory.warm, WeatherCondition.cloudy)
    assert motivation.level is Level.high


def test_cooking_motivation_mild_fog_stays_moderate():
    motivation = determine_cooking_motivation(TemperatureCategory.cool, WeatherCondition.fog)
    assert motivation.level is Level.moderate
    assert motivation.reasons == []


def test_comfort_food_need_levels():
    assert assess_comfort_food_need(5, WeatherCondition.clear).level is Level.high
    assert assess_comfort_food_need(15, WeatherCondition.clear).level is Level.moderate
    assert assess_comfort_food_need(25, WeatherCondition.clear).level is Level.low
    assert assess_comfort_food_need(25, WeatherCondition.drizzle).level is Level.moderate
    assert assess_comfort_food_need(15, WeatherCondition.snow).level is Level.high


def test_comfort_food_need_humidity_adds_factor_only():
    need = assess_comfort_food_need(25, WeatherCondition.clear, humidity=85)
    assert need.level is Level.low
    assert need.factors == ["High humidity may affect food preferences"]


def test_analyze_weather_builds_full_analysis():
    snapshot = WeatherSnapshot.model_validate({
        "temperature": {"celsius": 2, "fahrenheit": 36},
        "condition": "rainy",
        "humidity": 85,
        "description": "Rainy and cold",
        "location": "Oslo",
    })

    analysis = analyze_weather(snapshot, today=date(2025, 1, 10))

    assert analysis.temperature.category is TemperatureCategory.cold
    assert analysis.temperature.fahrenheit == 36
    assert analysis.condition == "rainy"
    assert analysis.season is Season.winter
    assert analysis.mood_categories == ["comfort", "warming"]
    assert analysis.cooking_motivation.level is Level.high
    assert analysis.comfort_food_need.level is Level.high
    assert analysis.weather_description == "Rainy and cold"
    assert analysis.location == "Oslo"
    assert analysis.fallback_mode is False


def test_snapshot_derives_fahrenheit():
    snapshot = WeatherSnapshot.model_validate({
        "temperature": {"celsius": 100},
        "condition": "clear",
    })
    assert snapshot.temperature.fahrenheit == 212
