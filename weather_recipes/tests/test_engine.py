from datetime import date

import pytest
from pydantic import ValidationError

from weather_recipes.recommendations.catalog import get_catalog
from weather_recipes.recommendations.config import EngineConfig
from weather_recipes.recommendations.constants import ConfidenceLevel, WeatherCondition
from weather_recipes.recommendations.engine import recommend
from weather_recipes.recommendations.models import UserPreferences, WeatherSnapshot

CATALOG = get_catalog()
TODAY = date(2025, 10, 18)

OSLO = {
    "temperature": {"celsius": 2, "fahrenheit": 36},
    "condition": "rainy",
    "humidity": 85,
    "description": "Rainy and cold",
    "location": "Oslo",
}

SEVILLE = {
    "temperature": {"celsius": 32, "fahrenheit": 90},
    "condition": "sunny",
    "humidity": 30,
    "description": "Sunny and hot",
    "location": "Seville",
}


def _snapshot(celsius, condition):
    return WeatherSnapshot.model_validate({
        "temperature": {"celsius": celsius},
        "condition": condition,
        "description": f"{condition} and {celsius}C",
        "location": "Testville",
    })


@pytest.mark.parametrize("condition", [c.value for c in WeatherCondition])
@pytest.mark.parametrize("celsius", [-8, 5, 12, 24, 35])
def test_always_three_ranked_recommendations(celsius, condition):
    result = recommend(_snapshot(celsius, condition), {}, CATALOG, today=TODAY)

    scores = [r.relevance_score for r in result.recommendations]
    assert len(result.recommendations) == min(3, len(CATALOG))
    assert scores == sorted(scores, reverse=True)
    assert [r.recommendation.rank for r in result.recommendations] == [1, 2, 3]
    assert result.weather_analysis.fallback_mode is False


def test_result_counts():
    result = recommend(OSLO, None, CATALOG, today=TODAY)

    assert result.total_recipes_considered == 6
    assert result.weather_matched_count == 6
    assert result.final_recommendation_count == 3


def test_recommend_is_deterministic():
    first = recommend(OSLO, {"max_cooking_time": 60}, CATALOG, today=TODAY)
    second = recommend(OSLO, {"max_cooking_time": 60}, CATALOG, today=TODAY)

    assert first == second


def test_cold_rainy_day_puts_beef_stew_first():
    result = recommend(OSLO, {}, CATALOG, today=TODAY)
    top = result.recommendations[0]

    assert top.recipe.name == "Hearty Beef Stew"
    assert top.match_score >= 10 + 8 + 6 + 1
    assert top.recommendation.rank == 1
    assert top.recommendation.weather_context == "Rainy and cold"
    assert top.recommendation.confidence_level is ConfidenceLevel.very_high
    assert top.recommendation.reasoning.startswith("Ranked #1 because: ")


def test_cold_rainy_day_stew_first_in_any_season():
    for month in range(1, 13):
        result = recommend(OSLO, {}, CATALOG, today=date(2025, month, 1))
        assert result.recommendations[0].recipe.name == "Hearty Beef Stew"


def test_hot_sunny_day_with_easy_preference():
    result = recommend(SEVILLE, {"difficulty": "easy"}, CATALOG, today=TODAY)
    names = [r.recipe.name for r in result.recommendations]

    assert all(r.recipe.difficulty.value == "easy" for r in result.recommendations)
    assert "Fresh Gazpacho" in names


def test_preference_filter_yields_subset_meeting_constraints():
    prefs = UserPreferences(max_cooking_time=40, difficulty="medium")
    result = recommend(OSLO, prefs, CATALOG, today=TODAY)

    catalog_ids = {r.id for r in CATALOG}
    assert result.recommendations
    for item in result.recommendations:
        assert item.recipe.id in catalog_ids
        assert item.recipe.cooking_time <= 40
        assert item.recipe.difficulty.value == "medium"


def test_preferences_eliminating_everything_return_empty():
    result = recommend(OSLO, {"max_cooking_time": 5}, CATALOG, today=TODAY)

    assert result.recommendations == []
    assert result.final_recommendation_count == 0
    assert result.weather_analysis.fallback_mode is False


def test_form_style_preferences_are_coerced():
    result = recommend(OSLO, {"max_cooking_time": "30", "difficulty": ""}, CATALOG, today=TODAY)

    assert result.recommendations
    assert all(r.recipe.cooking_time <= 30 for r in result.recommendations)


def test_max_recommendations_is_configurable():
    result = recommend(OSLO, {}, CATALOG, today=TODAY, config=EngineConfig(max_recommendations=1))

    assert len(result.recommendations) == 1


def test_missing_temperature_falls_back():
    broken = {"condition": "rainy", "description": "Rainy", "location": "Oslo"}

    result = recommend(broken, {}, CATALOG, today=TODAY)

    assert result.weather_analysis.fallback_mode is True
    assert result.weather_analysis.condition == "rainy"
    assert result.weather_analysis.temperature is None
    assert [r.relevance_score for r in result.recommendations] == [10, 9, 8]
    assert [r.recipe.id for r in result.recommendations] == [1, 2, 3]
    for rank, item in enumerate(result.recommendations, start=1):
        assert item.recommendation.rank == rank
        assert item.recommendation.confidence_level is ConfidenceLevel.medium
        assert item.recommendation.reasoning.endswith(item.recipe.description)
        assert item.recommendation.weather_context == "Rainy"


def test_unknown_condition_falls_back():
    odd = dict(OSLO, condition="hail")

    result = recommend(odd, {}, CATALOG, today=TODAY)

    assert result.weather_analysis.fallback_mode is True
    assert result.weather_analysis.temperature.value == 2
    assert len(result.recommendations) == 3


def test_non_mapping_weather_falls_back():
    result = recommend(None, {}, CATALOG, today=TODAY)

    assert result.weather_analysis.fallback_mode is True
    assert result.recommendations[0].recommendation.weather_context == "Current weather conditions"
    assert result.final_recommendation_count == 3


@pytest.mark.parametrize("prefs", [
    {"difficulty": "expert"},
    {"max_cooking_time": 0},
    {"max_cooking_time": -15, "difficulty": "easy"},
])
def test_unsatisfiable_preferences_filter_everything_out(prefs):
    result = recommend(OSLO, prefs, CATALOG, today=TODAY)

    assert result.weather_analysis.fallback_mode is False
    assert result.recommendations == []
    assert result.final_recommendation_count == 0
    assert result.weather_matched_count == 6


def test_unreadable_preferences_raise():
    with pytest.raises(ValidationError):
        recommend(OSLO, {"max_cooking_time": "soon"}, CATALOG, today=TODAY)


def test_injected_catalog_is_used():
    small = CATALOG[3:5]

    result = recommend(OSLO, {}, small, today=TODAY)

    assert result.total_recipes_considered == 2
    assert {r.recipe.id for r in result.recommendations} == {4, 5}
