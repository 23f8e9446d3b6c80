from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ValidationError

from .analysis import analyze_weather
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .constants import ConfidenceLevel
from .models import (
    RecommendationDetail,
    RecommendationResult,
    Recipe,
    ScoredRecipe,
    TemperatureAnalysis,
    UserPreferences,
    WeatherAnalysis,
    WeatherSnapshot,
)
from .scoring import (
    apply_user_preferences,
    explain_recommendations,
    rank_recipes,
    score_catalog,
)

logger = logging.getLogger(__name__)

FALLBACK_SCORES = (10, 9, 8)


def recommend(
    weather: WeatherSnapshot | Mapping[str, Any],
    preferences: UserPreferences | Mapping[str, Any] | None,
    catalog: Sequence[Recipe],
    *,
    today: date | None = None,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> RecommendationResult:
    """
    Recommend recipes for the given weather.

    Steps:
    - Analyse the weather (temperature bucket, season, moods, motivation).
    - Score every catalog recipe against it.
    - Drop recipes that break the user's time or difficulty preferences.
    - Add situational bonuses, rank, and explain the top picks.

    Preferences only filter: values nothing satisfies give an empty list.
    Preferences that cannot be read at all raise ValidationError. Any
    failure past that point yields the generic fallback result.
    """
    prefs = _coerce_preferences(preferences)

    try:
        snapshot = WeatherSnapshot.model_validate(weather)

        analysis = analyze_weather(snapshot, today=today)
        logger.debug(
            "Analysed weather for %s: %s / %s / %s",
            snapshot.location or "unknown location",
            analysis.temperature.category.value,
            analysis.condition,
            analysis.season.value,
        )

        matched = score_catalog(catalog, analysis)
        personalised = apply_user_preferences(matched, prefs)
        ranked = rank_recipes(personalised, analysis, limit=config.max_recommendations)
        recommendations = explain_recommendations(ranked, analysis)

        return RecommendationResult(
            weather_analysis=analysis,
            recommendations=recommendations,
            total_recipes_considered=len(catalog),
            weather_matched_count=len(matched),
            final_recommendation_count=len(recommendations),
        )

    except Exception:
        logger.warning("Recipe scoring failed, falling back to generic recommendations", exc_info=True)
        return fallback_recommendations(weather, catalog, config=config)


def _coerce_preferences(
    preferences: UserPreferences | Mapping[str, Any] | None,
) -> UserPreferences | None:
    if preferences is None or isinstance(preferences, UserPreferences):
        return preferences
    return UserPreferences.model_validate(preferences)


def _as_dict(weather: Any) -> dict[str, Any]:
    if isinstance(weather, BaseModel):
        return weather.model_dump()
    if isinstance(weather, Mapping):
        return dict(weather)
    return {}


def _fallback_temperature(raw: Any) -> TemperatureAnalysis | None:
    if not isinstance(raw, Mapping):
        return None
    try:
        return TemperatureAnalysis(value=raw.get("celsius"), fahrenheit=raw.get("fahrenheit"))
    except ValidationError:
        return None


def fallback_recommendations(
    weather: Any,
    catalog: Sequence[Recipe],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> RecommendationResult:
    """Generic picks from the head of the catalog, used when scoring fails."""
    data = _as_dict(weather)
    description = data.get("description")
    if not isinstance(description, str):
        description = None
    condition = data.get("condition")
    context = description or "Current weather conditions"

    picks: list[ScoredRecipe] = []
    for rank, (recipe, score) in enumerate(
        zip(catalog[: config.max_recommendations], FALLBACK_SCORES), start=1,
    ):
        picks.append(ScoredRecipe(
            recipe=recipe,
            match_score=score,
            relevance_score=score,
            recommendation=RecommendationDetail(
                rank=rank,
                reasoning=(
                    "A versatile choice that works well in various weather conditions. "
                    f"{recipe.description}"
                ),
                weather_context=context,
                confidence_level=ConfidenceLevel.medium,
            ),
        ))

    analysis = WeatherAnalysis(
        temperature=_fallback_temperature(data.get("temperature")),
        condition=str(getattr(condition, "value", condition)) if condition is not None else None,
        weather_description=description,
        fallback_mode=True,
    )

    return RecommendationResult(
        weather_analysis=analysis,
        recommendations=picks,
        total_recipes_considered=len(catalog),
        weather_matched_count=len(catalog),
        final_recommendation_count=len(picks),
    )
