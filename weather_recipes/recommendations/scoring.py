"""
Point rules for matching, re-ranking and explaining recipes.

Stage 2 (``score_recipe``) rewards weather fit, stage 3
(``apply_user_preferences``) is the only hard filter, stage 4
(``rank_recipes``) adds situational bonuses on top of the match score and
stage 5 (``explain_recommendations``) turns the result into prose.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from .constants import (
    SEASONAL_PREFERENCES,
    TEMPERATURE_ORDER,
    WEATHER_GROUPS,
    ConfidenceLevel,
    Difficulty,
    Level,
    TemperatureCategory,
)
from .models import (
    RecommendationDetail,
    Recipe,
    ScoredRecipe,
    UserPreferences,
    WeatherAnalysis,
)

CONDITION_MATCH_POINTS = 10
TEMPERATURE_MATCH_POINTS = 8
MOOD_MATCH_POINTS = 6
ADJACENT_TEMPERATURE_POINTS = 4
SEASONAL_MATCH_POINTS = 3
RELATED_WEATHER_POINTS = 2
BASE_POINTS = 1

MIN_MATCH_SCORE = BASE_POINTS

COMFORT_BONUS = 5
INVOLVED_COOKING_BONUS = 3
SIMPLE_COOKING_BONUS = 4
QUICK_COOKING_BONUS = 2
QUICK_COOKING_MINUTES = 20
LONG_COOKING_MINUTES = 60
HOT_WEATHER_NUTRITION_BONUS = 3
COLD_WEATHER_NUTRITION_BONUS = 3

REASONS_IN_EXPLANATION = 3


def _highlights_contain(recipe: Recipe, keywords: Iterable[str]) -> bool:
    highlights = [h.lower() for h in recipe.nutrition_highlights]
    return any(k in h for k in keywords for h in highlights)


def _is_adjacent_temperature(a: TemperatureCategory, b: TemperatureCategory) -> bool:
    return abs(TEMPERATURE_ORDER.index(a) - TEMPERATURE_ORDER.index(b)) == 1


def _matches_season(recipe: Recipe, keywords: Iterable[str]) -> bool:
    description = recipe.description.lower()
    for keyword in keywords:
        if keyword in recipe.category or keyword in description:
            return True
        if _highlights_contain(recipe, (keyword,)):
            return True
    return False


def _related_weather_group(recipe: Recipe, condition: str) -> str | None:
    """Name of the first group holding the condition and another of the recipe's types."""
    for group, tags in WEATHER_GROUPS.items():
        if condition not in tags:
            continue
        if any(t != condition and t in tags for t in recipe.weather_types):
            return group.value
    return None


def score_recipe(recipe: Recipe, analysis: WeatherAnalysis) -> ScoredRecipe:
    """Compute the weather match score of a single recipe."""
    score = 0
    reasons: list[str] = []
    condition = analysis.condition
    category = analysis.temperature.category
    season = analysis.season

    if condition in recipe.weather_types:
        score += CONDITION_MATCH_POINTS
        reasons.append(f"Perfect match for {condition} weather")

    if recipe.temperature == category:
        score += TEMPERATURE_MATCH_POINTS
        reasons.append(f"Ideal for {category.value} temperatures")

    if recipe.category in analysis.mood_categories:
        score += MOOD_MATCH_POINTS
        reasons.append(f"Matches your weather mood for {recipe.category} food")

    if _is_adjacent_temperature(recipe.temperature, category):
        score += ADJACENT_TEMPERATURE_POINTS
        reasons.append(
            f"Also suits {recipe.temperature.value} weather close to today's {category.value}"
        )

    if _matches_season(recipe, SEASONAL_PREFERENCES[season]):
        score += SEASONAL_MATCH_POINTS
        reasons.append(f"Perfect for {season.value} season")

    group = _related_weather_group(recipe, condition)
    if group is not None:
        score += RELATED_WEATHER_POINTS
        reasons.append(f"Works well in similar {group} weather")

    # The base point carries no reason: reasons name weather matches only.
    score += BASE_POINTS

    return ScoredRecipe(
        recipe=recipe,
        match_score=score,
        match_reasons=reasons,
        relevance_score=score,
        score_reasons=list(reasons),
    )


def score_catalog(catalog: Sequence[Recipe], analysis: WeatherAnalysis) -> list[ScoredRecipe]:
    """Score every recipe and keep those reaching the minimum match score.

    The base point guarantees every recipe passes, so weather never
    excludes a recipe on its own.
    """
    scored = [score_recipe(recipe, analysis) for recipe in catalog]
    return [s for s in scored if s.match_score >= MIN_MATCH_SCORE]


def apply_user_preferences(
    candidates: Sequence[ScoredRecipe], preferences: UserPreferences | None,
) -> list[ScoredRecipe]:
    if preferences is None or preferences.is_empty():
        return list(candidates)

    kept: list[ScoredRecipe] = []
    for candidate in candidates:
        recipe = candidate.recipe
        if (
            preferences.max_cooking_time is not None
            and recipe.cooking_time > preferences.max_cooking_time
        ):
            continue
        if preferences.difficulty is not None and recipe.difficulty != preferences.difficulty:
            continue
        kept.append(candidate)
    return kept


def _apply_bonuses(candidate: ScoredRecipe, analysis: WeatherAnalysis) -> ScoredRecipe:
    recipe = candidate.recipe
    score = candidate.match_score
    reasons = list(candidate.match_reasons)
    category = analysis.temperature.category
    motivation = analysis.cooking_motivation.level

    if analysis.comfort_food_need.level is Level.high and recipe.category == "comfort":
        score += COMFORT_BONUS
        reasons.append("High comfort food appeal for current weather")

    if motivation is Level.high and recipe.difficulty is not Difficulty.easy:
        score += INVOLVED_COOKING_BONUS
        reasons.append("Weather encourages more involved cooking")
    elif motivation is Level.low and recipe.difficulty is Difficulty.easy:
        score += SIMPLE_COOKING_BONUS
        reasons.append("Simple preparation suits current weather mood")

    if recipe.cooking_time <= QUICK_COOKING_MINUTES:
        score += QUICK_COOKING_BONUS
        reasons.append("Quick to get on the table")

    if category is TemperatureCategory.hot and _highlights_contain(recipe, ("cooling", "hydrating")):
        score += HOT_WEATHER_NUTRITION_BONUS
        reasons.append("Cooling and hydrating in the heat")

    if category is TemperatureCategory.cold and _highlights_contain(recipe, ("warming", "protein")):
        score += COLD_WEATHER_NUTRITION_BONUS
        reasons.append("Warming and nourishing in the cold")

    return candidate.model_copy(update={"relevance_score": score, "score_reasons": reasons})


def rank_recipes(
    candidates: Sequence[ScoredRecipe], analysis: WeatherAnalysis, limit: int = 3,
) -> list[ScoredRecipe]:
    """Add situational bonuses and return the top ``limit`` by final score.

    Ties keep their incoming (catalog) order.
    """
    rescored = [_apply_bonuses(c, analysis) for c in candidates]
    rescored.sort(key=lambda c: c.relevance_score, reverse=True)
    return rescored[:limit]


def confidence_level(score: int) -> ConfidenceLevel:
    if score >= 20:
        return ConfidenceLevel.very_high
    if score >= 15:
        return ConfidenceLevel.high
    if score >= 10:
        return ConfidenceLevel.medium
    if score >= 5:
        return ConfidenceLevel.low
    return ConfidenceLevel.very_low


def confidence_sentence(score: int) -> str:
    if score >= 15:
        return "This is an excellent match for current conditions!"
    if score >= 10:
        return "This is a good choice for the weather."
    return "This could work well given the conditions."


def build_reasoning(candidate: ScoredRecipe, analysis: WeatherAnalysis, rank: int) -> str:
    recipe = candidate.recipe
    category = analysis.temperature.category
    reasons = list(candidate.match_reasons[:REASONS_IN_EXPLANATION])

    if category is TemperatureCategory.cold and recipe.category in ("comfort", "warming"):
        reasons.append(f"This {recipe.category} dish will warm you up on this {category.value} day")
    elif category is TemperatureCategory.hot and recipe.category in ("cooling", "refreshing"):
        reasons.append(f"This {recipe.category} meal will help you stay cool in the heat")

    if recipe.cooking_time <= QUICK_COOKING_MINUTES:
        reasons.append("Quick and easy to prepare")
    elif recipe.cooking_time >= LONG_COOKING_MINUTES:
        reasons.append("Worth the time investment for a satisfying meal")

    reasons.append(f"Seasonally appropriate for {analysis.season.value}")

    reasoning = f"Ranked #{rank} because: " + ", ".join(reasons) + "."
    return f"{reasoning} {confidence_sentence(candidate.relevance_score)}"


def explain_recommendations(
    ranked: Sequence[ScoredRecipe], analysis: WeatherAnalysis,
) -> list[ScoredRecipe]:
    explained: list[ScoredRecipe] = []
    for rank, candidate in enumerate(ranked, start=1):
        detail = RecommendationDetail(
            rank=rank,
            reasoning=build_reasoning(candidate, analysis, rank),
            weather_context=analysis.weather_description or "",
            confidence_level=confidence_level(candidate.relevance_score),
        )
        explained.append(candidate.model_copy(update={"recommendation": detail}))
    return explained
