from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import (
    ConfidenceLevel,
    Difficulty,
    Level,
    Season,
    TemperatureCategory,
    WeatherCondition,
)


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    description: str
    category: str = Field(..., min_length=1)
    weather_types: tuple[str, ...] = ()
    temperature: TemperatureCategory
    cooking_time: int = Field(..., gt=0, description="Minutes")
    difficulty: Difficulty
    ingredients: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()
    nutrition_highlights: tuple[str, ...] = ()


class Temperature(BaseModel):
    celsius: float
    fahrenheit: float | None = None

    @model_validator(mode="after")
    def derive_fahrenheit(self) -> Temperature:
        if self.fahrenheit is None:
            self.fahrenheit = self.celsius * 9 / 5 + 32
        return self


class WeatherSnapshot(BaseModel):
    temperature: Temperature
    condition: WeatherCondition
    humidity: float | None = Field(default=None, ge=0.0, le=100.0)
    description: str = ""
    location: str = ""
    wind_speed: float | None = None
    timestamp: datetime | None = None
    is_mock_data: bool = False


class UserPreferences(BaseModel):
    # Both are plain filters: a non-positive time or an unknown difficulty
    # matches no recipe.
    max_cooking_time: int | None = None
    difficulty: str | None = None

    @field_validator("max_cooking_time", "difficulty", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # Form selects send "" for "Any".
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def is_empty(self) -> bool:
        return self.max_cooking_time is None and self.difficulty is None


class TemperatureAnalysis(BaseModel):
    value: float
    category: TemperatureCategory | None = None
    fahrenheit: float | None = None


class CookingMotivation(BaseModel):
    level: Level
    reasons: list[str] = Field(default_factory=list)


class ComfortFoodNeed(BaseModel):
    level: Level
    factors: list[str] = Field(default_factory=list)


class WeatherAnalysis(BaseModel):
    temperature: TemperatureAnalysis | None = None
    condition: str | None = None
    season: Season | None = None
    mood_categories: list[str] = Field(default_factory=list)
    cooking_motivation: CookingMotivation | None = None
    comfort_food_need: ComfortFoodNeed | None = None
    humidity: float | None = None
    weather_description: str | None = None
    location: str | None = None
    fallback_mode: bool = False


class RecommendationDetail(BaseModel):
    rank: int = Field(..., ge=1)
    reasoning: str
    weather_context: str
    confidence_level: ConfidenceLevel


class ScoredRecipe(BaseModel):
    recipe: Recipe
    match_score: int
    match_reasons: list[str] = Field(default_factory=list)
    relevance_score: int
    score_reasons: list[str] = Field(default_factory=list)
    recommendation: RecommendationDetail | None = None


class RecommendationResult(BaseModel):
    weather_analysis: WeatherAnalysis
    recommendations: list[ScoredRecipe]
    total_recipes_considered: int
    weather_matched_count: int
    final_recommendation_count: int


# ── API payloads ─────────────────────────────────────────────────────────


def clean_city_name(value: str) -> str:
    value = value.strip()
    if len(value) < 2:
        raise ValueError("Please enter a valid city name with at least 2 characters")
    return value


class RecommendationRequest(BaseModel):
    city: str = Field(..., min_length=2, max_length=100, description="City to fetch weather for")
    max_cooking_time: int | None = Field(default=None, ge=1, description="Upper bound in minutes")
    difficulty: Difficulty | None = None

    @field_validator("max_cooking_time", "difficulty", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("city")
    @classmethod
    def strip_city(cls, value: str) -> str:
        return clean_city_name(value)

    def preferences(self) -> UserPreferences:
        return UserPreferences(
            max_cooking_time=self.max_cooking_time,
            difficulty=self.difficulty,
        )


class RecommendationResponse(BaseModel):
    weather: WeatherSnapshot
    result: RecommendationResult
