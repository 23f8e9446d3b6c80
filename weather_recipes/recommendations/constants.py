"""
Closed vocabularies and lookup tables for the recommendation engine.

Every mapping below is keyed by an enum and covers its full key set, so a
lookup on a valid tag can never silently miss.
"""
from __future__ import annotations

from enum import Enum


class TemperatureCategory(str, Enum):
    cold = "cold"
    cool = "cool"
    warm = "warm"
    hot = "hot"


class WeatherCondition(str, Enum):
    clear = "clear"
    sunny = "sunny"
    partly_cloudy = "partly-cloudy"
    cloudy = "cloudy"
    overcast = "overcast"
    rainy = "rainy"
    drizzle = "drizzle"
    snow = "snow"
    fog = "fog"


class Season(str, Enum):
    spring = "spring"
    summer = "summer"
    fall = "fall"
    winter = "winter"


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class Level(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class ConfidenceLevel(str, Enum):
    very_high = "very-high"
    high = "high"
    medium = "medium"
    low = "low"
    very_low = "very-low"


class WeatherGroup(str, Enum):
    sunny = "sunny"
    rainy = "rainy"
    cold = "cold"
    mild = "mild"


# Ordered coldest to hottest; adjacency is an index distance of 1.
TEMPERATURE_ORDER: tuple[TemperatureCategory, ...] = (
    TemperatureCategory.cold,
    TemperatureCategory.cool,
    TemperatureCategory.warm,
    TemperatureCategory.hot,
)

WEATHER_MOODS: dict[WeatherCondition, tuple[str, ...]] = {
    WeatherCondition.clear: ("light", "refreshing"),
    WeatherCondition.sunny: ("light", "refreshing", "cooling"),
    WeatherCondition.partly_cloudy: ("light", "balanced"),
    WeatherCondition.cloudy: ("comfort", "warming"),
    WeatherCondition.overcast: ("comfort", "warming"),
    WeatherCondition.rainy: ("comfort", "warming"),
    WeatherCondition.drizzle: ("comfort", "warming"),
    WeatherCondition.snow: ("comfort", "warming"),
    WeatherCondition.fog: ("comfort", "warming"),
}

TEMPERATURE_MOODS: dict[TemperatureCategory, tuple[str, ...]] = {
    TemperatureCategory.hot: ("cooling", "refreshing"),
    TemperatureCategory.warm: ("light", "balanced"),
    TemperatureCategory.cool: ("warming", "comfort"),
    TemperatureCategory.cold: ("warming", "comfort"),
}

SEASONAL_PREFERENCES: dict[Season, tuple[str, ...]] = {
    Season.spring: ("fresh", "light", "vegetables"),
    Season.summer: ("cooling", "fresh", "fruits"),
    Season.fall: ("warming", "hearty", "spices"),
    Season.winter: ("comfort", "warming", "rich"),
}

# Groups hold raw tags rather than WeatherCondition members because recipes
# list free-form weather types ("cold", "snowy", "humid") next to conditions.
WEATHER_GROUPS: dict[WeatherGroup, tuple[str, ...]] = {
    WeatherGroup.sunny: ("clear", "sunny", "partly-cloudy"),
    WeatherGroup.rainy: ("rainy", "drizzle", "overcast"),
    WeatherGroup.cold: ("snow", "fog", "cold"),
    WeatherGroup.mild: ("partly-cloudy", "cloudy"),
}

SEASON_BY_MONTH: dict[int, Season] = {
    1: Season.winter,
    2: Season.winter,
    3: Season.spring,
    4: Season.spring,
    5: Season.spring,
    6: Season.summer,
    7: Season.summer,
    8: Season.summer,
    9: Season.fall,
    10: Season.fall,
    11: Season.fall,
    12: Season.winter,
}

DIFFICULTY_LEVELS: dict[Difficulty, str] = {
    Difficulty.easy: "Simple preparation, minimal cooking skills required",
    Difficulty.medium: "Some cooking experience helpful, moderate preparation time",
    Difficulty.hard: "Advanced techniques required, longer preparation and attention needed",
}

GLOOMY_CONDITIONS = frozenset({
    WeatherCondition.rainy,
    WeatherCondition.drizzle,
    WeatherCondition.overcast,
    WeatherCondition.cloudy,
})
BRIGHT_CONDITIONS = frozenset({WeatherCondition.clear, WeatherCondition.sunny})
DREARY_CONDITIONS = frozenset({
    WeatherCondition.rainy,
    WeatherCondition.drizzle,
    WeatherCondition.snow,
    WeatherCondition.fog,
})
