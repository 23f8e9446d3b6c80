from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query

from .recommendations.catalog import get_catalog, get_recipe
from .recommendations.constants import (
    DIFFICULTY_LEVELS,
    Season,
    TemperatureCategory,
    WeatherCondition,
)
from .recommendations.engine import recommend
from .recommendations.models import (
    Recipe,
    RecommendationRequest,
    RecommendationResponse,
    WeatherSnapshot,
    clean_city_name,
)
from .weather.client import WeatherServiceError, fetch_weather_for_city

app = FastAPI(title="Weather Recipe Recommender API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    categories = sorted({r.category for r in catalog})
    return {
        "categories": categories,
        "difficulties": [
            {"level": level.value, "description": text}
            for level, text in DIFFICULTY_LEVELS.items()
        ],
        "conditions": [c.value for c in WeatherCondition],
        "temperature_categories": [t.value for t in TemperatureCategory],
        "seasons": [s.value for s in Season],
    }


# ── Recipe endpoints ─────────────────────────────────────────────────────


@app.get("/recipes", response_model=list[Recipe])
def recipes() -> list[Recipe]:
    return list(get_catalog())


@app.get("/recipes/{recipe_id}", response_model=Recipe)
def recipe_detail(recipe_id: int) -> Recipe:
    recipe = get_recipe(get_catalog(), recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


# ── Weather + recommendation endpoints ───────────────────────────────────


def _weather_for(city: str) -> WeatherSnapshot:
    try:
        return fetch_weather_for_city(city)
    except WeatherServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@app.get("/weather", response_model=WeatherSnapshot)
def weather(city: str = Query(..., min_length=2, max_length=100)) -> WeatherSnapshot:
    try:
        city = clean_city_name(city)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _weather_for(city)


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: RecommendationRequest) -> RecommendationResponse:
    snapshot = _weather_for(body.city)
    result = recommend(snapshot, body.preferences(), get_catalog())
    return RecommendationResponse(weather=snapshot, result=result)
