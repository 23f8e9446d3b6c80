from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import Recipe

logger = logging.getLogger(__name__)

_catalog: tuple[Recipe, ...] | None = None


class CatalogError(Exception):
    """Raised when the recipe catalog file cannot be read or is invalid."""


def load_catalog(path: Path) -> tuple[Recipe, ...]:
    """Read and validate a recipe catalog JSON file.

    Returns an immutable tuple in file order; that order breaks score ties
    during ranking and decides the fallback slice.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Could not read recipe catalog {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise CatalogError(f"Recipe catalog {path} must contain a JSON array")

    try:
        recipes = tuple(Recipe.model_validate(item) for item in raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid recipe in catalog {path}: {exc}") from exc

    seen: set[int] = set()
    for recipe in recipes:
        if recipe.id in seen:
            raise CatalogError(f"Duplicate recipe id {recipe.id} in catalog {path}")
        seen.add(recipe.id)

    logger.info("Loaded %d recipes from %s", len(recipes), path)
    return recipes


def get_catalog(config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> tuple[Recipe, ...]:
    """Return the shared recipe catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.catalog_path)
    return _catalog


def get_recipe(catalog: Sequence[Recipe], recipe_id: int) -> Recipe | None:
    for recipe in catalog:
        if recipe.id == recipe_id:
            return recipe
    return None
