from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EngineConfig:
    max_recommendations: int = 3
    catalog_path: Path = Path(__file__).resolve().parent.parent / "data" / "recipes.json"


DEFAULT_ENGINE_CONFIG = EngineConfig()
