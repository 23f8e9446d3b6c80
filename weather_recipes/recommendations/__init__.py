"""
Weather-driven recipe recommendation engine.

Responsibilities:
- Load the static recipe catalog once and share it read-only.
- Analyse a weather snapshot into temperature, season and mood signals.
- Score, filter and rank catalog recipes using deterministic point rules.
- Explain each pick and fall back to a generic slice when scoring fails.
"""
