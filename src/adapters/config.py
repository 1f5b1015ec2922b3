from __future__ import annotations

import logging
import os
from dataclasses import replace

from src.domain.models import DEFAULT_PLANNER_CONFIG, PlannerConfig

_TRUTHY = {"1", "true", "yes", "y", "on"}


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer for {name}: {raw!r}") from exc


def env_float(name: str) -> float | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid number for {name}: {raw!r}") from exc


def planner_config_from_env(
    base: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> PlannerConfig:
    """Apply env overrides to the planner defaults.

    Env vars:
      - MAX_SEARCH_ITERATIONS
      - MAX_ALTERNATIVES
      - WALKING_RADIUS_M
      - WALKING_BENEFIT_THRESHOLD
      - MAX_WALKING_CANDIDATES
    """

    overrides: dict[str, int | float] = {}
    for env_name, field_name in (
        ("MAX_SEARCH_ITERATIONS", "max_iterations"),
        ("MAX_ALTERNATIVES", "max_alternatives"),
        ("WALKING_BENEFIT_THRESHOLD", "walking_benefit_threshold"),
        ("MAX_WALKING_CANDIDATES", "max_walking_candidates"),
    ):
        value = env_int(env_name)
        if value is not None:
            overrides[field_name] = value

    radius = env_float("WALKING_RADIUS_M")
    if radius is not None:
        overrides["walking_radius_m"] = radius

    return replace(base, **overrides) if overrides else base


def configure_logging() -> None:
    """Basic process-wide logging for the worker (level from LOG_LEVEL)."""

    level_name = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
