from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlannerConfig:
    """Tuning knobs for the journey planner.

    Costs are abstract units: one transfer outweighs up to 99 extra stops,
    and a penalized (already suggested) hop outweighs up to 19 transfers.
    """

    transfer_penalty: int = 100
    stop_cost: int = 1
    avoid_penalty: int = 2000
    max_iterations: int = 100_000
    max_alternatives: int = 3

    walking_radius_m: float = 500.0
    walking_speed_m_per_min: float = 80.0  # ~4.8 km/h
    walking_benefit_threshold: int = 50
    max_walking_candidates: int = 5
    max_combined_walking_candidates: int = 3

    progress_log_interval: int = 10_000

    def __post_init__(self) -> None:
        if self.transfer_penalty < 0 or self.stop_cost < 0 or self.avoid_penalty < 0:
            raise ValueError("Planner costs must be non-negative")
        if self.max_iterations < 1:
            raise ValueError(f"Invalid max_iterations: {self.max_iterations}")
        if self.max_alternatives < 1:
            raise ValueError(f"Invalid max_alternatives: {self.max_alternatives}")
        if self.progress_log_interval < 1:
            raise ValueError(
                f"Invalid progress_log_interval: {self.progress_log_interval}"
            )
        if self.walking_speed_m_per_min <= 0.0:
            raise ValueError(
                f"Invalid walking speed: {self.walking_speed_m_per_min} m/min"
            )


DEFAULT_PLANNER_CONFIG = PlannerConfig()
