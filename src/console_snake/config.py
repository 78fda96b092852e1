"""Game configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass

# Smallest board that still leaves a 3x3 playable interior.
MIN_BOARD_SIZE = 5


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions, starting score and frame timing.

    Widths and heights include the one-cell border on every edge.
    """

    width: int = 32
    height: int = 16
    initial_score: int = 5
    frame_interval: float = 0.5
    input_budget: float = 0.5
    game_over_hold: float = 2.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < MIN_BOARD_SIZE or self.height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board dimensions must be at least "
                f"{MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}."
            )
        if self.initial_score < 1:
            raise ValueError("initial_score must be at least 1.")
        if self.frame_interval <= 0:
            raise ValueError("frame_interval must be positive.")
        if self.input_budget < 0:
            raise ValueError("input_budget must not be negative.")
        if self.game_over_hold < 0:
            raise ValueError("game_over_hold must not be negative.")

    def to_dict(self) -> dict:
        return asdict(self)
