"""Configuration dataclasses for the scatter sample and the vehicle run."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .series import slot_count


@dataclass
class VehicleConfig:
    cycle: float = 0.1  # control cycle [s]
    duration: float = 1000.0  # simulated time [s]
    speed_mean: float = 1.0  # [m/s]
    speed_noise_variance: float = 0.1
    sensor_noise_variance: float = 1.0

    def __post_init__(self) -> None:
        if self.cycle <= 0.0:
            raise ValueError(f"cycle must be positive, got {self.cycle}")
        if self.duration <= 0.0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.speed_noise_variance < 0.0 or self.sensor_noise_variance < 0.0:
            raise ValueError("noise variances must be non-negative")

    @property
    def length(self) -> int:
        """Number of slots in each recorded series, same rule as TimeSeries."""
        return slot_count(self.duration, self.cycle)


@dataclass
class ScatterConfig:
    samples: int = 1000
    mean: float = 20.0
    std_dev: float = 5.0

    def __post_init__(self) -> None:
        if self.samples <= 0:
            raise ValueError(f"samples must be positive, got {self.samples}")
        if self.std_dev < 0.0:
            raise ValueError(f"std_dev must be non-negative, got {self.std_dev}")


@dataclass
class PlotConfig:
    width: int = 500  # [px]
    height: int = 500  # [px]
    dpi: int = 100
    font_size: int = 20
    marker_size: float = 1.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.dpi <= 0:
            raise ValueError(f"invalid plot size {self.width}x{self.height} @ {self.dpi} dpi")

    @property
    def figsize(self) -> Tuple[float, float]:
        return (self.width / self.dpi, self.height / self.dpi)


@dataclass
class SimulationConfig:
    vehicle: VehicleConfig = field(default_factory=VehicleConfig)
    scatter: ScatterConfig = field(default_factory=ScatterConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
    seed: Optional[int] = None
