"""Random scatter sample and 1-D vehicle dead-reckoning run."""
from __future__ import annotations

from dataclasses import dataclass
import math
from pathlib import Path
from typing import Tuple

import numpy as np

from .config import ScatterConfig, SimulationConfig, VehicleConfig
from .render import Renderer
from .series import Points, TimeSeries


@dataclass
class VehicleRun:
    x_true: TimeSeries
    x_est: TimeSeries
    spd_true: TimeSeries
    final_true: float
    final_est: float
    max_error: float
    max_error_time: float


def sample_scatter(config: ScatterConfig, rng: np.random.Generator) -> Points:
    points = Points(config.samples)
    for pt in points.data:
        pt.x = float(rng.normal(config.mean, config.std_dev))
        pt.y = float(rng.normal(config.mean, config.std_dev))
    return points


def max_position_error(x_true: TimeSeries, x_est: TimeSeries) -> Tuple[float, float]:
    """Largest |x_true - x_est| over the recorded steps and the time it occurs."""
    max_error = 0.0
    max_error_time = 0.0
    for idx in range(min(x_true.step, x_est.step) + 1):
        err = abs(x_true.value_at_step(idx) - x_est.value_at_step(idx))
        if err > max_error:
            max_error = err
            max_error_time = x_true.time_at_step(idx)
    return max_error, max_error_time


def simulate_vehicle(config: VehicleConfig, rng: np.random.Generator) -> VehicleRun:
    """
    Drive a vehicle at a noisy speed and dead-reckon it from a noisy speed sensor.

    Per cycle:
        spd    = speed_mean + N(0, speed_noise_variance)
        x_true = x_true + cycle * spd
        y      = spd + N(0, sensor_noise_variance)
        x_est  = x_est + cycle * y

    The config holds variances, so each noise term is drawn as
    N(0, sigma) with sigma = sqrt(variance); a variance of 0.1 gives a
    standard deviation of about 0.316.
    """
    x_true = TimeSeries(config.cycle, config.duration, 0.0)
    x_est = TimeSeries(config.cycle, config.duration, 0.0)
    spd_true = TimeSeries(config.cycle, config.duration, 0.0)
    spd_sigma = math.sqrt(config.speed_noise_variance)
    sens_sigma = math.sqrt(config.sensor_noise_variance)

    xpos = 0.0
    xpos_est = 0.0
    for _ in range(x_true.length - 1):
        spd = config.speed_mean + float(rng.normal(0.0, spd_sigma))
        xpos += config.cycle * spd

        y = spd + float(rng.normal(0.0, sens_sigma))
        xpos_est += config.cycle * y

        x_true.record(xpos)
        spd_true.record(spd)
        x_est.record(xpos_est)

    max_error, max_error_time = max_position_error(x_true, x_est)
    return VehicleRun(
        x_true=x_true,
        x_est=x_est,
        spd_true=spd_true,
        final_true=xpos,
        final_est=xpos_est,
        max_error=max_error,
        max_error_time=max_error_time,
    )


def format_report(run: VehicleRun) -> str:
    return (
        f"x_true = {run.final_true} [m], x_est = {run.final_est} [m], "
        f"maxerror = {run.max_error} [m] @ {run.max_error_time} [s]"
    )


def run_scatter(
    config: SimulationConfig, rng: np.random.Generator, renderer: Renderer, output_dir: Path
) -> Points:
    points = sample_scatter(config.scatter, rng)
    renderer.draw_scatter(points, output_dir / "normal_dist.png", "normal_dist")
    return points


def run_vehicle_simulation(
    config: SimulationConfig, rng: np.random.Generator, renderer: Renderer, output_dir: Path
) -> VehicleRun:
    run = simulate_vehicle(config.vehicle, rng)
    renderer.draw_time_series([run.x_true, run.x_est], output_dir / "x_true.png", "x_true")
    renderer.draw_time_series([run.spd_true], output_dir / "spd_true.png", "spd_true")
    return run


def run_all(config: SimulationConfig, renderer: Renderer, output_dir: Path) -> VehicleRun:
    """Render the scatter sample, run the vehicle and print the error summary."""
    rng = np.random.default_rng(config.seed)
    run_scatter(config, rng, renderer, output_dir)
    run = run_vehicle_simulation(config, rng, renderer, output_dir)
    print(format_report(run))
    return run
