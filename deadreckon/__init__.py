"""Synthetic sample plots and a 1-D dead-reckoning simulation."""

from .config import (  # noqa: F401
    PlotConfig,
    ScatterConfig,
    SimulationConfig,
    VehicleConfig,
)
from .series import (  # noqa: F401
    Point,
    Points,
    Series,
    SeriesCapacityError,
    SeriesError,
    StepNotRecordedError,
    TimeSeries,
    TimeValue,
)
from .render import MatplotlibRenderer, Renderer, axis_range, series_color  # noqa: F401
from .simulation import (  # noqa: F401
    VehicleRun,
    format_report,
    max_position_error,
    run_all,
    run_scatter,
    run_vehicle_simulation,
    sample_scatter,
    simulate_vehicle,
)
