"""Fixed-capacity sample containers used by the plots and the vehicle run."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import Iterator, List, Tuple

MinMax = Tuple[float, float, float, float]


def slot_count(duration: float, cycle: float) -> int:
    """Slots needed to cover `duration` at one sample per `cycle`, rounded up."""
    return math.ceil(duration / cycle)


class SeriesError(IndexError):
    """Base class for recording and lookup failures on a series."""


class SeriesCapacityError(SeriesError):
    """Raised when recording past the preallocated length."""


class StepNotRecordedError(SeriesError):
    """Raised when reading a step that has not been recorded yet."""


class Series(ABC):
    """Anything the renderer can plot: ordered (x, y) pairs plus their extrema."""

    @abstractmethod
    def calc_minmax(self) -> MinMax:
        """Return (xmin, xmax, ymin, ymax) in one pass."""

    @abstractmethod
    def pairs(self) -> Iterator[Tuple[float, float]]:
        """Yield the (horizontal, vertical) coordinates in order."""

    @property
    def xmin(self) -> float:
        return self.calc_minmax()[0]

    @property
    def xmax(self) -> float:
        return self.calc_minmax()[1]

    @property
    def ymin(self) -> float:
        return self.calc_minmax()[2]

    @property
    def ymax(self) -> float:
        return self.calc_minmax()[3]


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


class Points(Series):
    """Fixed-length list of 2-D samples, filled in place by the caller."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self.data: List[Point] = [Point(0.0, 0.0) for _ in range(length)]
        self.length = length

    def __len__(self) -> int:
        return self.length

    def pairs(self) -> Iterator[Tuple[float, float]]:
        for pt in self.data:
            yield pt.x, pt.y

    def calc_minmax(self) -> MinMax:
        if not self.data:
            raise IndexError("cannot compute extrema of an empty Points")
        xmin = xmax = self.data[0].x
        ymin = ymax = self.data[0].y
        for pt in self.data:
            if pt.x < xmin:
                xmin = pt.x
            if pt.x > xmax:
                xmax = pt.x
            if pt.y < ymin:
                ymin = pt.y
            if pt.y > ymax:
                ymax = pt.y
        return xmin, xmax, ymin, ymax


@dataclass
class TimeValue:
    t: float = 0.0
    v: float = 0.0


class TimeSeries(Series):
    """
    Preallocated (time, value) samples on a fixed control cycle.

    Slot 0 holds the initial value at t = 0. Each ``record`` call advances
    the cursor by one slot and stamps it with the previous time plus one
    cycle, so at most ``length - 1`` values can be recorded.
    """

    def __init__(self, cycle: float, total_duration: float, initial_value: float = 0.0) -> None:
        if cycle <= 0.0:
            raise ValueError(f"cycle must be positive, got {cycle}")
        length = slot_count(total_duration, cycle)
        if length < 1:
            raise ValueError(f"duration {total_duration} gives no slots at cycle {cycle}")
        self.data: List[TimeValue] = [TimeValue(0.0, 0.0) for _ in range(length)]
        self.data[0].v = initial_value
        self.cycle = cycle
        self.length = length
        self.step = 0

    def __len__(self) -> int:
        return self.length

    @property
    def is_full(self) -> bool:
        return self.step >= self.length - 1

    def record(self, value: float) -> None:
        """Record ``value`` one cycle after the last sample and advance the cursor."""
        if self.is_full:
            raise SeriesCapacityError(
                f"series is full: {self.length} slots, cursor at {self.step}"
            )
        time_now = self.data[self.step].t + self.cycle
        self.step += 1
        self.data[self.step].t = time_now
        self.data[self.step].v = value

    def _check_step(self, step: int) -> None:
        if not 0 <= step <= self.step:
            raise StepNotRecordedError(
                f"step {step} not recorded (cursor at {self.step}, length {self.length})"
            )

    def value_at_step(self, step: int) -> float:
        self._check_step(step)
        return self.data[step].v

    def time_at_step(self, step: int) -> float:
        self._check_step(step)
        return self.data[step].t

    def recorded(self) -> List[TimeValue]:
        return self.data[: self.step + 1]

    def times(self) -> List[float]:
        return [tv.t for tv in self.recorded()]

    def values(self) -> List[float]:
        return [tv.v for tv in self.recorded()]

    def pairs(self) -> Iterator[Tuple[float, float]]:
        for tv in self.recorded():
            yield tv.t, tv.v

    def calc_minmax(self) -> MinMax:
        # Time is monotonic, so its extrema are the first and last recorded slots.
        vmin = vmax = self.data[0].v
        for tv in self.recorded():
            if tv.v < vmin:
                vmin = tv.v
            if tv.v > vmax:
                vmax = tv.v
        return self.data[0].t, self.data[self.step].t, vmin, vmax
