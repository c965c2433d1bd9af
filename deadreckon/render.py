"""Static PNG rendering of Points and TimeSeries with matplotlib."""
from __future__ import annotations

import math
from pathlib import Path
from typing import Protocol, Sequence, Tuple, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from .config import PlotConfig
from .series import Points, Series, TimeSeries

PathLike = Union[str, Path]

# red, blue, green, cyan, magenta, yellow
PALETTE = ("#ff0000", "#0000ff", "#00ff00", "#00ffff", "#ff00ff", "#ffff00")


class Renderer(Protocol):
    def draw_scatter(self, points: Points, path: PathLike, title: str) -> None:
        ...

    def draw_time_series(self, series_list: Sequence[TimeSeries], path: PathLike, title: str) -> None:
        ...


def series_color(index: int) -> str:
    """Colour of the ``index``-th series in a time plot; the first series skips red."""
    return PALETTE[(index + 1) % len(PALETTE)]


def axis_range(series: Series) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Integer axis limits ``floor(min)..ceil(max)`` for both axes of ``series``."""
    xmin, xmax, ymin, ymax = series.calc_minmax()
    xrange = (math.floor(xmin), math.ceil(xmax))
    yrange = (math.floor(ymin), math.ceil(ymax))
    for name, (lo, hi) in (("x", xrange), ("y", yrange)):
        if lo >= hi:
            raise ValueError(f"degenerate {name} range {lo}..{hi}")
    return xrange, yrange


class MatplotlibRenderer:
    """Draws marker plots on a fixed-size white canvas."""

    def __init__(self, config: PlotConfig | None = None) -> None:
        self.config = config or PlotConfig()

    def _new_axes(self, title: str) -> Tuple[plt.Figure, plt.Axes]:
        fig, ax = plt.subplots(figsize=self.config.figsize, dpi=self.config.dpi)
        fig.patch.set_facecolor("white")
        ax.set_facecolor("white")
        ax.set_title(title, fontfamily="sans-serif", fontsize=self.config.font_size)
        ax.grid(alpha=0.3, linestyle="--", linewidth=0.5)
        return fig, ax

    def _save(self, fig: plt.Figure, path: PathLike) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            fig.tight_layout()
            fig.savefig(path, dpi=self.config.dpi, facecolor="white")
        finally:
            plt.close(fig)

    def _draw(self, ax: plt.Axes, series: Series, color: str) -> None:
        coords = list(series.pairs())
        xs = [c[0] for c in coords]
        ys = [c[1] for c in coords]
        ax.scatter(xs, ys, s=self.config.marker_size, marker="o", color=color, linewidths=0)

    def draw_scatter(self, points: Points, path: PathLike, title: str) -> None:
        xrange, yrange = axis_range(points)
        fig, ax = self._new_axes(title)
        self._draw(ax, points, PALETTE[0])
        ax.set_xlim(*xrange)
        ax.set_ylim(*yrange)
        self._save(fig, path)

    def draw_time_series(self, series_list: Sequence[TimeSeries], path: PathLike, title: str) -> None:
        if not series_list:
            raise ValueError("draw_time_series needs at least one series")
        # Only the first series sizes the axes; the rest may be clipped.
        xrange, yrange = axis_range(series_list[0])
        fig, ax = self._new_axes(title)
        for idx, series in enumerate(series_list):
            self._draw(ax, series, series_color(idx))
        ax.set_xlim(*xrange)
        ax.set_ylim(*yrange)
        ax.set_xlabel("t [s]")
        self._save(fig, path)
