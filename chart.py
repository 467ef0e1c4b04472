"""
Geometry for the "Most Used Languages" bar chart, drawn as inline SVG.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from models import LanguageStat

# Plot area margins inside the SVG viewport
MARGIN_LEFT = 40
MARGIN_RIGHT = 16
MARGIN_TOP = 16
MARGIN_BOTTOM = 32

TICK_COUNT = 4


@dataclass
class Bar:
    label: str
    count: int
    x: float
    y: float
    width: float
    height: float

    @property
    def label_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Tick:
    value: int
    y: float


@dataclass
class BarChart:
    width: int
    height: int
    bars: List[Bar]
    ticks: List[Tick]

    @property
    def baseline(self) -> float:
        return self.height - MARGIN_BOTTOM

    @property
    def plot_left(self) -> float:
        return MARGIN_LEFT

    @property
    def plot_right(self) -> float:
        return self.width - MARGIN_RIGHT


def _tick_step(max_count: int) -> int:
    return max(1, math.ceil(max_count / TICK_COUNT))


def bar_chart(stats: Sequence[LanguageStat], width: int = 720, height: int = 300) -> BarChart:
    """
    Lay out one bar per language, left to right in the given order.

    The y axis runs from 0 to a whole multiple of the tick step so tick
    labels are integers.
    """
    plot_w = width - MARGIN_LEFT - MARGIN_RIGHT
    plot_h = height - MARGIN_TOP - MARGIN_BOTTOM
    baseline = height - MARGIN_BOTTOM

    max_count = max((s.count for s in stats), default=0)
    step = _tick_step(max_count)
    y_max = step * TICK_COUNT

    def y_of(value: float) -> float:
        return baseline - plot_h * (value / y_max)

    ticks = [Tick(value=step * i, y=round(y_of(step * i), 2)) for i in range(TICK_COUNT + 1)]

    bars: List[Bar] = []
    if stats:
        slot = plot_w / len(stats)
        bar_w = slot * 0.7
        for i, s in enumerate(stats):
            top = y_of(s.count)
            bars.append(
                Bar(
                    label=s.language,
                    count=s.count,
                    x=round(MARGIN_LEFT + slot * i + (slot - bar_w) / 2, 2),
                    y=round(top, 2),
                    width=round(bar_w, 2),
                    height=round(baseline - top, 2),
                )
            )

    return BarChart(width=width, height=height, bars=bars, ticks=ticks)
