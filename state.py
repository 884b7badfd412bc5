from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from constants import HOURS_PER_DAY
from model import (
    RandomSource,
    SamplePoint,
    TemperatureUnit,
    estimate_ambient,
    generate_series,
)

if TYPE_CHECKING:
    from config import Settings

logger = logging.getLogger("ambient_dashboard.state")


class ChartStyle(str, Enum):
    LINEAR = "linear"
    CURVED = "curved"
    STEPPED = "stepped"

    @property
    def line_shape(self) -> str:
        return {"linear": "linear", "curved": "spline", "stepped": "hv"}[self.value]


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class DashboardState:
    selected_hour: int = 12
    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    show_gridlines: bool = True
    chart_style: ChartStyle = ChartStyle.LINEAR
    theme: Theme = Theme.LIGHT
    series: tuple[SamplePoint, ...] = ()
    # Last estimate and the hour it was computed for; not refreshed with the series.
    ambient_temperature: Optional[float] = None
    ambient_hour: Optional[int] = None

    @property
    def is_dark(self) -> bool:
        return self.theme is Theme.DARK


@dataclass(frozen=True)
class SelectHour:
    hour: int


@dataclass(frozen=True)
class SetUnit:
    unit: TemperatureUnit


@dataclass(frozen=True)
class SetGridlines:
    visible: bool


@dataclass(frozen=True)
class SetChartStyle:
    style: ChartStyle


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class RefreshSeries:
    pass


@dataclass(frozen=True)
class ComputeAmbient:
    pass


Action = Union[
    SelectHour, SetUnit, SetGridlines, SetChartStyle, ToggleTheme, RefreshSeries, ComputeAmbient
]


def reduce(state: DashboardState, action: Action, rng: RandomSource) -> DashboardState:
    if isinstance(action, SelectHour):
        hour = int(action.hour)
        if not 0 <= hour < HOURS_PER_DAY:
            raise ValueError(f"Hour must be within 0..{HOURS_PER_DAY - 1}, got {action.hour}")
        return replace(state, selected_hour=hour)
    if isinstance(action, SetUnit):
        logger.debug("Unit set to %s", action.unit)
        return replace(state, unit=TemperatureUnit(action.unit))
    if isinstance(action, SetGridlines):
        return replace(state, show_gridlines=bool(action.visible))
    if isinstance(action, SetChartStyle):
        logger.debug("Chart style set to %s", action.style)
        return replace(state, chart_style=ChartStyle(action.style))
    if isinstance(action, ToggleTheme):
        return replace(state, theme=Theme.LIGHT if state.is_dark else Theme.DARK)
    if isinstance(action, RefreshSeries):
        return replace(state, series=generate_series(rng))
    if isinstance(action, ComputeAmbient):
        estimate = estimate_ambient(state.series, state.selected_hour, rng)
        if estimate is None:
            return state
        return replace(state, ambient_temperature=estimate, ambient_hour=state.selected_hour)
    raise TypeError(f"Unsupported action: {action!r}")


def initial_state(settings: "Settings", rng: RandomSource) -> DashboardState:
    state = DashboardState(
        selected_hour=settings.default_hour,
        unit=settings.default_unit,
        chart_style=settings.default_chart_style,
        theme=Theme.DARK if settings.dark_mode else Theme.LIGHT,
    )
    return reduce(state, RefreshSeries(), rng)
