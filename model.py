from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Protocol, Tuple

import pandas as pd

from constants import (
    AMBIENT_NOISE_C,
    BATTERY_BASELINE_C,
    BATTERY_JITTER_C,
    BATTERY_WEIGHT,
    DAILY_AMPLITUDE_C,
    HOURS_PER_DAY,
    LOCAL_BASELINE_C,
    LOCAL_JITTER_C,
    LOCAL_WEIGHT,
)

logger = logging.getLogger("ambient_dashboard.model")


class RandomSource(Protocol):
    """Anything with ``uniform(a, b)``; ``random.Random`` qualifies."""

    def uniform(self, a: float, b: float) -> float: ...


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "C" if self is TemperatureUnit.CELSIUS else "F"


@dataclass(frozen=True)
class SamplePoint:
    hour: int
    local_temperature: float
    battery_temperature: float


Series = Tuple[SamplePoint, ...]


def make_series(points: Iterable[SamplePoint]) -> Series:
    """
    Freeze points into a Series ordered by hour. Every hour 0..23 must be
    present exactly once.
    """
    ordered = tuple(sorted(points, key=lambda p: p.hour))
    hours = [p.hour for p in ordered]
    if hours != list(range(HOURS_PER_DAY)):
        raise ValueError(
            f"Series must hold one sample per hour 0..{HOURS_PER_DAY - 1}, got hours {hours}"
        )
    return ordered


def _daily_wave(hour: int) -> float:
    return DAILY_AMPLITUDE_C * math.sin(hour * math.pi / 12)


def generate_series(rng: RandomSource) -> Series:
    points = []
    for hour in range(HOURS_PER_DAY):
        wave = _daily_wave(hour)
        local = LOCAL_BASELINE_C + wave + rng.uniform(0, LOCAL_JITTER_C)
        battery = BATTERY_BASELINE_C + wave + rng.uniform(0, BATTERY_JITTER_C)
        points.append(SamplePoint(hour, round(local, 1), round(battery, 1)))
    logger.info("Generated synthetic series with %d samples", len(points))
    return make_series(points)


def find_sample(series: Iterable[SamplePoint], hour: int) -> Optional[SamplePoint]:
    for point in series:
        if point.hour == hour:
            return point
    return None


def weighted_average(point: SamplePoint) -> float:
    return LOCAL_WEIGHT * point.local_temperature + BATTERY_WEIGHT * point.battery_temperature


def estimate_ambient(
    series: Iterable[SamplePoint], hour: int, rng: RandomSource
) -> Optional[float]:
    """
    Weighted local/battery average at ``hour`` plus U(-1, 1) noise, rounded to
    one decimal. Returns None when the series has no sample for that hour.
    """
    point = find_sample(series, hour)
    if point is None:
        logger.warning("No sample for hour %s; ambient estimate skipped", hour)
        return None
    noise = rng.uniform(-AMBIENT_NOISE_C, AMBIENT_NOISE_C)
    estimate = round(weighted_average(point) + noise, 1)
    logger.info("Ambient estimate for %02d:00 is %.1f°C", hour, estimate)
    return estimate


def to_display_unit(celsius: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.FAHRENHEIT:
        return round(celsius * 9 / 5 + 32, 1)
    return celsius


def from_display_unit(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.FAHRENHEIT:
        return round((value - 32) * 5 / 9, 1)
    return value


def series_to_frame(
    series: Iterable[SamplePoint], unit: TemperatureUnit = TemperatureUnit.CELSIUS
) -> pd.DataFrame:
    rows = [
        {
            "hour": p.hour,
            "local_temperature": to_display_unit(p.local_temperature, unit),
            "battery_temperature": to_display_unit(p.battery_temperature, unit),
        }
        for p in series
    ]
    return pd.DataFrame(rows, columns=["hour", "local_temperature", "battery_temperature"])


def series_to_csv(
    series: Iterable[SamplePoint], unit: TemperatureUnit = TemperatureUnit.CELSIUS
) -> str:
    return series_to_frame(series, unit).to_csv(index=False)
