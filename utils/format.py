from __future__ import annotations

from model import TemperatureUnit, to_display_unit


def format_hour(hour: int) -> str:
    """
    Hour-of-day label as shown on the chart axis and slider, e.g. '7:00'.
    """
    return f"{int(hour)}:00"


def format_temperature(celsius: float, unit: TemperatureUnit) -> str:
    """
    Convert a stored Celsius value to the display unit and attach the
    symbol, e.g. '21.3°C' or '70.3°F'.
    """
    return f"{to_display_unit(celsius, unit)}°{unit.symbol}"


def axis_title(unit: TemperatureUnit) -> str:
    return f"Temperature (°{unit.symbol})"
