from __future__ import annotations

HOURS_PER_DAY: int = 24

# Synthetic series: baseline + amplitude * sin(hour * pi / 12) + U(0, jitter)
LOCAL_BASELINE_C: float = 18.0
BATTERY_BASELINE_C: float = 25.0
DAILY_AMPLITUDE_C: float = 5.0
LOCAL_JITTER_C: float = 2.0
BATTERY_JITTER_C: float = 3.0

# Ambient estimate weights and symmetric noise bound
LOCAL_WEIGHT: float = 0.6
BATTERY_WEIGHT: float = 0.4
AMBIENT_NOISE_C: float = 1.0

THEME_COLORS: dict[str, dict[str, str]] = {
    "light": {
        "background": "white",
        "text": "black",
        "grid": "#e5e5e5",
        "local": "#2196f3",
        "battery": "#4caf50",
        "ambient": "#f50057",
    },
    "dark": {
        "background": "#1a1a1a",
        "text": "white",
        "grid": "#333333",
        "local": "#64b5f6",
        "battery": "#81c784",
        "ambient": "#ff4081",
    },
}
