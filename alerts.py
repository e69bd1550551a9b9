from dataclasses import dataclass

from config import HOT_DAY_TEMP_C, HUMID_AIR_PCT
from weather import WeatherData


@dataclass
class Alert:
    kind: str
    message: str
    severity: str


def weather_alerts(weather: WeatherData) -> list[Alert]:
    alerts = []

    # Heat
    if weather.temperature > HOT_DAY_TEMP_C:
        alerts.append(Alert(
            kind="heat",
            message=f"High temperature ({weather.temperature:.0f}°C) - ensure adequate watering.",
            severity="medium",
        ))

    # Humid air favours fungal disease
    if weather.humidity > HUMID_AIR_PCT:
        alerts.append(Alert(
            kind="humidity",
            message=f"High humidity ({weather.humidity:.0f}%) - watch for fungal diseases.",
            severity="medium",
        ))
    return alerts
