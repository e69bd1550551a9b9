import httpx
import logging
from dataclasses import dataclass

from config import HTTP_TIMEOUT, OPEN_METEO_URL, TIMEZONE

logger = logging.getLogger(__name__)

# WMO weather interpretation codes used by Open-Meteo
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear", 2: "Partly cloudy", 3: "Overcast",
    45: "Fog", 48: "Depositing rime fog",
    51: "Light drizzle", 53: "Drizzle", 55: "Dense drizzle",
    61: "Light rain", 63: "Rain", 65: "Heavy rain",
    71: "Light snow", 73: "Snow", 75: "Heavy snow",
    80: "Rain showers", 81: "Heavy rain showers", 82: "Violent rain showers",
    95: "Thunderstorm", 96: "Thunderstorm with hail", 99: "Thunderstorm with heavy hail",
}


class WeatherUnavailable(Exception):
    pass


@dataclass
class WeatherData:
    temperature: float
    humidity: float
    description: str
    location: str


def describe_code(code) -> str:
    return WEATHER_CODES.get(code, "Unknown")


def fetch_current(lat: float, lon: float, tz: str = TIMEZONE) -> WeatherData:
    params = {
        "latitude": lat,
        "longitude": lon,
        "current": "temperature_2m,relative_humidity_2m,weather_code",
        "timezone": tz,
    }
    try:
        r = httpx.get(OPEN_METEO_URL, params=params, timeout=HTTP_TIMEOUT)
        r.raise_for_status()
        current = r.json()["current"]
        return WeatherData(
            temperature=round(float(current["temperature_2m"])),
            humidity=round(float(current["relative_humidity_2m"])),
            description=describe_code(current.get("weather_code")),
            location=f"{lat:.2f},{lon:.2f}",
        )
    except httpx.HTTPStatusError as e:
        logger.error(f"Weather API returned error {e.response.status_code} for lat={lat}, lon={lon}")
        raise WeatherUnavailable(f"Weather service unavailable: {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error(f"Network error when fetching weather data for lat={lat}, lon={lon}: {e}")
        raise WeatherUnavailable(f"Failed to connect to weather service: {e}")
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Unexpected weather payload for lat={lat}, lon={lon}: {e}")
        raise WeatherUnavailable(f"Weather data processing failed: {e}")
