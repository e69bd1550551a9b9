import os
from pathlib import Path

TIMEZONE = "Asia/Kolkata"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
HTTP_TIMEOUT = 30

DATA_DIR = Path(os.environ.get("SOIL_ADVISOR_DATA_DIR", Path.home() / ".soil_advisor"))
READINGS_FILE = DATA_DIR / "soil_readings.json"
WEATHER_CACHE_FILE = DATA_DIR / "weather.json"

# Accepted sensor values at capture time (inclusive)
READING_BOUNDS = {
    "nitrogen": (0.0, 100.0),
    "ph": (0.0, 14.0),
    "moisture": (0.0, 100.0),
}

DISPLAY_PRODUCT_LIMIT = 6
RECENT_READINGS_LIMIT = 5

HOT_DAY_TEMP_C = 30.0
HUMID_AIR_PCT = 70.0
