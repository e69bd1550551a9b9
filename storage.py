import json
import logging
import threading
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from readings import SoilReading, add_reading
from weather import WeatherData

logger = logging.getLogger(__name__)

# one writer at a time across every store in the process
_write_lock = threading.RLock()


class StorageError(Exception):
    pass


def _reading_to_dict(r: SoilReading) -> dict:
    d = asdict(r)
    d["timestamp"] = r.timestamp.isoformat()
    return d


def _reading_from_dict(d: dict) -> SoilReading:
    return SoilReading(
        id=str(d["id"]),
        timestamp=datetime.fromisoformat(d["timestamp"]),
        nitrogen=float(d["nitrogen"]),
        ph=float(d["ph"]),
        moisture=float(d["moisture"]),
        crop=str(d["crop"]),
    )


class ReadingStore:
    """
    Newest-first reading log kept as a JSON list in a single file.
    Only appends are offered; readings are never edited or removed here.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> tuple[SoilReading, ...]:
        if not self.path.exists():
            return ()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return tuple(_reading_from_dict(d) for d in raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Could not read reading log {self.path}: {e}")
            raise StorageError(f"Reading log is unreadable: {e}")

    def save(self, log) -> None:
        try:
            with _write_lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                tmp = self.path.with_suffix(".tmp")
                tmp.write_text(json.dumps([_reading_to_dict(r) for r in log], indent=2), encoding="utf-8")
                tmp.replace(self.path)
        except OSError as e:
            logger.error(f"Could not write reading log {self.path}: {e}")
            raise StorageError(f"Reading log could not be saved: {e}")

    def append(self, reading: SoilReading) -> tuple[SoilReading, ...]:
        with _write_lock:
            log = add_reading(self.load(), reading)
            self.save(log)
        logger.info(f"Stored reading {reading.id} for {reading.crop} ({len(log)} total)")
        return log


class WeatherCache:
    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> WeatherData | None:
        if not self.path.exists():
            return None
        try:
            return WeatherData(**json.loads(self.path.read_text(encoding="utf-8")))
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Ignoring unreadable weather cache {self.path}: {e}")
            return None

    def save(self, weather: WeatherData) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(asdict(weather)), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write weather cache {self.path}: {e}")
