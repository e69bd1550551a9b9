import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from config import READING_BOUNDS


class InvalidReading(ValueError):
    pass


@dataclass(frozen=True)
class SoilReading:
    id: str
    timestamp: datetime
    nitrogen: float
    ph: float
    moisture: float
    crop: str


def validate_values(nitrogen: float, ph: float, moisture: float, crop: str) -> None:
    """
    Capture-time checks: every value must be a finite number inside READING_BOUNDS
    and the crop must be named. The engines themselves never re-check these.
    """
    values = {"nitrogen": nitrogen, "ph": ph, "moisture": moisture}
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidReading(f"{name} must be a number, got {value!r}")
        low, high = READING_BOUNDS[name]
        if not low <= value <= high:
            raise InvalidReading(f"{name} {value} outside {low:g}-{high:g}")
    if not isinstance(crop, str) or not crop.strip():
        raise InvalidReading("crop is required")


def create_reading(nitrogen: float, ph: float, moisture: float, crop: str,
                   now: datetime | None = None) -> SoilReading:
    validate_values(nitrogen, ph, moisture, crop)
    return SoilReading(
        id=uuid.uuid4().hex,
        timestamp=now or datetime.now(timezone.utc),
        nitrogen=float(nitrogen),
        ph=float(ph),
        moisture=float(moisture),
        crop=crop.strip(),
    )


def add_reading(log, reading: SoilReading) -> tuple[SoilReading, ...]:
    # newest first; the caller's log is left as is
    return (reading, *log)


def latest(log) -> SoilReading | None:
    return log[0] if log else None
