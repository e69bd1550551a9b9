from datetime import datetime, timedelta, timezone

import pytest

from readings import SoilReading

T0 = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


def make_reading(nitrogen=3.0, ph=6.5, moisture=70.0, crop="rice", day=0, rid=None) -> SoilReading:
    return SoilReading(
        id=rid or f"r{day}",
        timestamp=T0 + timedelta(days=day),
        nitrogen=nitrogen,
        ph=ph,
        moisture=moisture,
        crop=crop,
    )


@pytest.fixture
def log():
    # newest first
    return (
        make_reading(nitrogen=4.0, ph=7.0, moisture=60.0, day=2),
        make_reading(nitrogen=3.0, ph=6.0, moisture=80.0, day=1),
        make_reading(nitrogen=2.0, ph=5.0, moisture=70.0, day=0),
    )
