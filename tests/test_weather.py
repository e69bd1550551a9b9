import httpx
import pytest

import weather
from alerts import weather_alerts
from weather import WeatherData, WeatherUnavailable, describe_code, fetch_current


class _Resp:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            request = httpx.Request("GET", weather.OPEN_METEO_URL)
            raise httpx.HTTPStatusError("boom", request=request, response=httpx.Response(self.status_code, request=request))

    def json(self):
        return self._payload


def test_fetch_current(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(params)
        return _Resp({"current": {"temperature_2m": 31.6, "relative_humidity_2m": 72.2, "weather_code": 3}})

    monkeypatch.setattr(weather.httpx, "get", fake_get)
    w = fetch_current(17.3851, 78.4867)
    assert w == WeatherData(temperature=32, humidity=72, description="Overcast", location="17.39,78.49")
    assert seen["latitude"] == 17.3851
    assert "temperature_2m" in seen["current"]


def test_fetch_current_http_error(monkeypatch):
    monkeypatch.setattr(weather.httpx, "get", lambda *a, **k: _Resp({}, status=502))
    with pytest.raises(WeatherUnavailable):
        fetch_current(0, 0)


def test_fetch_current_network_error(monkeypatch):
    def fail(*a, **k):
        raise httpx.ConnectError("offline")

    monkeypatch.setattr(weather.httpx, "get", fail)
    with pytest.raises(WeatherUnavailable):
        fetch_current(0, 0)


def test_fetch_current_bad_payload(monkeypatch):
    monkeypatch.setattr(weather.httpx, "get", lambda *a, **k: _Resp({"daily": {}}))
    with pytest.raises(WeatherUnavailable):
        fetch_current(0, 0)


def test_describe_code():
    assert describe_code(0) == "Clear sky"
    assert describe_code(1234) == "Unknown"
    assert describe_code(None) == "Unknown"


def test_weather_alerts_thresholds():
    calm = WeatherData(temperature=30, humidity=70, description="Clear sky", location="x")
    assert weather_alerts(calm) == []

    hot_humid = WeatherData(temperature=34, humidity=85, description="Rain", location="x")
    alerts = weather_alerts(hot_humid)
    assert [a.kind for a in alerts] == ["heat", "humidity"]
    assert "watering" in alerts[0].message
    assert "fungal" in alerts[1].message
