"""Shared pytest fixtures: canned WeatherAPI responses and a Flask client."""

from datetime import datetime
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

import config


NOW = datetime(2026, 10, 19, 15, 4, 5, tzinfo=ZoneInfo('America/Los_Angeles'))


def make_response(payload=None, status=200):
    resp = MagicMock()
    resp.ok = 200 <= status < 300
    resp.status_code = status
    resp.json.return_value = payload
    return resp


def current_payload(temp_f=60.1, temp_c=15.6, text='Sunny', precip_in=0.0):
    return {
        'location': {'name': 'Mill Valley', 'tz_id': 'America/Los_Angeles'},
        'current': {
            'temp_f': temp_f,
            'temp_c': temp_c,
            'condition': {'text': text},
            'wind_mph': 5.6,
            'wind_kph': 9.0,
            'humidity': 40,
            'precip_in': precip_in,
            'precip_mm': round(precip_in * 25.4, 2),
        },
    }


def _hours(precip_per_hour):
    return [{'time_epoch': i, 'precip_in': precip_per_hour} for i in range(24)]


def forecast_payload(dates=('2026-10-19', '2026-10-20', '2026-10-21')):
    return {
        'forecast': {
            'forecastday': [{
                'date': d,
                'day': {'avgtemp_f': 58.3, 'avgtemp_c': 14.6, 'condition': {'text': 'Patchy rain nearby'}},
                'hour': _hours(0.01),
            } for d in dates],
        },
    }


def history_payload(dt, precip_per_hour=0.005):
    return {'forecast': {'forecastday': [{'date': dt, 'hour': _hours(precip_per_hour)}]}}


class FakeWeatherAPI:
    """Dispatches session.get calls by endpoint; records every call."""

    def __init__(self, current=None, forecast=None, fail_for=(), fail_history=()):
        self.current = current or current_payload()
        self.forecast = forecast or forecast_payload()
        self.fail_for = set(fail_for)
        self.fail_history = set(fail_history)
        self.calls = []

    def __call__(self, url, params=None, **kwargs):
        params = params or {}
        self.calls.append((url, dict(params)))
        if params.get('q') in self.fail_for:
            return make_response({'error': {'message': 'No matching location found.'}}, status=400)
        if url.endswith('current.json'):
            return make_response(self.current)
        if url.endswith('forecast.json'):
            return make_response(self.forecast)
        if url.endswith('history.json'):
            if params.get('dt') in self.fail_history:
                return make_response(None, status=500)
            return make_response(history_payload(params['dt']))
        return make_response(None, status=404)


@pytest.fixture(autouse=True)
def test_config(monkeypatch, tmp_path):
    """Deterministic, offline configuration for every test."""
    monkeypatch.setattr(config, 'WEATHER_API_KEY', 'test-key')
    monkeypatch.setattr(config, 'OPENAI_API_KEY', None)
    monkeypatch.setattr(config, 'RIDEABILITY_SOURCE', 'rules')
    monkeypatch.setattr(config, 'STATUS_FILE', str(tmp_path / 'public' / 'trailStatuses.json'))
    monkeypatch.setattr(config, 'STATUS_SOURCE_URL', None)
    monkeypatch.setattr(config, 'TIMEZONE', 'America/Los_Angeles')
    monkeypatch.setattr(config, 'HISTORY_DAYS', 5)
    monkeypatch.setattr(config, 'FORECAST_DAYS', 3)
    monkeypatch.setattr(config, 'FORECAST_KEEP_DAYS', 2)
    monkeypatch.setattr(config, 'REQUEST_DELAY', 0)
    monkeypatch.setattr(config, 'HISTORY_WORKERS', 1)
    return config


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fake_api():
    return FakeWeatherAPI()


@pytest.fixture
def client():
    from app import create_app
    app = create_app()
    app.config['TESTING'] = True
    return app.test_client()
