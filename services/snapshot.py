"""
Snapshot generator — fetches weather for each trail, classifies rideability
and serializes the whole mapping of trail name -> record to one JSON file.

Record shape (one per trail, keyed by exact trail name):

    {
      "status": "Rideable" | "Not Rideable" | "Caution" | "Unknown",
      "conditionDetails": "...",
      "current": {temperature, condition, wind, humidity, precipitation, lastChecked} | null,
      "history": {"rainfall_last_N_days": {"YYYY-MM-DD": "0.12 in (3.05 mm)", ...}} | null,
      "forecast": [{date, temperature, condition, rainfall}, ...] | null,
      "notes": "...",
      "rideability": "..."            # only when RIDEABILITY_SOURCE == 'chat'
    }

A trail whose current/forecast fetch fails is written as Unknown with null
data fields; it is never dropped from the document.
"""

import os
import json
import logging

import config
from services import weather
from services.chat import ask_rideability
from services.rideability import classify_current, UNKNOWN, NO_DATA

logger = logging.getLogger(__name__)

GENERATED_NOTE = 'Automatically generated based on weather data.'
UNAVAILABLE_NOTE = 'Weather data could not be fetched for this trail.'


def format_last_checked(now=None):
    """en-US style local timestamp, e.g. '10/19/2026, 3:04:05 PM'."""
    t = weather.local_now(now)
    hour = t.hour % 12 or 12
    ampm = 'AM' if t.hour < 12 else 'PM'
    return f'{t.month}/{t.day}/{t.year}, {hour}:{t.minute:02d}:{t.second:02d} {ampm}'


def history_key():
    return f'rainfall_last_{config.HISTORY_DAYS}_days'


def _wind(mph, kph):
    if mph is None and kph is None:
        return 'N/A'
    mph = 'N/A' if mph is None else mph
    kph = 'N/A' if kph is None else kph
    return f'{mph} mph ({kph} kph)'


def _current_fields(current_data, now):
    c = (current_data or {}).get('current') or {}
    precip_in = c.get('precip_in')
    humidity = c.get('humidity')
    return {
        'temperature': weather.format_temperature(c.get('temp_f'), c.get('temp_c')),
        'condition': (c.get('condition') or {}).get('text') or 'Unknown',
        'wind': _wind(c.get('wind_mph'), c.get('wind_kph')),
        'humidity': f'{humidity}%' if humidity is not None else 'N/A',
        'precipitation': weather.format_rainfall(precip_in) if precip_in is not None else 'N/A',
        'lastChecked': format_last_checked(now),
    }


def unknown_record():
    record = {
        'status': UNKNOWN,
        'conditionDetails': NO_DATA,
        'current': None,
        'history': None,
        'forecast': None,
        'notes': UNAVAILABLE_NOTE,
    }
    if config.RIDEABILITY_SOURCE == 'chat':
        record['rideability'] = 'N/A'
    return record


def _rainfall_context(rainfall):
    return ', '.join(f'{dt}: {amount}' for dt, amount in rainfall.items())


def build_snapshot(trail, now=None):
    lat, lon = trail['lat'], trail['lon']

    current_data = weather.fetch_current(lat, lon)
    forecast_data = weather.fetch_forecast(lat, lon)
    if not isinstance(current_data, dict) or not isinstance(forecast_data, dict):
        logger.warning(f"No weather data for {trail['name']}; marking Unknown")
        return unknown_record()

    rainfall = weather.fetch_rainfall_history(lat, lon, weather.history_dates(now))
    forecastday = (forecast_data.get('forecast') or {}).get('forecastday') or []
    status, details = classify_current(current_data)

    record = {
        'status': status,
        'conditionDetails': details,
        'current': _current_fields(current_data, now),
        'history': {history_key(): rainfall},
        'forecast': weather.upcoming_forecast_days(forecastday, weather.local_today(now)),
        'notes': GENERATED_NOTE,
    }

    if config.RIDEABILITY_SOURCE == 'chat':
        text = ask_rideability(trail['name'], _rainfall_context(rainfall))
        record['rideability'] = text if text is not None else 'N/A'

    return record


def generate_statuses(trails, now=None):
    """Build every trail's record in order. One trail failing never stops the rest."""
    statuses = {}
    for trail in trails:
        logger.info(f"Fetching weather for {trail['name']}...")
        try:
            statuses[trail['name']] = build_snapshot(trail, now=now)
        except Exception:
            logger.exception(f"Unexpected error building snapshot for {trail['name']}")
            statuses[trail['name']] = unknown_record()
    return statuses


def serialize_statuses(statuses):
    return json.dumps(statuses, indent=2, ensure_ascii=False)


def write_statuses(statuses, path=None):
    """Overwrite the output document with the full mapping."""
    path = path or config.STATUS_FILE
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(serialize_statuses(statuses))
    logger.info(f'{path} has been updated ({len(statuses)} trails)')
    return path
