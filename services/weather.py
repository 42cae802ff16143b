"""
WeatherAPI.com client — current conditions, N-day forecast and single-day
history by lat/lon, plus the rainfall/date helpers the snapshot builds on.

All fetchers return parsed JSON or None; failures are logged, never raised.
"""

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import requests

import config
from services import http_session

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4


def _get(endpoint, params):
    url = f'{config.WEATHER_API_BASE}/{endpoint}'
    query = {'key': config.WEATHER_API_KEY}
    query.update(params)
    try:
        r = http_session.get(url, params=query, timeout=config.REQUEST_TIMEOUT)
        if not r.ok:
            logger.warning(f'WeatherAPI {endpoint} failed (status: {r.status_code}) for {params.get("q")}')
            return None
        return r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'WeatherAPI {endpoint} error for {params.get("q")}: {e}')
        return None


def fetch_current(lat, lon):
    return _get('current.json', {'q': f'{lat},{lon}'})


def fetch_forecast(lat, lon, days=None):
    return _get('forecast.json', {'q': f'{lat},{lon}', 'days': config.FORECAST_DAYS if days is None else days})


def fetch_history(lat, lon, dt):
    """One calendar day of history; dt is a 'YYYY-MM-DD' string."""
    return _get('history.json', {'q': f'{lat},{lon}', 'dt': dt})


def daily_rainfall_in(hours):
    """Total precipitation in inches across a day's hourly entries."""
    return sum((h.get('precip_in') or 0) for h in (hours or []) if isinstance(h, dict))


def format_rainfall(inches):
    return f'{inches:.2f} in ({inches * MM_PER_INCH:.2f} mm)'


def local_now(now=None):
    """Current time (or `now`) converted to the dashboard timezone."""
    tz = ZoneInfo(config.TIMEZONE)
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now.astimezone(tz)


def local_today(now=None):
    return local_now(now).date()


def history_dates(now=None, days=None):
    """Dates 1..days before today (local timezone), newest first."""
    days = config.HISTORY_DAYS if days is None else days
    today = local_today(now)
    return [(today - timedelta(days=i)).isoformat() for i in range(1, days + 1)]


def _history_rainfall(lat, lon, dt):
    data = fetch_history(lat, lon, dt)
    if not isinstance(data, dict):
        logger.warning(f'Failed to fetch history for {dt}')
        return None
    forecastday = (data.get('forecast') or {}).get('forecastday') or []
    first = forecastday[0] if forecastday else None
    if not isinstance(first, dict):
        logger.warning(f'Malformed history for {dt}: {first!r}')
        return None
    hours = first.get('hour')
    if not hours:
        logger.warning(f'No hourly data for {dt}')
        return None
    return format_rainfall(daily_rainfall_in(hours))


def fetch_rainfall_history(lat, lon, dates):
    """Map of date -> formatted rainfall. Days that fail are left out.

    Sequential with REQUEST_DELAY between calls to stay under the provider's
    rate limit, or parallel when HISTORY_WORKERS > 1.
    """
    if config.HISTORY_WORKERS > 1:
        with ThreadPoolExecutor(max_workers=config.HISTORY_WORKERS) as executor:
            results = list(executor.map(lambda dt: _history_rainfall(lat, lon, dt), dates))
    else:
        results = []
        for i, dt in enumerate(dates):
            if i and config.REQUEST_DELAY > 0:
                time.sleep(config.REQUEST_DELAY)
            results.append(_history_rainfall(lat, lon, dt))

    return {dt: rain for dt, rain in zip(dates, results) if rain is not None}


def format_temperature(temp_f, temp_c):
    if temp_f is None or temp_c is None:
        return 'N/A'
    return f'{temp_f}°F ({temp_c}°C)'


def upcoming_forecast_days(forecastday, today, keep=None):
    """Forecast entries after `today`, first `keep` of them, in display shape.

    Dates come from the provider already in the location's local calendar,
    so they are passed through unchanged.
    """
    keep = config.FORECAST_KEEP_DAYS if keep is None else keep
    today_str = today.isoformat() if hasattr(today, 'isoformat') else str(today)
    upcoming = []
    for d in forecastday or []:
        if not isinstance(d, dict) or not d.get('date'):
            logger.warning(f'Skipping malformed forecast day: {d!r}')
            continue
        if d['date'] != today_str:
            upcoming.append(d)

    days = []
    for d in upcoming[:keep]:
        day = d.get('day') or {}
        days.append({
            'date': d['date'],
            'temperature': format_temperature(day.get('avgtemp_f'), day.get('avgtemp_c')),
            'condition': (day.get('condition') or {}).get('text') or 'N/A',
            'rainfall': format_rainfall(daily_rainfall_in(d.get('hour'))),
        })
    return days
