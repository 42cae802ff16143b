"""
Read side of the status document for the dashboard.

The document is read either from the local STATUS_FILE or, when
STATUS_SOURCE_URL is set, from a remote raw-file URL with cache-busting.
The dashboard never writes it.
"""

import os
import json
import time
import logging

import requests
from flask import Blueprint, jsonify, Response

import config
from services import http_session

logger = logging.getLogger(__name__)

statuses_bp = Blueprint('statuses', __name__)

NOT_AVAILABLE = 'N/A'
DATA_NOT_AVAILABLE = 'Data not available'
LOAD_ERROR = 'Error loading trail data'


class StatusLoadError(Exception):
    pass


def _load_remote(url):
    try:
        r = http_session.get(url, params={'t': int(time.time() * 1000)}, headers={
            'Cache-Control': 'no-cache',
            'Pragma': 'no-cache',
        }, timeout=config.REQUEST_TIMEOUT)
        r.raise_for_status()
        return r.json()
    except (requests.RequestException, ValueError) as e:
        raise StatusLoadError(f'Failed to fetch {url}: {e}')


def _load_file(path):
    if not os.path.exists(path):
        raise StatusLoadError(f'{path} does not exist')
    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise StatusLoadError(f'Failed to read {path}: {e}')


def load_statuses():
    """Current status document as a dict. Raises StatusLoadError."""
    if config.STATUS_SOURCE_URL:
        data = _load_remote(config.STATUS_SOURCE_URL)
    else:
        data = _load_file(config.STATUS_FILE)
    if not isinstance(data, dict):
        raise StatusLoadError('Status document is not a JSON object')
    return data


def _text(value):
    if value is None or value == '':
        return NOT_AVAILABLE
    return value


def trail_panel(statuses, name):
    """Flattened display fields for one trail; missing data renders as placeholders."""
    record = (statuses or {}).get(name)
    if not isinstance(record, dict):
        record = {}
    current = record.get('current') if isinstance(record.get('current'), dict) else {}
    history = record.get('history') if isinstance(record.get('history'), dict) else {}
    forecast = record.get('forecast') if isinstance(record.get('forecast'), list) else []

    rainfall = {}
    for window in history.values():
        if isinstance(window, dict):
            rainfall.update(window)

    return {
        'name': name,
        'status': record.get('status') or DATA_NOT_AVAILABLE,
        'conditionDetails': _text(record.get('conditionDetails')),
        'rideability': _text(record.get('rideability')),
        'temperature': _text(current.get('temperature')),
        'condition': _text(current.get('condition')),
        'wind': _text(current.get('wind')),
        'humidity': _text(current.get('humidity')),
        'precipitation': _text(current.get('precipitation')),
        'lastChecked': _text(current.get('lastChecked')),
        'rainfall': [{'date': dt, 'amount': _text(amount)} for dt, amount in rainfall.items()],
        'forecast': [{
            'date': _text(day.get('date')),
            'temperature': _text(day.get('temperature')),
            'condition': _text(day.get('condition')),
            'rainfall': _text(day.get('rainfall')),
        } for day in forecast if isinstance(day, dict)],
        'notes': _text(record.get('notes')),
    }


@statuses_bp.route('/api/trail-statuses')
def api_trail_statuses():
    try:
        return jsonify(load_statuses())
    except StatusLoadError as e:
        logger.error(f'Status document load failed: {e}')
        return jsonify({'error': LOAD_ERROR}), 502


@statuses_bp.route('/api/trail-statuses/<path:name>')
def api_trail_panel(name):
    try:
        statuses = load_statuses()
    except StatusLoadError as e:
        logger.error(f'Status document load failed: {e}')
        panel = trail_panel({}, name)
        panel['error'] = LOAD_ERROR
        return jsonify(panel)
    return jsonify(trail_panel(statuses, name))


@statuses_bp.route('/trailStatuses.json')
def trail_statuses_file():
    try:
        statuses = load_statuses()
    except StatusLoadError as e:
        logger.error(f'Status document load failed: {e}')
        return jsonify({'error': LOAD_ERROR}), 502
    return Response(json.dumps(statuses, indent=2, ensure_ascii=False),
                    mimetype='application/json')
