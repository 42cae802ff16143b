"""
Chat-completion rideability text — asks a chat model whether a trail is
rideable today and returns its answer verbatim. Also exposes the small
POST /api/chatgpt proxy the dashboard can call.
"""

import logging

import requests
from flask import Blueprint, request, jsonify

import config
from services import http_session

logger = logging.getLogger(__name__)

chat_bp = Blueprint('chat', __name__)

SYSTEM_PROMPT = 'You are a helpful assistant.'
NO_RESPONSE = 'No response available.'


def build_prompt(trail_name, context=None):
    prompt = f'Based on the current weather, is {trail_name} rideable today?'
    if context:
        prompt += f' Recent rainfall: {context}.'
    return prompt


def _post_chat(prompt):
    return http_session.post(config.OPENAI_CHAT_URL, headers={
        'Content-Type': 'application/json',
        'Authorization': f'Bearer {config.OPENAI_API_KEY}',
    }, json={
        'model': config.CHAT_MODEL,
        'messages': [
            {'role': 'system', 'content': SYSTEM_PROMPT},
            {'role': 'user', 'content': prompt},
        ],
    }, timeout=config.REQUEST_TIMEOUT)


def _response_text(data):
    choices = (data or {}).get('choices') or []
    if not choices:
        return NO_RESPONSE
    return ((choices[0] or {}).get('message') or {}).get('content') or NO_RESPONSE


def ask_rideability(trail_name, context=None):
    """Verbatim model answer, or None if the call could not be made."""
    if not config.OPENAI_API_KEY:
        logger.warning('OpenAI API key is missing')
        return None
    try:
        r = _post_chat(build_prompt(trail_name, context))
        if not r.ok:
            logger.warning(f'Chat completion failed for {trail_name} (status: {r.status_code})')
            return None
        return _response_text(r.json())
    except (requests.RequestException, ValueError) as e:
        logger.error(f'Error calling chat completion API for {trail_name}: {e}')
        return None


@chat_bp.route('/api/chatgpt', methods=['POST'])
def api_chatgpt():
    if not config.OPENAI_API_KEY:
        return jsonify({'error': 'OpenAI API key is missing'}), 500

    data = request.get_json(silent=True) or {}
    trail_name = data.get('trailName')
    if not trail_name:
        return jsonify({'error': 'trailName required'}), 400

    try:
        r = _post_chat(build_prompt(trail_name))
        if not r.ok:
            return jsonify({'error': 'Failed to fetch from OpenAI'}), r.status_code
        return jsonify({'response': _response_text(r.json())})
    except (requests.RequestException, ValueError) as e:
        logger.error(f'Error calling OpenAI API: {e}')
        return jsonify({'error': 'Server error'}), 500
