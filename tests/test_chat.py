"""Tests for the chat-completion rideability client and proxy endpoint."""

from unittest.mock import patch

import pytest
import requests

from services import http_session
from services.chat import ask_rideability, build_prompt
from conftest import make_response


ANSWER = {'choices': [{'message': {'role': 'assistant', 'content': 'Trails are dry, go ride.'}}]}


@pytest.fixture
def with_key(test_config, monkeypatch):
    monkeypatch.setattr(test_config, 'OPENAI_API_KEY', 'sk-test')
    return test_config


class TestBuildPrompt:

    def test_plain(self):
        assert build_prompt('Briones') == 'Based on the current weather, is Briones rideable today?'

    def test_with_context(self):
        prompt = build_prompt('Briones', '2026-10-18: 0.12 in (3.05 mm)')
        assert prompt.endswith('Recent rainfall: 2026-10-18: 0.12 in (3.05 mm).')


class TestAskRideability:

    def test_missing_key_skips_request(self):
        with patch.object(http_session, 'post') as mock_post:
            assert ask_rideability('Briones') is None
        mock_post.assert_not_called()

    def test_returns_verbatim_content(self, with_key):
        with patch.object(http_session, 'post', return_value=make_response(ANSWER)) as mock_post:
            assert ask_rideability('Briones') == 'Trails are dry, go ride.'
        kwargs = mock_post.call_args.kwargs
        assert kwargs['headers']['Authorization'] == 'Bearer sk-test'
        assert kwargs['json']['model'] == 'gpt-3.5-turbo'
        assert kwargs['json']['messages'][0] == {'role': 'system', 'content': 'You are a helpful assistant.'}
        assert 'Briones' in kwargs['json']['messages'][1]['content']

    def test_empty_choices(self, with_key):
        with patch.object(http_session, 'post', return_value=make_response({'choices': []})):
            assert ask_rideability('Briones') == 'No response available.'

    def test_non_success_status(self, with_key):
        with patch.object(http_session, 'post', return_value=make_response({}, status=429)):
            assert ask_rideability('Briones') is None

    def test_transport_error(self, with_key):
        with patch.object(http_session, 'post', side_effect=requests.Timeout('slow')):
            assert ask_rideability('Briones') is None


class TestChatEndpoint:

    def test_missing_key(self, client):
        resp = client.post('/api/chatgpt', json={'trailName': 'Briones'})
        assert resp.status_code == 500
        assert resp.get_json() == {'error': 'OpenAI API key is missing'}

    def test_get_not_allowed(self, client):
        assert client.get('/api/chatgpt').status_code == 405

    def test_trail_name_required(self, client, with_key):
        resp = client.post('/api/chatgpt', json={})
        assert resp.status_code == 400

    def test_success(self, client, with_key):
        with patch.object(http_session, 'post', return_value=make_response(ANSWER)):
            resp = client.post('/api/chatgpt', json={'trailName': 'Briones'})
        assert resp.status_code == 200
        assert resp.get_json() == {'response': 'Trails are dry, go ride.'}

    def test_upstream_status_passed_through(self, client, with_key):
        with patch.object(http_session, 'post', return_value=make_response({}, status=429)):
            resp = client.post('/api/chatgpt', json={'trailName': 'Briones'})
        assert resp.status_code == 429
        assert resp.get_json() == {'error': 'Failed to fetch from OpenAI'}

    def test_transport_error(self, client, with_key):
        with patch.object(http_session, 'post', side_effect=requests.ConnectionError('down')):
            resp = client.post('/api/chatgpt', json={'trailName': 'Briones'})
        assert resp.status_code == 500
        assert resp.get_json() == {'error': 'Server error'}
