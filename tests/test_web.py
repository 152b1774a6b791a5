"""
Tests for the Flask decode endpoint.
"""

import pytest

from message_decoder.web import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as c:
        yield c


class TestDecodeEndpoint:

    def test_home(self, client):
        res = client.get('/')
        assert res.status_code == 200

    def test_decode_lines(self, client):
        res = client.post('/decode', json={'lines': ['B', 'AA'], 'key': [1, 2]})
        assert res.status_code == 200
        assert res.get_json() == {'lines': ['A', '@?'], 'text': 'A\n@?'}

    def test_decode_text_with_string_key(self, client):
        res = client.post('/decode', json={'text': 'B\nC', 'key': '1'})
        assert res.status_code == 200
        assert res.get_json()['lines'] == ['A', 'B']

    @pytest.mark.parametrize('payload', [
        {'lines': ['B']},
        {'lines': ['B'], 'key': []},
        {'lines': ['B'], 'key': ['a']},
        {'lines': 'B', 'key': [1]},
        {'lines': [1], 'key': [1]},
        {'key': [1]},
        ['B'],
    ])
    def test_invalid_payload(self, client, payload):
        res = client.post('/decode', json=payload)
        assert res.status_code == 400
        assert res.get_json() == {'error': 'invalid input.'}

    def test_non_json_body(self, client):
        res = client.post('/decode', data='B', content_type='text/plain')
        assert res.status_code == 400
