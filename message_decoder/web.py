# web.py
# POST /decode  {"lines": [...], "key": [...]}  또는  {"text": "...", "key": [...]}
from flask import Flask, jsonify, request

from message_decoder.decoder import Decoder
from message_decoder.loader import message_from_text, parse_key
from message_decoder.message import Message

app = Flask(__name__)


def _key_from_payload(raw: object) -> list[int]:
    if isinstance(raw, str):
        return parse_key(raw)
    if isinstance(raw, list):
        return raw
    raise ValueError('key must be a list or a string')


def _message_from_payload(payload: dict) -> Message:
    if 'lines' in payload:
        lines = payload['lines']
        if not isinstance(lines, list):
            raise ValueError('lines must be a list')
        return Message.from_lines(lines)
    text = payload.get('text')
    if not isinstance(text, str):
        raise ValueError('text must be str')
    return message_from_text(text)


@app.route('/')
def home():
    return 'message decoder: POST /decode'


@app.route('/decode', methods=['POST'])
def decode():
    payload = request.get_json(silent=True)
    try:
        if not isinstance(payload, dict):
            raise ValueError('json object required')
        decoder = Decoder(_message_from_payload(payload), _key_from_payload(payload.get('key')))
        decoder.decode()
    except (ValueError, TypeError):
        # TypeError: lines 안에 str 이 아닌 값
        return jsonify({'error': 'invalid input.'}), 400

    decoded = decoder.get_decoded_message()
    return jsonify({'lines': list(decoded.lines()), 'text': decoded.to_text()})


if __name__ == '__main__':
    app.run(debug=True)
