# loader.py
# 파일/문자열에서 암호 메시지와 키를 읽어오는 입력 도구
from __future__ import annotations

import re

from message_decoder.message import Message

_KEY_SEP = re.compile(r'[,\s]+')


def message_from_text(text: str) -> Message:
    # \n 으로만 나눔 (\x0b, \x0c 등도 [0, 127] 범위의 암호 문자)
    lines = text.split('\n')
    # 마지막 줄바꿈은 빈 줄을 추가하지 않음
    if lines[-1] == '':
        lines.pop()
    return Message.from_lines(lines)


def read_message(path: str, encoding: str = 'utf-8') -> Message:
    # FileNotFoundError / UnicodeDecodeError 는 호출한 쪽에서 처리
    # universal newlines: \r\n, \r 은 \n 으로 바뀐다
    with open(path, 'r', encoding=encoding) as f:
        return message_from_text(f.read())


def parse_key(text: str) -> list[int]:
    """'3,1,4' 또는 '3 1 4' 형태의 키 문자열을 정수 리스트로 변환"""
    if not isinstance(text, str):
        raise ValueError('key must be str')
    tokens = [t for t in _KEY_SEP.split(text.strip()) if t]
    if not tokens:
        raise ValueError('key is empty')
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise ValueError(f'invalid key: {text!r}') from None
