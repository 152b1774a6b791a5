# decoder.py
# - 반복 키(Vigenère 변형)로 암호화된 메시지를 줄 단위로 복호화
# - ASCII 범위 [0, 127] 기준, 한 문자 = 한 코드
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from message_decoder.message import Message

logger = logging.getLogger(__name__)

ASCII_SIZE = 128
ZERO_DIFF_CODE = 127  # 차이가 정확히 0이면 0 대신 127


@dataclass(frozen=True, slots=True)
class NotDecoded:
    pass


@dataclass(frozen=True, slots=True)
class Decoded:
    message: Message


DecodeState = NotDecoded | Decoded


def decode_char(code: int, shift: int) -> int:
    """암호 문자 코드 하나를 shift 만큼 역방향으로 이동한 코드를 반환"""
    diff = code - shift
    if diff == 0:
        return ZERO_DIFF_CODE
    # 파이썬의 %는 음수 차이도 [0, 127]로 보정한다
    return diff % ASCII_SIZE


def decode_line(line: str, key: Sequence[int]) -> str:
    """한 줄을 복호화. 키 커서는 줄마다 0에서 다시 시작한다."""
    size = len(key)
    index = 0
    decoded_chars: list[str] = []
    for ch in line:
        # 커서가 키 범위를 벗어나면 결과를 믿을 수 없으므로 중단
        if index < 0 or index >= len(key):
            raise AssertionError(f'key cursor out of range: {index}')
        decoded_chars.append(chr(decode_char(ord(ch), key[index])))
        index = (index + 1) % size
    return ''.join(decoded_chars)


class Decoder:
    """암호화된 Message 하나와 키 하나를 받아 정확히 한 번 복호화한다.

    규약:
    - 생성: message가 Message가 아니거나 key가 비었거나 정수가 아니면 ValueError
    - decode(): 이미 복호화했다면 RuntimeError('already decoded')
    - get_decoded_message(): 복호화 전이면 RuntimeError('not yet decoded')
    """

    def __init__(self, message: Message, key: Sequence[int]) -> None:
        if message is None or not isinstance(message, Message):
            raise ValueError('message is required')
        if key is None:
            raise ValueError('key is required')
        try:
            key = tuple(key)
        except TypeError:
            raise ValueError('key must be a sequence of integers') from None
        if not key:
            raise ValueError('key must not be empty')
        if not all(isinstance(k, int) and not isinstance(k, bool) for k in key):
            raise ValueError('key values must be integers')

        self._message = message
        self._key: tuple[int, ...] = key
        self._state: DecodeState = NotDecoded()

    @property
    def message(self) -> Message:
        return self._message

    @property
    def key(self) -> tuple[int, ...]:
        return self._key

    @property
    def is_decoded(self) -> bool:
        return isinstance(self._state, Decoded)

    def decode(self) -> None:
        if isinstance(self._state, Decoded):
            raise RuntimeError('already decoded')

        # 모든 줄이 끝난 뒤에만 상태를 바꾼다 (중간 실패 시 NotDecoded 유지)
        decoded = Message()
        for i in range(self._message.line_count()):
            decoded.append_line(decode_line(self._message.get_line(i), self._key))

        self._state = Decoded(decoded)
        logger.debug('decoded %d lines with key of length %d', decoded.line_count(), len(self._key))

    def get_decoded_message(self) -> Message:
        state = self._state
        if not isinstance(state, Decoded):
            raise RuntimeError('not yet decoded')
        return state.message
