# message.py
from __future__ import annotations

from typing import Iterable, Iterator


class Message:
    """줄(line) 단위 텍스트 메시지 (append 전용).

    규약:
    - append_line: 맨 뒤에 한 줄 추가. 빈 문자열도 허용, str 아니면 TypeError
    - get_line: 0 ≤ index < line_count() 아니면 IndexError('index out of range')
    - 삭제/수정은 지원하지 않음
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Message:
        msg = cls()
        for line in lines:
            msg.append_line(line)
        return msg

    # --- 공개 메서드 ---

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        # 음수 인덱스는 뒤에서부터 세지 않고 범위 오류로 처리
        if index < 0 or index >= len(self._lines):
            raise IndexError('index out of range')
        return self._lines[index]

    def append_line(self, line: str) -> None:
        if not isinstance(line, str):
            raise TypeError('line must be str')
        self._lines.append(line)

    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def to_text(self) -> str:
        return '\n'.join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f'Message(lines={self._lines!r})'
