# config.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from message_decoder.loader import parse_key


class Settings(BaseSettings):
    """환경변수(DECODER_*)와 .env 에서 읽는 설정"""

    key: Optional[list[int]] = None  # 예: DECODER_KEY='3,1,4' 또는 '[3, 1, 4]'
    encoding: str = 'utf-8'
    log_level: str = 'WARNING'

    model_config = SettingsConfigDict(
        env_prefix='DECODER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    @field_validator('key', mode='before')
    @classmethod
    def _parse_key_text(cls, value: Any) -> Any:
        # --key 와 같은 형식 허용, JSON 리스트 괄호도 벗겨서 처리
        if isinstance(value, str):
            return parse_key(value.strip().strip('[]'))
        # DECODER_KEY='7' 은 JSON 숫자로 먼저 해석됨
        if isinstance(value, int) and not isinstance(value, bool):
            return [value]
        return value

    @field_validator('log_level')
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'unknown log level: {value!r}')
        return level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
