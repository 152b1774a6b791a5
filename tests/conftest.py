import pytest

from message_decoder.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    # .env / DECODER_* 가 테스트에 섞이지 않도록 격리
    for name in ('DECODER_KEY', 'DECODER_ENCODING', 'DECODER_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
