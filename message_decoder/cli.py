# cli.py
# 사용: message-decoder secret.txt --key 3,1,4
#      (--key 생략 시 DECODER_KEY 환경변수 사용)
from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from message_decoder.config import get_settings
from message_decoder.decoder import Decoder
from message_decoder.loader import parse_key, read_message


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='Decode a message encrypted with a repeating ASCII shift key')
    p.add_argument('path', help='path to the encrypted message file')
    p.add_argument('--key', type=str, default=None, help='shift values, e.g. "3,1,4"')
    p.add_argument('--encoding', type=str, default=None, help='message file encoding')
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    encoding = args.encoding or 'utf-8'

    try:
        # 환경변수 설정 오류도 입력 오류로 처리
        settings = get_settings()
        logging.basicConfig(level=settings.log_level)
        encoding = args.encoding or settings.encoding
        key = parse_key(args.key) if args.key is not None else settings.key
        if not key:
            raise ValueError('no key given')
        message = read_message(args.path, encoding=encoding)
        decoder = Decoder(message, key)
        decoder.decode()
    except FileNotFoundError:
        print(f'[에러] {args.path} 파일이 없습니다.')
        return 1
    except UnicodeDecodeError:
        print(f'[에러] {args.path} 파일의 인코딩이 {encoding} 이(가) 아닙니다.')
        return 1
    except (ValidationError, ValueError, LookupError):
        # 설정 오류 / 키 형식 오류 / 키 없음 / 모르는 인코딩
        print('invalid input.')
        return 1

    for line in decoder.get_decoded_message():
        print(line)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
