"""
    연쇄 삭제 엔진 설정

    db/session.py 와 같은 방식으로 .env 파일과 환경변수에서 설정을 읽습니다.
"""

import os
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# 비전이(transitive=False) 자식 테이블이 자체 연쇄 관계를 가지면 경고 대신 기동 실패
CASCADE_STRICT_SCHEMA = _env_flag("CASCADE_STRICT_SCHEMA")

# 로그 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = _env_flag("LOG_JSON")
