# settings.py
# -*- coding: utf-8 -*-
"""
환경변수 기반 설정
- .env 로드는 app.py에서 (load_dotenv) 처리하고, 여기서는 os.getenv로만 읽습니다.
"""
from __future__ import annotations
import os
from typing import Optional

DEFAULT_API_URL = "http://localhost:8000"


def get_api_url() -> str:
    """분석 API 베이스 URL (끝 슬래시 제거)"""
    return (os.getenv("API_URL") or DEFAULT_API_URL).strip().rstrip("/")


def get_request_timeout() -> Optional[float]:
    """요청 타임아웃(초). 비어 있거나 잘못된 값이면 None(무제한)."""
    raw = (os.getenv("API_TIMEOUT") or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None
