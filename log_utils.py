# -*- coding: utf-8 -*-
"""
갑을스코어 공통 로거
- 레벨은 환경변수 GES_LOG_LEVEL (기본 INFO)
- app.py에서 setup_logging() 한 번, 각 모듈은 get_logger(__name__)
"""
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_level() -> str:
    return os.getenv("GES_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = None) -> None:
    name = (level or _env_level()).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    # 루트 핸들러가 없으면(테스트/단독 import) 기본 설정으로
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
