# run_streamlit.py
# -*- coding: utf-8 -*-
"""
갑을스코어 실행기
Windows에서 Streamlit 실행 시 소켓 바인딩 단계에서
[WinError 10014]가 뜨는 경우가 있어, 두 가지를 강제합니다.
  1) asyncio 이벤트 루프를 Proactor로 강제
  2) 서버 바인딩 주소를 127.0.0.1로 고정 (IPv4 루프백)
"""

import os
import sys
import asyncio
from pathlib import Path

from streamlit.web import bootstrap

APP_PATH = Path(__file__).with_name("app.py")


def build_flags() -> dict:
    # 바인딩 주소/포트 (환경변수로 오버라이드 가능)
    addr = os.environ.get("GES_ADDR", "127.0.0.1")
    port = int(os.environ.get("GES_PORT", "8501"))
    return {
        "server.headless": True,
        "server.address": addr,
        "server.port": port,
        "browser.gatherUsageStats": False,
        "client.toolbarMode": "minimal",
    }


def main() -> None:
    if sys.platform.startswith("win") and hasattr(asyncio, "WindowsProactorEventLoopPolicy"):
        asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())
    bootstrap.run(str(APP_PATH), is_hello=False, args=[], flag_options=build_flags())


if __name__ == "__main__":
    main()
