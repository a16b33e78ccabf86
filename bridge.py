# bridge.py
# -*- coding: utf-8 -*-
"""
업로드(브릿지) 화면의 처리 순서
  1) 파일 업로드 → 텍스트 추출 (/upload)
  2) 추출 텍스트 AI 분석 (/analyze/with-mcp)
  3) 성공 시 완료 콜백(text, result, file_name) 호출
실패는 알림 한 번으로 끝(재시도 없음), 로딩 플래그는 항상 원복.
"""
from __future__ import annotations
from types import ModuleType
from typing import Any, Callable, MutableMapping, Optional

import api_client
from api_client import ApiError
from flow import push_alert
from log_utils import get_logger

logger = get_logger(__name__)

UPLOAD_STEP_MSG = "파일을 업로드하고 있습니다..."
ANALYZE_STEP_MSG = "AI가 계약서를 분석하고 있습니다..."

OnComplete = Callable[[str, Any, str], None]
OnProgress = Callable[[str, float], None]


def error_message(err: Exception) -> str:
    detail = str(err) or "알 수 없는 오류"
    return f"오류 발생: {detail}\n\n서버가 실행 중인지 확인하세요."


def handle_file_upload(
    state: MutableMapping[str, Any],
    file_name: Optional[str],
    data: Optional[bytes],
    on_complete: Optional[OnComplete],
    client: ModuleType = api_client,
    content_type: Optional[str] = None,
    on_progress: Optional[OnProgress] = None,
) -> bool:
    """업로드 → 분석 → 완료 콜백. 실제로 완료까지 갔으면 True."""
    if not file_name or data is None:
        return False
    if state.get("is_analyzing"):
        logger.info("이미 분석 중 → 업로드 무시: %s", file_name)
        return False

    def _step(msg: str, ratio: float) -> None:
        state["analysis_step"] = msg
        if on_progress:
            on_progress(msg, ratio)

    state["is_analyzing"] = True
    try:
        _step(UPLOAD_STEP_MSG, 0.1)
        extracted_text = client.upload_file(file_name, data, content_type=content_type)

        _step(ANALYZE_STEP_MSG, 0.5)
        analysis_result = client.analyze_contract(extracted_text)

        if on_complete:
            on_complete(extracted_text, analysis_result, file_name)
        return True
    except ApiError as e:
        logger.error("업로드/분석 실패 (%s): %s", file_name, e)
        push_alert(state, error_message(e))
        return False
    except Exception as e:
        logger.exception("업로드/분석 중 예기치 않은 오류 (%s)", file_name)
        push_alert(state, error_message(e))
        return False
    finally:
        state["is_analyzing"] = False
        state["analysis_step"] = ""
