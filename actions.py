# actions.py
# -*- coding: utf-8 -*-
"""
대시보드 버튼 동작: 리포트 PDF 다운로드 / Notion 내보내기
결과·오류는 세션 상태에 남기고 화면은 다음 렌더에서 그립니다.
"""
from __future__ import annotations
from types import ModuleType
from typing import Any, MutableMapping, Optional

import api_client
from analysis import report_file_name, strip_extension
from api_client import ApiError, NOTION_FALLBACK_ERROR
from flow import push_alert
from log_utils import get_logger

logger = get_logger(__name__)

REPORT_ERROR_MSG = "PDF 다운로드 중 오류가 발생했습니다."


def download_report(state: MutableMapping[str, Any], client: ModuleType = api_client) -> Optional[bytes]:
    """리포트 PDF 생성 요청 → report_bytes/report_name 저장"""
    logger.info("PDF 다운로드 시작")
    try:
        pdf = client.download_report(state.get("analysis_result"), state.get("contract_text", ""))
    except ApiError as e:
        logger.error("PDF 다운로드 오류: %s", e)
        push_alert(state, REPORT_ERROR_MSG)
        return None

    state["report_bytes"] = pdf
    state["report_name"] = report_file_name()
    logger.info("PDF 다운로드 완료 (%s bytes)", len(pdf))
    return pdf


def export_to_notion(state: MutableMapping[str, Any], client: ModuleType = api_client) -> Optional[str]:
    """Notion 페이지 생성 → 성공 시 page_url 반환 + 새 탭 열기 예약"""
    result = state.get("analysis_result")
    if result is None:
        return None

    state["is_exporting"] = True
    state["export_error"] = ""
    try:
        page_url = client.export_notion(
            result,
            state.get("contract_text", ""),
            strip_extension(state.get("file_name", "")),
        )
    except ApiError as e:
        message = e.message or NOTION_FALLBACK_ERROR
        logger.error("Notion 저장 실패: %s", message)
        state["export_error"] = message
        push_alert(state, message)
        return None
    finally:
        state["is_exporting"] = False

    state["notion_url"] = page_url
    state["notion_open_pending"] = True
    push_alert(state, f"✅ Notion에 저장되었습니다!\n\n페이지 URL: {page_url}")
    logger.info("Notion 저장 완료: %s", page_url)
    return page_url
