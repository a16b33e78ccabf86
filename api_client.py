# api_client.py — 갑을스코어 분석 서버 호출 래퍼
# ------------------------------------------------------------
# 업로드/분석/리포트/Notion 4개 엔드포인트만 사용합니다.
# 실패는 모두 ApiError 하나로 올려 보내고, 화면 쪽에서 알림으로 처리합니다.
# ------------------------------------------------------------
from __future__ import annotations
from typing import Any, Dict, Optional

import requests

from log_utils import get_logger
from settings import get_api_url, get_request_timeout

__all__ = [
    "ApiError",
    "upload_file",
    "analyze_contract",
    "download_report",
    "export_notion",
]

logger = get_logger(__name__)

NOTION_FALLBACK_ERROR = "Notion 저장 중 오류가 발생했습니다."


class ApiError(Exception):
    """분석 서버 호출 실패 (HTTP 오류, 잘못된 응답, 전송 오류)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _url(path: str, base_url: Optional[str] = None) -> str:
    base = (base_url or get_api_url()).rstrip("/")
    return f"{base}/{path.lstrip('/')}"


def _post(path: str, base_url: Optional[str] = None, **kwargs) -> requests.Response:
    url = _url(path, base_url)
    try:
        return requests.post(url, timeout=get_request_timeout(), **kwargs)
    except requests.RequestException as e:
        logger.error("POST %s failed: %s", url, e)
        raise ApiError(str(e)) from e


def _json(resp: requests.Response, error_message: str) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise ApiError(error_message, resp.status_code) from e


# -------------------------------------------------------------------
# 📤 1단계: 파일 업로드 + 텍스트 추출
# -------------------------------------------------------------------
def upload_file(file_name: str, data: bytes, content_type: Optional[str] = None,
                base_url: Optional[str] = None) -> str:
    files = {"file": (file_name, data, content_type or "application/octet-stream")}
    resp = _post("/upload", base_url, files=files)
    if not resp.ok:
        raise ApiError("파일 업로드 실패", resp.status_code)

    payload = _json(resp, "파일 업로드 실패")
    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        raise ApiError("추출된 텍스트가 없습니다", resp.status_code)
    logger.info("텍스트 추출 완료: %s자", len(text))
    return text


# -------------------------------------------------------------------
# 🧠 2단계: AI 분석
# -------------------------------------------------------------------
def analyze_contract(contract_text: str, base_url: Optional[str] = None) -> Dict[str, Any]:
    resp = _post("/analyze/with-mcp", base_url, json={"contract_text": contract_text})
    if not resp.ok:
        raise ApiError("AI 분석 실패", resp.status_code)
    result = _json(resp, "AI 분석 실패")
    logger.info("AI 분석 완료")
    return result


# -------------------------------------------------------------------
# 📥 리포트 PDF
# -------------------------------------------------------------------
def download_report(analysis_result: Dict[str, Any], contract_text: str,
                    base_url: Optional[str] = None) -> bytes:
    body = {"analysis_result": analysis_result, "contract_text": contract_text}
    resp = _post("/download-report", base_url, json=body)
    if not resp.ok:
        raise ApiError("PDF 생성 실패", resp.status_code)
    return resp.content


# -------------------------------------------------------------------
# 📝 Notion 내보내기
# -------------------------------------------------------------------
def export_notion(analysis_result: Dict[str, Any], contract_text: str, file_name: str,
                  base_url: Optional[str] = None) -> str:
    body = {
        "analysis_result": analysis_result,
        "contract_text": contract_text,
        "file_name": file_name,
    }
    resp = _post("/export-notion", base_url, json=body)
    if not resp.ok:
        detail = None
        try:
            err = resp.json()
            detail = err.get("detail") if isinstance(err, dict) else None
        except ValueError:
            pass  # JSON이 아닌 오류 본문 → 기본 메시지
        raise ApiError(str(detail) if detail else NOTION_FALLBACK_ERROR, resp.status_code)

    data = _json(resp, NOTION_FALLBACK_ERROR)
    page_url = data.get("page_url") if isinstance(data, dict) else None
    if not page_url:
        raise ApiError(NOTION_FALLBACK_ERROR, resp.status_code)
    return page_url
