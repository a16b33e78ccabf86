# -*- coding: utf-8 -*-
"""
PDF → 본문 텍스트 추출 (로컬 보조 기능)
- 업로드/분석 화면은 서버 /upload를 쓰고, 이 함수는 서버 없이 텍스트만 필요할 때 사용
- 결과는 {"success": bool, "text" | "error": str} 형태로 돌려줌
"""
from __future__ import annotations
from typing import Any, Dict, Optional, Union
import re
import fitz  # PyMuPDF

from log_utils import get_logger

logger = get_logger(__name__)

NO_FILE_ERROR = "파일이 없습니다."
PARSE_ERROR = "PDF를 읽는 도중 오류가 발생했습니다."


def _read_bytes(file: Any) -> Optional[bytes]:
    """bytes / Streamlit UploadedFile / 파일 객체 → bytes"""
    if file is None:
        return None
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    if hasattr(file, "getvalue"):
        return file.getvalue()
    if hasattr(file, "read"):
        return file.read()
    raise TypeError(f"지원하지 않는 파일 형식: {type(file).__name__}")


def _normalize(text: str) -> str:
    text = (text or "").replace("\u00a0", " ")
    text = re.sub(r"[ \t]+\n", "\n", text)
    return text.strip()


def extract_text_from_pdf(file: Union[bytes, Any, None]) -> Dict[str, Any]:
    try:
        data = _read_bytes(file)
    except Exception as e:
        logger.error("파일 읽기 에러: %s", e)
        return {"success": False, "error": PARSE_ERROR}
    if not data:
        return {"success": False, "error": NO_FILE_ERROR}

    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            pages = [page.get_text() for page in doc]
    except Exception as e:
        logger.error("PDF 파싱 에러: %s", e)
        return {"success": False, "error": PARSE_ERROR}

    return {"success": True, "text": _normalize("\n".join(pages))}
