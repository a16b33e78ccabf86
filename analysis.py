# analysis.py
# -*- coding: utf-8 -*-
"""
대시보드 표시용 가공
- 분석 결과(dict) → 점수/위험요소/권장사항 정리
- 균형도/위험도 → 라벨·색상 구간 (고정 임계값)
"""
from __future__ import annotations
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

MAX_BALANCE_SCORE = 10.0

DEFAULT_LOCATION = "조항 위치 미상"
DEFAULT_EXPLANATION = (
    "이 조항은 계약 당사자(을)에게 불리하거나 일방적인 의무를 부과할 수 있습니다. "
    "계약 체결 전 변호사나 전문가와 상담하시기를 권장합니다."
)
DEFAULT_SUGGESTED_FIX = (
    "이 조항을 다음과 같이 수정할 것을 제안합니다: 상호 합의 하에 계약을 해지할 수 있으며, "
    "양 당사자는 30일 전 서면 통지를 해야 합니다."
)
COPY_FALLBACK_TEXT = "수정안 복사 완료"

_EXT_RE = re.compile(r"\.(pdf|docx|txt)$", re.IGNORECASE)


@dataclass(frozen=True)
class Status:
    label: str
    color: str
    bg_color: str
    progress_color: Optional[str] = None


# ───────────────────────────────────────────────
# 점수 구간
# ───────────────────────────────────────────────
def get_score_status(score: float) -> Status:
    """갑을 균형도 → 상태 (낮을수록 을에게 불리)"""
    if score <= 1.5:
        return Status("매우 불리함", "#f87171", "rgba(239,68,68,.2)")
    if score <= 2.5:
        return Status("불리함", "#fbbf24", "rgba(245,158,11,.2)")
    if score <= 3.5:
        return Status("보통", "#facc15", "rgba(234,179,8,.2)")
    if score <= 4.5:
        return Status("균형적", "#4ade80", "rgba(34,197,94,.2)")
    return Status("매우 균형적", "#22d3ee", "rgba(6,182,212,.2)")


def get_risk_status(risk: float) -> Status:
    """총 위험도 → 상태"""
    if risk < 30:
        return Status("낮음", "#4ade80", "rgba(34,197,94,.2)", "green")
    if risk < 40:
        return Status("보통", "#facc15", "rgba(234,179,8,.2)", "yellow")
    if risk < 50:
        return Status("높음", "#fb923c", "rgba(249,115,22,.2)", "orange")
    return Status("매우 높음", "#f87171", "rgba(239,68,68,.2)", "red")


def risk_progress(total_risk: float) -> int:
    """진행바 값(0~100)"""
    return int(max(0.0, min(float(total_risk), 100.0)))


def _number(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


# ───────────────────────────────────────────────
# 결과 정리
# ───────────────────────────────────────────────
@dataclass(frozen=True)
class RiskItem:
    title: str
    severity: Any
    location: str
    clause: str
    explanation: str
    suggested_fix: Optional[str]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RiskItem":
        raw = raw or {}
        return cls(
            title=raw.get("category") or raw.get("name") or "",
            severity=raw.get("severity") or raw.get("risk_score"),
            location=raw.get("location") or DEFAULT_LOCATION,
            clause=raw.get("matched_text") or raw.get("clause") or "",
            explanation=raw.get("explanation") or DEFAULT_EXPLANATION,
            suggested_fix=raw.get("suggested_fix") or None,
        )

    @property
    def fix_text(self) -> str:
        return self.suggested_fix or DEFAULT_SUGGESTED_FIX

    @property
    def copy_text(self) -> str:
        """클립보드로 복사할 문자열"""
        return self.suggested_fix or COPY_FALLBACK_TEXT


@dataclass(frozen=True)
class AnalysisView:
    balance_score: float = 0.0
    total_risk: float = 0.0
    risks: List[RiskItem] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    raw_analysis: str = ""

    @classmethod
    def from_result(cls, result: Optional[Dict[str, Any]]) -> Optional["AnalysisView"]:
        if result is None:
            return None
        if not isinstance(result, Mapping):
            # 객체가 아닌 응답 → 빈 결과처럼 0점으로 표시
            result = {}
        return cls(
            balance_score=_number(result.get("balance_score")),
            total_risk=_number(result.get("total_risk")),
            risks=[RiskItem.from_dict(r) for r in (result.get("risks") or []) if isinstance(r, dict)],
            recommendations=[str(r) for r in (result.get("recommendations") or [])],
            raw_analysis=result.get("raw_response") or result.get("analysis") or "",
        )

    @property
    def score_status(self) -> Status:
        return get_score_status(self.balance_score)

    @property
    def risk_status(self) -> Status:
        return get_risk_status(self.total_risk)


# ───────────────────────────────────────────────
# 기타 유틸
# ───────────────────────────────────────────────
def strip_extension(file_name: str) -> str:
    """'계약서.PDF' → '계약서' (pdf/docx/txt만)"""
    return _EXT_RE.sub("", file_name or "")


def report_file_name(now_ms: Optional[int] = None) -> str:
    ms = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"gap_eul_report_{ms}.pdf"


def toggle_expanded(current: Optional[int], index: int) -> Optional[int]:
    """아코디언: 열린 항목 다시 누르면 닫힘, 한 번에 하나만"""
    return None if current == index else index


def format_number(value: float) -> str:
    """정수면 정수로 (원본 숫자 그대로 보이도록)"""
    return str(int(value)) if float(value).is_integer() else str(value)
