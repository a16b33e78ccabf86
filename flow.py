# flow.py
# -*- coding: utf-8 -*-
"""
화면 흐름 컨트롤러 (온보딩 → 업로드(브릿지) → 대시보드)

- 세션 상태(st.session_state 또는 일반 dict)를 그대로 감싸서 사용
- 화면 간 공유 상태는 여기서만 변경: 현재 단계 / 테마 / 분석 결과 묶음
- 대시보드 → 브릿지(뒤로가기)는 분석 결과를 모두 비운 뒤 전환
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, MutableMapping, Optional

from log_utils import get_logger

logger = get_logger(__name__)


class Step(str, Enum):
    ONBOARDING = "ONBOARDING"
    BRIDGE = "BRIDGE"
    DASHBOARD = "DASHBOARD"


class FlowError(Exception):
    """허용되지 않은 화면 전환"""


@dataclass(frozen=True)
class AnalysisPayload:
    contract_text: str = ""
    analysis_result: Optional[Dict[str, Any]] = None
    file_name: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.contract_text and self.analysis_result is None and not self.file_name


# 대시보드 화면 로컬 상태 (뒤로가기 시 함께 초기화)
DASHBOARD_LOCAL_KEYS = ("expanded_risk", "report_bytes", "report_name", "notion_url",
                        "notion_open_pending", "export_error", "is_exporting")


def push_alert(state: MutableMapping[str, Any], message: str) -> None:
    """다음 렌더에서 모달로 띄울 알림 등록"""
    state["alert"] = message


def pop_alert(state: MutableMapping[str, Any]) -> Optional[str]:
    return state.pop("alert", None)


class FlowController:
    def __init__(self, state: MutableMapping[str, Any]):
        self.state = state
        self.init_defaults()

    def init_defaults(self) -> None:
        s = self.state
        s.setdefault("step", Step.ONBOARDING.value)
        s.setdefault("is_dark_mode", True)
        s.setdefault("contract_text", "")
        s.setdefault("analysis_result", None)
        s.setdefault("file_name", "")
        s.setdefault("is_analyzing", False)
        s.setdefault("analysis_step", "")
        if "document_class" not in s:
            self._sync_theme()

    # ── 조회 ────────────────────────────────────────────────────────────────
    @property
    def step(self) -> Step:
        return Step(self.state["step"])

    @property
    def is_dark_mode(self) -> bool:
        return bool(self.state["is_dark_mode"])

    @property
    def payload(self) -> AnalysisPayload:
        return AnalysisPayload(
            contract_text=self.state.get("contract_text", ""),
            analysis_result=self.state.get("analysis_result"),
            file_name=self.state.get("file_name", ""),
        )

    # ── 전환 ────────────────────────────────────────────────────────────────
    def _require(self, expected: Step, action: str) -> None:
        if self.step is not expected:
            raise FlowError(f"{action}: {self.step.value} 상태에서는 전환할 수 없습니다")

    def _go(self, step: Step) -> None:
        logger.info("step %s → %s", self.state["step"], step.value)
        self.state["step"] = step.value

    def enter(self) -> None:
        """온보딩 → 브릿지"""
        self._require(Step.ONBOARDING, "enter")
        self._go(Step.BRIDGE)

    def complete_analysis(self, contract_text: str, analysis_result: Any, file_name: str) -> None:
        """브릿지 완료 콜백: 결과 3종 저장 후 대시보드로"""
        self._require(Step.BRIDGE, "complete_analysis")
        self.state.update({
            "contract_text": contract_text,
            "analysis_result": analysis_result,
            "file_name": file_name,
        })
        self._go(Step.DASHBOARD)

    def back(self) -> None:
        """대시보드 → 브릿지 (완전 초기화)"""
        self._require(Step.DASHBOARD, "back")
        self.state.update({"contract_text": "", "analysis_result": None, "file_name": ""})
        for key in DASHBOARD_LOCAL_KEYS:
            self.state.pop(key, None)
        self._go(Step.BRIDGE)

    # ── 테마 ────────────────────────────────────────────────────────────────
    def toggle_theme(self) -> None:
        self.state["is_dark_mode"] = not self.is_dark_mode
        self._sync_theme()

    def _sync_theme(self) -> None:
        self.state["document_class"] = "dark" if self.is_dark_mode else ""
