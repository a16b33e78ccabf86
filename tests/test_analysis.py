"""
Tests for dashboard derivations (analysis.py).
"""

import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from analysis import (
    COPY_FALLBACK_TEXT,
    DEFAULT_EXPLANATION,
    DEFAULT_LOCATION,
    DEFAULT_SUGGESTED_FIX,
    AnalysisView,
    RiskItem,
    format_number,
    get_risk_status,
    get_score_status,
    report_file_name,
    risk_progress,
    strip_extension,
    toggle_expanded,
)


# ===========================================================================
# Classifiers
# ===========================================================================


class TestRiskStatus:

    @pytest.mark.parametrize("risk, label", [
        (25, "낮음"),
        (35, "보통"),
        (45, "높음"),
        (55, "매우 높음"),
    ])
    def test_labels(self, risk, label):
        assert get_risk_status(risk).label == label

    @pytest.mark.parametrize("risk, label", [
        (29.9, "낮음"),
        (30, "보통"),
        (40, "높음"),
        (50, "매우 높음"),
    ])
    def test_boundaries(self, risk, label):
        assert get_risk_status(risk).label == label

    def test_progress_colors(self):
        assert [get_risk_status(r).progress_color for r in (0, 30, 40, 50)] == ["green", "yellow", "orange", "red"]


class TestScoreStatus:

    @pytest.mark.parametrize("score, label", [
        (1.0, "매우 불리함"),
        (2.0, "불리함"),
        (3.0, "보통"),
        (4.0, "균형적"),
        (5.0, "매우 균형적"),
    ])
    def test_labels(self, score, label):
        assert get_score_status(score).label == label

    @pytest.mark.parametrize("score, label", [
        (1.5, "매우 불리함"),
        (2.5, "불리함"),
        (3.5, "보통"),
        (4.5, "균형적"),
        (4.6, "매우 균형적"),
    ])
    def test_boundaries_inclusive(self, score, label):
        assert get_score_status(score).label == label


def test_risk_progress_is_clamped():
    assert risk_progress(42) == 42
    assert risk_progress(180) == 100
    assert risk_progress(-5) == 0


# ===========================================================================
# Result normalisation
# ===========================================================================


class TestAnalysisView:

    def test_absent_result_gives_no_view(self):
        assert AnalysisView.from_result(None) is None

    def test_empty_result_uses_defaults(self):
        view = AnalysisView.from_result({})
        assert view.balance_score == 0
        assert view.total_risk == 0
        assert view.risks == []
        assert view.recommendations == []
        assert view.raw_analysis == ""
        assert view.score_status.label == "매우 불리함"
        assert view.risk_status.label == "낮음"

    def test_full_result(self):
        view = AnalysisView.from_result({
            "balance_score": 3.8,
            "total_risk": 47,
            "risks": [{"category": "일방적 해지", "severity": 15}],
            "recommendations": ["해지 조항을 상호 합의로 수정하세요"],
            "raw_response": "원문 분석",
        })
        assert view.balance_score == 3.8
        assert view.total_risk == 47
        assert len(view.risks) == 1
        assert view.recommendations == ["해지 조항을 상호 합의로 수정하세요"]
        assert view.raw_analysis == "원문 분석"
        assert view.risk_status.label == "높음"

    def test_raw_falls_back_to_analysis_field(self):
        view = AnalysisView.from_result({"analysis": "상세"})
        assert view.raw_analysis == "상세"

    def test_null_and_bad_numbers_become_zero(self):
        view = AnalysisView.from_result({"balance_score": None, "total_risk": "n/a"})
        assert view.balance_score == 0
        assert view.total_risk == 0

    @pytest.mark.parametrize("result", [["x"], "문자열 응답", 42])
    def test_non_object_result_renders_as_empty(self, result):
        view = AnalysisView.from_result(result)
        assert view is not None
        assert view.balance_score == 0
        assert view.total_risk == 0
        assert view.risks == []
        assert view.recommendations == []
        assert view.raw_analysis == ""


class TestRiskItem:

    def test_primary_fields(self):
        item = RiskItem.from_dict({
            "category": "손해배상",
            "severity": 20,
            "location": "제7조",
            "matched_text": "을은 모든 손해를 배상한다",
            "explanation": "과도한 배상 책임",
            "suggested_fix": "고의·중과실로 한정",
        })
        assert item.title == "손해배상"
        assert item.severity == 20
        assert item.location == "제7조"
        assert item.clause == "을은 모든 손해를 배상한다"
        assert item.fix_text == "고의·중과실로 한정"
        assert item.copy_text == "고의·중과실로 한정"

    def test_alternate_field_names(self):
        item = RiskItem.from_dict({"name": "비밀유지", "risk_score": 12, "clause": "영구 비밀유지"})
        assert item.title == "비밀유지"
        assert item.severity == 12
        assert item.clause == "영구 비밀유지"

    def test_defaults(self):
        item = RiskItem.from_dict({})
        assert item.location == DEFAULT_LOCATION
        assert item.explanation == DEFAULT_EXPLANATION
        assert item.fix_text == DEFAULT_SUGGESTED_FIX
        assert item.copy_text == COPY_FALLBACK_TEXT


# ===========================================================================
# Misc helpers
# ===========================================================================


class TestHelpers:

    @pytest.mark.parametrize("name, expected", [
        ("계약서.pdf", "계약서"),
        ("lease.DOCX", "lease"),
        ("memo.Txt", "memo"),
        ("archive.tar.gz", "archive.tar.gz"),
        ("report.pdf.bak", "report.pdf.bak"),
        ("", ""),
    ])
    def test_strip_extension(self, name, expected):
        assert strip_extension(name) == expected

    def test_report_file_name(self):
        assert report_file_name(1700000000000) == "gap_eul_report_1700000000000.pdf"
        assert report_file_name().startswith("gap_eul_report_")

    def test_toggle_expanded(self):
        assert toggle_expanded(None, 2) == 2
        assert toggle_expanded(2, 2) is None
        assert toggle_expanded(2, 0) == 0

    def test_format_number(self):
        assert format_number(47.0) == "47"
        assert format_number(47.5) == "47.5"
