"""
Tests for the screen flow controller (flow.py).
"""

import itertools
import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from flow import AnalysisPayload, FlowController, FlowError, Step, pop_alert, push_alert


RESULT = {"balance_score": 2.0, "total_risk": 42, "risks": []}


def _at_dashboard(state=None):
    ctrl = FlowController(state if state is not None else {})
    ctrl.enter()
    ctrl.complete_analysis("계약서 본문", RESULT, "contract.pdf")
    return ctrl


# ===========================================================================
# Defaults
# ===========================================================================


class TestDefaults:
    """Initial session values."""

    def test_starts_on_onboarding(self):
        ctrl = FlowController({})
        assert ctrl.step is Step.ONBOARDING

    def test_dark_mode_by_default(self):
        state = {}
        ctrl = FlowController(state)
        assert ctrl.is_dark_mode is True
        assert state["document_class"] == "dark"

    def test_payload_empty_by_default(self):
        ctrl = FlowController({})
        assert ctrl.payload == AnalysisPayload()
        assert ctrl.payload.is_empty

    def test_existing_state_is_kept(self):
        state = {"step": "BRIDGE", "is_dark_mode": False}
        ctrl = FlowController(state)
        assert ctrl.step is Step.BRIDGE
        assert state["document_class"] == ""


# ===========================================================================
# Transitions
# ===========================================================================


class TestTransitions:
    """ONBOARDING → BRIDGE → DASHBOARD → BRIDGE ..."""

    def test_enter_goes_to_bridge(self):
        ctrl = FlowController({})
        ctrl.enter()
        assert ctrl.step is Step.BRIDGE

    def test_complete_stores_payload_and_goes_to_dashboard(self):
        ctrl = _at_dashboard()
        assert ctrl.step is Step.DASHBOARD
        assert ctrl.payload == AnalysisPayload("계약서 본문", RESULT, "contract.pdf")

    def test_back_clears_payload(self):
        state = {}
        ctrl = _at_dashboard(state)
        state["expanded_risk"] = 1
        state["report_bytes"] = b"%PDF"

        ctrl.back()

        assert ctrl.step is Step.BRIDGE
        assert state["contract_text"] == ""
        assert state["analysis_result"] is None
        assert state["file_name"] == ""
        assert "expanded_risk" not in state
        assert "report_bytes" not in state

    def test_cycles_between_bridge_and_dashboard(self):
        ctrl = FlowController({})
        ctrl.enter()
        for i in range(3):
            ctrl.complete_analysis(f"text {i}", {"total_risk": i}, f"f{i}.pdf")
            assert ctrl.step is Step.DASHBOARD
            ctrl.back()
            assert ctrl.step is Step.BRIDGE
            assert ctrl.payload.is_empty

    def test_dashboard_not_reachable_from_onboarding(self):
        ctrl = FlowController({})
        with pytest.raises(FlowError):
            ctrl.complete_analysis("text", RESULT, "a.pdf")
        assert ctrl.step is Step.ONBOARDING
        assert ctrl.payload.is_empty

    def test_back_only_from_dashboard(self):
        ctrl = FlowController({})
        ctrl.enter()
        with pytest.raises(FlowError):
            ctrl.back()

    def test_enter_only_from_onboarding(self):
        ctrl = _at_dashboard()
        with pytest.raises(FlowError):
            ctrl.enter()
        assert ctrl.step is Step.DASHBOARD

    def test_exactly_one_step_for_any_action_sequence(self):
        actions = ["enter", "complete", "back", "theme"]
        for seq in itertools.product(actions, repeat=4):
            state = {}
            ctrl = FlowController(state)
            for name in seq:
                try:
                    if name == "enter":
                        ctrl.enter()
                    elif name == "complete":
                        ctrl.complete_analysis("t", RESULT, "f.txt")
                    elif name == "back":
                        ctrl.back()
                    else:
                        ctrl.toggle_theme()
                except FlowError:
                    pass
                assert state["step"] in {s.value for s in Step}
                if ctrl.step is Step.DASHBOARD:
                    assert ctrl.payload.analysis_result is RESULT
                else:
                    assert ctrl.payload.is_empty


# ===========================================================================
# Theme
# ===========================================================================


class TestTheme:
    """Dark/light toggle and document marker."""

    def test_toggle_flips_flag_and_marker(self):
        state = {}
        ctrl = FlowController(state)
        ctrl.toggle_theme()
        assert ctrl.is_dark_mode is False
        assert state["document_class"] == ""

    def test_toggle_twice_restores_marker(self):
        state = {}
        ctrl = FlowController(state)
        before = state["document_class"]
        ctrl.toggle_theme()
        ctrl.toggle_theme()
        assert state["document_class"] == before
        assert ctrl.is_dark_mode is True

    def test_theme_survives_reset(self):
        ctrl = _at_dashboard()
        ctrl.toggle_theme()
        ctrl.back()
        assert ctrl.is_dark_mode is False


# ===========================================================================
# Alerts
# ===========================================================================


class TestAlerts:

    def test_push_then_pop(self):
        state = {}
        push_alert(state, "오류")
        assert pop_alert(state) == "오류"
        assert pop_alert(state) is None
