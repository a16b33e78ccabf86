# ui_pages.py — 갑을스코어 화면 3종 (온보딩 / 업로드 브릿지 / 대시보드)
# -----------------------------------------------------------------------------
#   - 화면 간 공유 상태는 FlowController(st.session_state)만 변경
#   - 네트워크 동작은 bridge / actions 모듈, 여기서는 렌더 + 버튼 연결만
#   - 오류/완료 알림은 세션의 alert 큐 → 다음 렌더 때 모달(st.dialog)
# -----------------------------------------------------------------------------
from __future__ import annotations
import html
import json
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from actions import download_report, export_to_notion
from analysis import MAX_BALANCE_SCORE, AnalysisView, RiskItem, format_number, risk_progress, toggle_expanded
from bridge import handle_file_upload
from flow import FlowController, pop_alert
from onboarding import pick_messages, typing_html
from styles import PROGRESS_COLORS, get_css, theme_script

FOOTER = "© 2024 Gap-Eul Score. All rights reserved."


# ================================ 세션/공통 ================================
def _controller() -> FlowController:
    return FlowController(st.session_state)


def _esc(text) -> str:
    return html.escape(str(text if text is not None else ""))


@st.dialog("알림")
def _alert_dialog(message: str):
    st.markdown(f"<div style='white-space:pre-wrap;'>{_esc(message)}</div>", unsafe_allow_html=True)
    if st.button("확인", use_container_width=True, key="alert-ok"):
        st.rerun()


def _show_pending_alert():
    message = pop_alert(st.session_state)
    if message:
        _alert_dialog(message)


def _inject_css(ctrl: FlowController):
    st.markdown(f"<style>{get_css(ctrl.is_dark_mode)}</style>", unsafe_allow_html=True)
    components.html(theme_script(st.session_state.get("document_class", "")), height=0)


def _theme_button(ctrl: FlowController, key: str):
    label = "☀️" if ctrl.is_dark_mode else "🌙"
    st.button(label, key=key, on_click=ctrl.toggle_theme, help="테마 전환")


def _brand(extra: str = ""):
    st.markdown(f"<div class='ges-brand'><span class='dot'></span>⚖️ Gap-Eul Score {extra}</div>",
                unsafe_allow_html=True)


def _footer():
    st.markdown(f"<div class='ges-footer'>{FOOTER}</div>", unsafe_allow_html=True)


# ================================ 온보딩 ================================
def onboarding_page():
    ctrl = _controller()
    _inject_css(ctrl)

    _, right = st.columns([12, 1])
    with right:
        _theme_button(ctrl, "theme-onboarding")

    st.markdown("<div style='height:60px'></div>", unsafe_allow_html=True)
    st.markdown("<div class='ges-eyebrow'>⚖️ CONTRACT RISK ANALYSIS AI</div>", unsafe_allow_html=True)

    # 세션 시작 시 한 번만 문구 선택
    if "onboarding_messages" not in st.session_state:
        st.session_state["onboarding_messages"] = pick_messages()
    components.html(typing_html(st.session_state["onboarding_messages"], ctrl.is_dark_mode), height=260)

    st.markdown("<p class='ges-sub'>불공정 지수 0%,<br/>안심하고 서명할 수 있도록 돕겠습니다.</p>",
                unsafe_allow_html=True)
    _, mid, _ = st.columns([1, 1, 1])
    with mid:
        st.button("🛡️ 무료로 분석 시작하기 →", key="enter", type="primary",
                  use_container_width=True, on_click=ctrl.enter)
    st.markdown("<p class='ges-note'>* 회원가입 없이 바로 확인 가능</p>", unsafe_allow_html=True)


# ================================ 업로드(브릿지) ================================
def _feature_card(icon: str, title: str, desc: str):
    st.markdown(
        f"<div class='ges-feature'><div class='icon'>{icon}</div><h4>{title}</h4><p>{desc}</p></div>",
        unsafe_allow_html=True,
    )


def bridge_page():
    ctrl = _controller()
    state = st.session_state
    _inject_css(ctrl)
    _show_pending_alert()

    left, right = st.columns([12, 1])
    with left:
        _brand()
    with right:
        _theme_button(ctrl, "theme-bridge")

    st.markdown("<div style='height:28px'></div>", unsafe_allow_html=True)
    st.markdown("<div style='text-align:center;'><span class='ges-badge'>AI Powered Analysis</span></div>",
                unsafe_allow_html=True)
    st.markdown("<div class='ges-hero'>숫자로 확인하는 계약의 중요성</div>", unsafe_allow_html=True)
    st.markdown("<p class='ges-sub'>계약서에 사인하기 전, 확인해보세요</p>", unsafe_allow_html=True)

    analyzing = bool(state.get("is_analyzing"))
    _, mid, _ = st.columns([1, 4, 1])
    with mid:
        upl = st.file_uploader(
            "파일 업로드 또는 드래그 · PDF, TXT, DOCX 파일을 지원합니다",
            type=["pdf", "txt", "docx"], key="bridge_upl", disabled=analyzing,
        )
        if st.button("🔍 분석 시작", key="analyze", use_container_width=True,
                     disabled=analyzing or upl is None):
            bar = st.progress(0.0, text="분석 준비 중...")
            st.caption("잠시만 기다려주세요...")
            ok = handle_file_upload(
                state, upl.name, upl.getvalue(),
                on_complete=ctrl.complete_analysis,
                content_type=upl.type,
                on_progress=lambda msg, ratio: bar.progress(ratio, text=msg),
            )
            if ok:
                bar.progress(1.0, text="분석 완료")
            st.rerun()

    st.markdown("<div style='height:36px'></div>", unsafe_allow_html=True)
    c1, c2, c3 = st.columns(3)
    with c1:
        _feature_card("🛡️", "독소조항 탐지", "나에게 불리한 5가지 위험 요소를<br/>AI가 찾아냅니다.")
    with c2:
        _feature_card("🎯", "갑을 관계 점수", "권리와 의무의 균형이 맞는지<br/>점수로 알려드립니다.")
    with c3:
        _feature_card("✅", "협상 가이드", "어떻게 수정해달라고 말해야 할지<br/>알려드립니다.")
    _footer()


# ================================ 대시보드 ================================
def _go_back():
    _controller().back()
    # 업로더 위젯도 새 화면처럼 비움
    st.session_state.pop("bridge_upl", None)


def _toggle_risk(index: int):
    st.session_state["expanded_risk"] = toggle_expanded(st.session_state.get("expanded_risk"), index)


def _copy_button(text: str, key: str):
    payload = json.dumps(text, ensure_ascii=False).replace("</", "<\\/")
    components.html(
        f"""
        <button id="{key}" style="padding:6px 12px;border:none;border-radius:8px;cursor:pointer;
                background:#16a34a;color:#fff;font-weight:700;">📋 수정안 복사하기</button>
        <script>
          const btn = document.getElementById("{key}");
          btn.onclick = () => navigator.clipboard.writeText({payload}).then(() => {{
            btn.innerText = "수정안이 클립보드에 복사되었습니다!";
            setTimeout(() => btn.innerText = "📋 수정안 복사하기", 1600);
          }});
        </script>
        """,
        height=44,
    )


def _open_notion_if_pending():
    url = st.session_state.get("notion_url")
    if url and st.session_state.pop("notion_open_pending", False):
        components.html(f"<script>window.open({json.dumps(url)}, '_blank');</script>", height=0)


def _render_empty_state():
    st.markdown("<div style='height:120px'></div>", unsafe_allow_html=True)
    st.markdown("<div style='text-align:center;font-size:3rem;'>⚠️</div>", unsafe_allow_html=True)
    st.markdown("<div class='ges-hero' style='font-size:1.6rem;'>분석 결과가 없습니다</div>", unsafe_allow_html=True)
    st.markdown("<p class='ges-sub'>파일을 업로드하고 분석을 진행해주세요.</p>", unsafe_allow_html=True)


def _render_header(state, ctrl: FlowController):
    c_back, c_brand, c_dl, c_notion, c_theme = st.columns([1, 7, 2, 2, 1])
    with c_back:
        st.button("←", key="back", help="뒤로가기", on_click=_go_back)
    with c_brand:
        _brand("<span class='ges-badge ok'>분석 완료</span>")
    with c_dl:
        if st.button("⬇️ 리포트 다운로드", key="download", use_container_width=True):
            with st.spinner("PDF 생성 중..."):
                download_report(state)
            st.rerun()
        if state.get("report_bytes"):
            st.download_button("📄 PDF 저장", data=state["report_bytes"], file_name=state.get("report_name"),
                               mime="application/pdf", use_container_width=True, key="save-report")
    with c_notion:
        exporting = bool(state.get("is_exporting"))
        if st.button("저장 중..." if exporting else "📝 Notion 저장", key="notion",
                     use_container_width=True, disabled=exporting):
            with st.spinner("Notion에 저장하고 있습니다..."):
                export_to_notion(state)
            st.rerun()
        if state.get("notion_url"):
            st.link_button("Notion 페이지 열기", state["notion_url"], use_container_width=True)
    with c_theme:
        _theme_button(ctrl, "theme-dashboard")


def _render_scores(view: AnalysisView):
    score, risk = view.score_status, view.risk_status
    col_a, col_b = st.columns(2)
    with col_a:
        st.markdown(
            f"""
            <div class='ges-card'>
              <h3>📈 갑을 관계 균형도 <span class='ges-badge' style='background:{score.bg_color};color:{score.color};'>{score.label}</span></h3>
              <div class='ges-score' style='color:{score.color};'>{view.balance_score:.1f}</div>
              <div class='ges-score-sub'>/ {MAX_BALANCE_SCORE:.1f}</div>
              <div class='ges-hint'>• 점수가 낮을수록 계약 당사자(을)에게 불리한 조항이 많습니다<br/>
              • 3.0 이상이면 비교적 균형잡힌 계약입니다</div>
            </div>
            """,
            unsafe_allow_html=True,
        )
    with col_b:
        bar_color = PROGRESS_COLORS.get(risk.progress_color, PROGRESS_COLORS["cyan"])
        st.markdown(
            f"""
            <div class='ges-card'>
              <h3>🛡️ 총 위험도 <span class='ges-badge danger'>위험 요소 {len(view.risks)}개</span></h3>
              <div class='ges-score' style='color:{risk.color};'>{format_number(view.total_risk)}</div>
              <div class='ges-score-sub'>위험 점수 · {risk.label}</div>
              <div class='ges-bar'><div style='width:{risk_progress(view.total_risk)}%;background:{bar_color};'></div></div>
              <div class='ges-hint'>• 위험도 50 이상: 계약 재검토 필요<br/>
              • 위험도 30-50: 일부 조항 수정 권장<br/>• 위험도 30 미만: 비교적 안전</div>
            </div>
            """,
            unsafe_allow_html=True,
        )


def _render_risk(i: int, risk: RiskItem, expanded: Optional[int]):
    is_open = expanded == i
    label = f"🛡️ {risk.title} · 위험도 {risk.severity if risk.severity is not None else '-'}  {'▲' if is_open else '▼'}"
    st.button(label, key=f"risk-{i}", use_container_width=True, on_click=_toggle_risk, args=(i,))
    st.caption(risk.location)
    st.markdown(f"<div class='ges-clause'>\"{_esc(risk.clause)}\"</div>", unsafe_allow_html=True)

    if is_open:
        st.markdown(
            f"<div class='ges-why'><h5>⚠️ 왜 위험한가요?</h5>{_esc(risk.explanation)}</div>"
            f"<div class='ges-fix'><h5>✅ 수정 제안</h5>{_esc(risk.fix_text)}</div>",
            unsafe_allow_html=True,
        )
        _copy_button(risk.copy_text, key=f"copy-{i}")


def dashboard_page():
    ctrl = _controller()
    state = st.session_state
    _inject_css(ctrl)
    _show_pending_alert()
    _open_notion_if_pending()

    view = AnalysisView.from_result(ctrl.payload.analysis_result)
    if view is None:
        st.button("←", key="back-empty", help="뒤로가기", on_click=_go_back)
        _render_empty_state()
        return

    _render_header(state, ctrl)
    st.divider()
    _render_scores(view)

    if view.risks:
        st.markdown("### ⚠️ 주요 위험 요소")
        expanded = state.get("expanded_risk")
        for i, risk in enumerate(view.risks):
            with st.container(border=True):
                _render_risk(i, risk, expanded)

    if view.recommendations:
        st.markdown("### ✅ 개선 권장사항")
        for rec in view.recommendations:
            st.markdown(f"<div class='ges-reco'>✔️ {_esc(rec)}</div>", unsafe_allow_html=True)

    if view.raw_analysis:
        st.markdown("### 🤖 AI 상세 분석")
        st.markdown(f"<div class='ges-raw'>{_esc(view.raw_analysis)}</div>", unsafe_allow_html=True)

    _footer()
