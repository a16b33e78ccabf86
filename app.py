# -*- coding: utf-8 -*-
from __future__ import annotations

import streamlit as st
from dotenv import load_dotenv

from flow import FlowController, Step
from log_utils import setup_logging
from ui_pages import onboarding_page, bridge_page, dashboard_page

# ✅ Streamlit 페이지 설정
st.set_page_config(page_title="Gap-Eul Score", page_icon="⚖️", layout="wide")

# ✅ .env 로드 (로컬 실행 시)
load_dotenv(override=True)
setup_logging()

# 🚪 화면 라우팅 (한 번에 한 화면만)
ctrl = FlowController(st.session_state)
try:
    step = ctrl.step
except ValueError:
    st.session_state["step"] = Step.ONBOARDING.value
    st.rerun()

if step is Step.ONBOARDING:
    onboarding_page()
elif step is Step.BRIDGE:
    bridge_page()
else:
    dashboard_page()
