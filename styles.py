# styles.py
# -*- coding: utf-8 -*-
"""
UI 공통 스타일 (다크/라이트 2종)

- 다크: slate 계열 배경 + cyan 포인트 (기본값)
- 라이트: zinc 계열 밝은 배경
- 문서(<html>)의 'dark' 클래스는 theme_script()로 맞춤
"""
ACCENT = "#06b6d4"  # cyan

# 위험도 진행바 색상
PROGRESS_COLORS = {
    "green": "#22c55e", "yellow": "#eab308", "orange": "#f97316", "red": "#ef4444", "cyan": ACCENT,
}

PALETTE = {
    "dark": {
        "bg": "linear-gradient(180deg, #020617 0%, #0f172a 100%)",
        "text": "#f1f5f9",
        "muted": "#94a3b8",
        "card": "rgba(15,23,42,.55)",
        "card_inner": "rgba(30,41,59,.5)",
        "border": "rgba(51,65,85,.5)",
    },
    "light": {
        "bg": "#fafafa",
        "text": "#18181b",
        "muted": "#52525b",
        "card": "#ffffff",
        "card_inner": "#f4f4f5",
        "border": "#e4e4e7",
    },
}


def get_css(is_dark: bool = True) -> str:
    pal = PALETTE["dark" if is_dark else "light"]
    return f"""
    :root{{
        --accent: {ACCENT};
        --text: {pal['text']};
        --muted: {pal['muted']};
        --card: {pal['card']};
        --card-inner: {pal['card_inner']};
        --border: {pal['border']};
        --radius: 16px;
    }}

    .stApp {{ background: {pal['bg']} !important; color: var(--text) !important; }}
    .stApp h1, .stApp h2, .stApp h3, .stApp h4, .stApp p, .stApp label {{ color: var(--text); }}
    .block-container{{ padding-top: 1.6rem !important; max-width: 1200px; }}
    header[data-testid="stHeader"]{{ background: transparent; }}

    /* ===================== 헤더 ===================== */
    .ges-brand{{ display:flex; align-items:center; gap:10px; font-weight:800; font-size:1.15rem; }}
    .ges-brand .dot{{ width:10px; height:10px; border-radius:50%; background:var(--accent); display:inline-block; }}
    .ges-badge{{
        display:inline-block; padding:3px 10px; border-radius:999px; font-size:12px; font-weight:700;
        border:1px solid var(--border); background: rgba(6,182,212,.12); color: var(--accent);
    }}
    .ges-badge.ok{{ background: rgba(34,197,94,.2); color:#4ade80; }}
    .ges-badge.danger{{ background: rgba(239,68,68,.2); color:#f87171; }}

    /* ===================== 온보딩/브릿지 ===================== */
    .ges-eyebrow{{ text-align:center; letter-spacing:.2em; font-weight:800; color:var(--accent); font-size:.9rem; }}
    .ges-hero{{ text-align:center; font-size:2.6rem; font-weight:900; margin: 6px 0 4px; }}
    .ges-sub{{ text-align:center; color: var(--muted); font-size:1.15rem; }}
    .ges-note{{ text-align:center; color: var(--muted); font-size:.8rem; opacity:.8; }}

    .ges-feature{{
        background: var(--card-inner); border:1px solid var(--border); border-radius: var(--radius);
        padding: 22px 18px; text-align:center; min-height: 150px;
    }}
    .ges-feature .icon{{ font-size: 1.6rem; }}
    .ges-feature h4{{ margin: 8px 0 6px; font-weight: 800; }}
    .ges-feature p{{ color: var(--muted); font-size: .9rem; line-height:1.6; }}

    /* ===================== 대시보드 ===================== */
    .ges-card{{
        background: var(--card); border:1px solid var(--border); border-radius: var(--radius);
        padding: 24px 26px; margin-bottom: 18px;
    }}
    .ges-card h3{{ margin-top:0; font-weight:800; }}
    .ges-score{{ text-align:center; font-size: 3.4rem; font-weight: 900; line-height:1.1; margin: 18px 0 4px; }}
    .ges-score-sub{{ text-align:center; color: var(--muted); font-size:.85rem; margin-bottom: 14px; }}
    .ges-bar{{ height:8px; width:100%; background: var(--card-inner); border-radius:999px; overflow:hidden; margin: 6px 0 14px; }}
    .ges-bar > div{{ height:100%; border-radius:999px; }}
    .ges-hint{{ color: var(--muted); font-size:.85rem; line-height:1.7; }}
    .ges-clause{{
        background: var(--card-inner); border:1px solid var(--border); border-radius: 10px;
        padding: 10px 12px; font-size:.92rem; margin: 4px 0 10px;
    }}
    .ges-why{{ background: var(--card-inner); border-radius:10px; padding: 12px 14px; margin-bottom: 10px; }}
    .ges-why h5{{ color:#fbbf24; margin: 0 0 6px; }}
    .ges-fix{{ background: rgba(34,197,94,.1); border:1px solid rgba(34,197,94,.3); border-radius:10px; padding: 12px 14px; }}
    .ges-fix h5{{ color:#4ade80; margin: 0 0 6px; }}
    .ges-reco{{ background: var(--card-inner); border-radius: 10px; padding: 10px 14px; margin-bottom: 8px; }}
    .ges-raw{{
        background: var(--card-inner); border:1px solid var(--border); border-radius: 12px;
        padding: 16px; font-family: ui-monospace, Menlo, monospace; font-size:.85rem;
        white-space: pre-wrap; max-height: 380px; overflow-y: auto;
    }}
    .ges-footer{{ text-align:center; color: var(--muted); font-size: .75rem; margin-top: 36px; opacity:.7; }}
    """


def theme_script(document_class: str) -> str:
    """호스트 문서 <html>에 'dark' 클래스 반영"""
    on = "true" if document_class == "dark" else "false"
    return f"""
    <script>
      try {{
        window.parent.document.documentElement.classList.toggle("dark", {on});
      }} catch (e) {{}}
    </script>
    """
