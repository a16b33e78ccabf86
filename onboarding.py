# onboarding.py
# -*- coding: utf-8 -*-
"""
온보딩 타이핑 문구
- 고정 첫 문구 + 랜덤 훅 1개 + 랜덤 Q&A 1쌍 (세션 시작 시 한 번 선택)
- 타이핑 80ms / 완성 후 2초 유지 / 삭제 30ms, 마지막 문구는 남겨둠
"""
from __future__ import annotations
import html
import json
import random
from typing import List, Optional, Tuple

RANDOM_HOOKS = [
    "사인하기 전,\n딱 3초만 투자하세요.",
    "복잡한 계약,\n점수로 한눈에.",
    "더 이상 억울한 '을'은 없습니다.",
    "당신의 서명이 안전해지는 곳.",
    "계약서 속\n기울어진 운동장을 바로잡습니다.",
    "법률 용어 뒤에 숨은 유불리를\n투명하게 공개합니다.",
    "감(Feeling)이 아닌 데이터로,\n계약의 공정함을 판단하세요.",
]

QA_PAIRS = [
    {"q": "\"이 문구,\n나한테 너무 불리한 거 아닐까?\"",
     "a": "걱정 마세요,\n갑을스코어가 꼼꼼하게 뜯어봤습니다."},
    {"q": "\"혹시 나도 모르게\n'노예 계약'을 맺고 있진 않나요?\"",
     "a": "AI가 찾아내는 숨겨진 독소조항,\n확실하게 짚어드립니다."},
    {"q": "\"전문가 없이\n덜컥 도장 찍어도 괜찮을까요?\"",
     "a": "이제 전문가처럼 분석하고,\n당당하게 계약하세요."},
    {"q": "\"이 계약서에서 당신은 파트너인가요,\n아니면 '을'인가요?\"",
     "a": "갑과 을, 그 미묘한 관계의\n균형을 맞춰드립니다."},
    {"q": "\"어려운 법률 용어,\n그냥 믿고 넘기시나요?\"",
     "a": "모호한 문장은 명확하게,\n위험한 조항은 쉽게 알려드립니다."},
]

FIXED_START_MESSAGE = "내 계약서의 안전 점수,\n갑을스코어."

TYPE_DELAY_MS = 80
DELETE_DELAY_MS = 30
HOLD_MS = 2000


def pick_messages(rng: Optional[random.Random] = None) -> List[str]:
    rng = rng or random.Random()
    hook = rng.choice(RANDOM_HOOKS)
    qa = rng.choice(QA_PAIRS)
    return [FIXED_START_MESSAGE, hook, qa["q"], qa["a"]]


def typing_frames(messages: List[str]) -> List[Tuple[str, int]]:
    """(표시할 텍스트, 직전 대기 ms) 목록"""
    frames: List[Tuple[str, int]] = []
    for i, msg in enumerate(messages):
        for n in range(1, len(msg) + 1):
            frames.append((msg[:n], TYPE_DELAY_MS))
        if i == len(messages) - 1:
            break
        for n in range(len(msg) - 1, -1, -1):
            frames.append((msg[:n], HOLD_MS if n == len(msg) - 1 else DELETE_DELAY_MS))
    return frames


def typing_html(messages: List[str], is_dark: bool = True) -> str:
    """components.html용 타이핑 애니메이션"""
    color = "#f4f4f5" if is_dark else "#18181b"
    frames = json.dumps(typing_frames(messages), ensure_ascii=False)
    first = html.escape(messages[0][:1]) if messages else ""
    return f"""
    <style>
      body {{ margin:0; background:transparent; }}
      .ges-typing {{
        min-height:220px; display:flex; align-items:center; justify-content:center;
        font-family:"Pretendard","Noto Sans KR",sans-serif; font-weight:800;
        font-size:44px; line-height:1.25; text-align:center; white-space:pre-line; color:{color};
      }}
      .ges-caret {{ display:inline-block; width:4px; height:44px; margin-left:4px;
                    background:#06b6d4; vertical-align:middle; animation:ges-blink 1s step-end infinite; }}
      @keyframes ges-blink {{ 0%,100% {{ opacity:1; }} 50% {{ opacity:0; }} }}
    </style>
    <div class="ges-typing"><span><span id="ges-text">{first}</span><span class="ges-caret"></span></span></div>
    <script>
      const frames = {frames};
      const el = document.getElementById("ges-text");
      let i = 0;
      function next() {{
        if (i >= frames.length) return;
        const [text, delay] = frames[i];
        setTimeout(() => {{ el.textContent = text; i += 1; next(); }}, delay);
      }}
      next();
    </script>
    """
