# unica/ui.py
from __future__ import annotations
import html, time
import streamlit as st
from pathlib import Path

UNICA_CYAN  = "#06B6D4"
UNICA_BLUE  = "#1E3A8A"
UNICA_SLATE = "#0F172A"
UNICA_MUTED = "#64748B"

_ASSETS_DIR = Path("assets")
_LOGO_PATH  = _ASSETS_DIR / "unica_logo.png"

STATUS_STYLE = {"確定": "success", "調整中": "warn", "要確認": "alert"}

def _inject_css():
    st.markdown(
        f"""
        <style>
        /* Page canvas */
        .stApp {{ background: linear-gradient(135deg, {UNICA_SLATE} 0%, {UNICA_BLUE} 55%, #164E63 100%); color:#F8FAFC; }}

        /* Chips row */
        .chip {{ display:inline-flex; align-items:center; gap:8px;
          padding:6px 10px; border-radius:999px; font-size:12px; margin-right:8px;
          border:1px solid rgba(255,255,255,0.15); background:rgba(255,255,255,0.08); color:#E2E8F0; }}
        .chip.warn {{ background:rgba(251,191,36,0.15); border-color:rgba(251,191,36,0.4); color:#FDE68A; }}
        .chip.success {{ background:rgba(16,185,129,0.15); border-color:rgba(16,185,129,0.4); color:#A7F3D0; }}
        .chip.alert {{ background:rgba(239,68,68,0.15); border-color:rgba(239,68,68,0.4); color:#FECACA; }}
        .chip .dot {{ width:6px; height:6px; border-radius:50%; background:{UNICA_CYAN}; display:inline-block; }}

        /* Chat bubbles */
        .chat-bubble {{ padding:14px 18px; border-radius:22px; line-height:1.6; white-space:pre-wrap;
           border:1px solid rgba(255,255,255,0.10); font-size:14px; }}
        .chat-user {{ background:rgba(6,182,212,0.9); color:#fff; }}
        .chat-assist {{ background:rgba(255,255,255,0.12); color:#fff; backdrop-filter:blur(8px); }}

        footer {{visibility:hidden}}
        </style>
        """,
        unsafe_allow_html=True,
    )

def show_logo(width: int = 170):
    if _LOGO_PATH.exists():
        st.image(str(_LOGO_PATH), width=width)
    else:
        st.markdown(f"<div style='font-weight:800;color:{UNICA_CYAN};font-size:22px'>UNICA</div>", unsafe_allow_html=True)

def header(title: str, subtitle: str | None = None):
    _inject_css()
    st.markdown(f"<h1 style='margin:8px 0 2px 0;color:#F8FAFC'>{title}</h1>", unsafe_allow_html=True)
    if subtitle:
        st.markdown(f"<div style='color:#CBD5E1;margin-bottom:8px'>{subtitle}</div>", unsafe_allow_html=True)

def chips_row(items):
    """items: List[Tuple[label, style_key]] where style_key in {success,warn,alert,neutral}"""
    _inject_css()
    out = []
    for label, style in items:
        cls = "chip"
        if style in ("success", "warn", "alert"): cls += f" {style}"
        out.append(f"<span class='{cls}'><span class='dot'></span>{html.escape(str(label))}</span>")
    st.markdown(" ".join(out), unsafe_allow_html=True)

def chat_bubble(role: str, content: str):
    css_class = "chat-user" if role == "user" else "chat-assist"
    with st.chat_message(role):
        st.markdown(f"<div class='chat-bubble {css_class}'>{html.escape(content)}</div>", unsafe_allow_html=True)

def kpi_row(k: dict):
    c1,c2,c3,c4,c5 = st.columns(5)
    c1.metric("登録型番", k["profiles"])
    c2.metric("至急案件", k["urgent"])
    c3.metric("平均コンセプトLT", f"{k['avg_lt_days']:.1f}日")
    c4.metric("最大稼働率", f"{k['max_utilization']}%")
    c5.metric("最短出荷日", k["earliest_ship"])

def typewriter(text: str, delay: float = 0.035):
    for ch in text:
        yield ch
        time.sleep(delay)
