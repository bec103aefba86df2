# ui/streamlit_app.py
import os
from typing import Any, Dict, List

import requests
import streamlit as st

from core.radar import render_radar_svg
from core.score import ScoredSkill


# ----------------- helpers: safe secrets/env -----------------
def safe_secret(key: str, default=None):
    """
    Read from Streamlit secrets first (if present), else from env, else default.
    """
    try:
        return st.secrets.get(key, os.environ.get(key, default))  # type: ignore[attr-defined]
    except Exception:
        return os.environ.get(key, default)


DEFAULT_INPUT = (
    "Education: 2017-2021 Tsinghua University Computer Science\n"
    "Work: 2021-2023 ByteDance Frontend Engineer, led a visualization platform\n"
    "Skills: JavaScript, React, D3.js, Data Analysis, Collaboration"
)

# ----------------- configuration -----------------
st.set_page_config(page_title="Resume Visualizer", layout="wide")
st.title("📈 Resume Visualizer")

DEBUG = (safe_secret("DEBUG", "0") == "1")
API_BASE = safe_secret("API_BASE", None)  # e.g. https://resume-visualizer-api.onrender.com

# Optional Render Protected Web Service header
API_PROTECT_HEADER = safe_secret("API_PROTECT_HEADER", "X-Render-Secret")
API_PROTECT_TOKEN = safe_secret("RENDER_API_SECRET", None)

if DEBUG:
    st.sidebar.caption("API base (debug)")
    api_base = st.sidebar.text_input(
        "Base URL",
        value=(API_BASE or "http://127.0.0.1:8000"),
    ).rstrip("/")
else:
    api_base = (API_BASE or "").rstrip("/")

if not api_base:
    st.error(
        "API_BASE is not configured. Set it as an Environment Variable on this UI service.\n\n"
        "Example value: http://127.0.0.1:8000"
    )
    st.stop()


def _auth_headers() -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if API_PROTECT_TOKEN:
        headers[API_PROTECT_HEADER] = API_PROTECT_TOKEN
    return headers

# ----------------- sidebar: health check -----------------
if st.sidebar.button("Check API health"):
    try:
        r = requests.get(f"{api_base}/healthz", headers=_auth_headers(), timeout=10)
        r.raise_for_status()
        st.sidebar.success(r.json())
    except Exception as e:
        st.sidebar.error(f"Health failed: {e}")

st.sidebar.caption(f"API: {api_base}")


# ----------------- HTTP -----------------
def post_json(path: str, body: Dict[str, Any], timeout: int = 30) -> Dict[str, Any]:
    url = f"{api_base}{path}"
    r = requests.post(url, json=body, headers=_auth_headers(), timeout=timeout)
    r.raise_for_status()
    return r.json()


# ----------------- render helpers -----------------
def render_timeline(items: List[Dict[str, Any]]) -> None:
    st.subheader("Timeline")
    if not items:
        st.caption("No timeline data yet.")
        return
    for item in items:
        st.markdown(f"**{item['period']}** · {item['title']}")

def render_summary(points: List[str]) -> None:
    st.subheader("Highlights")
    for p in points:
        st.markdown(f"- {p}")

def render_radar(skills: List[Dict[str, Any]]) -> None:
    st.subheader("Skill radar")
    svg = render_radar_svg([ScoredSkill(name=s["name"], score=s["score"]) for s in skills])
    st.markdown(svg, unsafe_allow_html=True)

def render_skill_bars(skills: List[Dict[str, Any]]) -> None:
    st.subheader("Skills")
    if not skills:
        st.caption("No skill data yet.")
        return
    for s in skills:
        st.progress(s["score"] / 100, text=f"{s['name']} · {s['score']}")

def render_logo_wall(logos: List[Dict[str, Any]]) -> None:
    st.subheader("Organizations")
    if not logos:
        st.caption("No logos available yet.")
        return
    cols = st.columns(min(len(logos), 4))
    for i, org in enumerate(logos):
        with cols[i % len(cols)]:
            st.image(org["logo_url"], width=64)
            st.markdown(f"**{org['name']}**")
            st.caption(org["type"])

def render_suggestion(suggestions: List[str]) -> None:
    st.subheader("Suggestions")
    st.info(" ".join(suggestions))


# ----------------- inputs -----------------
resume_text = st.text_area("Resume text", value=DEFAULT_INPUT, height=200)

if st.button("Generate", type="primary"):
    with st.spinner("Generating…"):
        try:
            data = post_json("/profile", {"resume_text": resume_text})
        except Exception as e:
            st.error(f"Profile request failed: {e}")
            st.stop()

    left, right = st.columns(2)
    with left:
        render_timeline(data.get("timeline", []))
        render_summary(data.get("summary", []))
        render_suggestion(data.get("suggestions", []))
    with right:
        render_radar(data.get("radar_skills", []))
        render_skill_bars(data.get("skills", []))
    render_logo_wall(data.get("logos", []))
