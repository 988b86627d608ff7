"""
Resume Highlighter — Streamlit Web UI
Paste or upload a resume and a job description, then highlight the job's keywords in the resume.
"""

import streamlit as st

from highlighter.config import Config
from highlighter.keywords import highlight_resume
from highlighter.text_input import read_text_upload

# ── Page Config ─────────────────────────────────────────

st.set_page_config(
    page_title="Resume Highlighter",
    page_icon="📄",
    layout="wide",
)

# ── Custom CSS ──────────────────────────────────────────

st.markdown("""
<style>
    .main-header {
        text-align: center;
        padding: 1rem 0;
    }
    .main-header h1 {
        font-size: 2.6rem;
        font-weight: 800;
    }
</style>
""", unsafe_allow_html=True)

HIGHLIGHT_BOX_STYLE = (
    "white-space: pre-wrap; line-height: 1.6; padding: 1.2rem; "
    "border-radius: 12px; border: 1px solid #ddd; background: #fafafa; color: #222;"
)

# ── Header ──────────────────────────────────────────────

st.markdown('<div class="main-header"><h1>📄 Resume Highlighter</h1></div>', unsafe_allow_html=True)
st.markdown(
    "<p style='text-align:center; color:#888; margin-top:-10px;'>"
    "See which job description keywords your resume already covers</p>",
    unsafe_allow_html=True,
)
st.divider()

# ── Session State ───────────────────────────────────────

for key in ("resume", "job_desc"):
    st.session_state.setdefault(key, "")


def _load_text_file(kind: str):
    """Fill the text area for ``kind`` from its .txt uploader."""
    uploaded = st.session_state.get(f"{kind}_file")
    if uploaded is None:
        return
    try:
        st.session_state[kind] = read_text_upload(uploaded.type, uploaded.getvalue())
    except ValueError as e:
        st.session_state[f"{kind}_error"] = str(e)


# ── Inputs ──────────────────────────────────────────────

col_resume, col_jd = st.columns([1, 1])

with col_resume:
    st.subheader("Upload / Paste Resume")
    st.text_area(
        "Resume",
        key="resume",
        height=300,
        placeholder="Paste your resume text here...",
        label_visibility="collapsed",
    )
    st.file_uploader(
        "Resume (.txt)",
        type=["txt"],
        key="resume_file",
        on_change=_load_text_file,
        args=("resume",),
    )
    if err := st.session_state.pop("resume_error", None):
        st.error(err)

with col_jd:
    st.subheader("Upload / Paste Job Description")
    st.text_area(
        "Job Description",
        key="job_desc",
        height=300,
        placeholder="Paste job description here...",
        label_visibility="collapsed",
    )
    st.file_uploader(
        "Job Description (.txt)",
        type=["txt"],
        key="job_desc_file",
        on_change=_load_text_file,
        args=("job_desc",),
    )
    if err := st.session_state.pop("job_desc_error", None):
        st.error(err)

# ── Highlight ───────────────────────────────────────────

if st.button("Highlight Resume", type="primary", use_container_width=True):
    try:
        result = highlight_resume(st.session_state.resume, st.session_state.job_desc)
    except ValueError as e:
        st.error(str(e))
        st.stop()

    st.divider()
    st.subheader("Highlighted Resume")
    st.caption(
        f"{result.match_count} of {len(result.keywords)} keywords found "
        f"(words over {Config.MIN_KEYWORD_LENGTH - 1} characters, common words skipped)"
    )
    st.html(f'<div class="highlight-box" style="{HIGHLIGHT_BOX_STYLE}">{result.html}</div>')

    with st.expander("🔑 Keywords", expanded=False):
        missing = [k for k in result.keywords if k not in result.matched]
        st.markdown("**Found:** " + (", ".join(result.matched) or "—"))
        st.markdown("**Missing:** " + (", ".join(missing) or "—"))
