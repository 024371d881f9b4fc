import streamlit as st

from copyscan_core import AnalysisResult
from copyscan_core.validation import is_ready
from copyscan_web.client import request_check
from copyscan_web.config import web_settings
from copyscan_web.helpers import (
    citation_markdown,
    gauge_svg,
    match_card_html,
    source_placeholder,
)
from copyscan_web.styles import CUSTOM_CSS

st.set_page_config(layout="wide", page_title="Plagiarism Checker")
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

if "result" not in st.session_state:
    st.session_state["result"] = None
if "error" not in st.session_state:
    st.session_state["error"] = None


def render_result(result: AnalysisResult) -> None:
    gauge_col, summary_col = st.columns([1, 3])
    with gauge_col:
        st.markdown(gauge_svg(result.overall_similarity_percentage), unsafe_allow_html=True)
    with summary_col:
        st.subheader("Analysis Complete")
        st.write("Overall Similarity Score")
        st.write(result.summary)

    if result.web_citations:
        st.subheader("Web Sources")
        st.markdown("\n".join(citation_markdown(c) for c in result.web_citations))

    st.subheader("Detected Similarities")
    if not result.matches:
        st.markdown(
            '<div class="empty-state"><h4>No Significant Similarities Found</h4>'
            "<p>The analysis did not detect any notable overlap between the two texts.</p></div>",
            unsafe_allow_html=True,
        )
        return
    for index, match in enumerate(result.matches):
        st.markdown(match_card_html(match, index), unsafe_allow_html=True)


st.markdown('<h1 class="title">Plagiarism Checker</h1>', unsafe_allow_html=True)

use_web_search = st.toggle("Check Against the Web", value=False)

source_col, check_col = st.columns(2)
with source_col:
    source_text = st.text_area(
        "Source Text", height=400, placeholder=source_placeholder(use_web_search)
    )
with check_col:
    text_to_check = st.text_area(
        "Text to Check",
        height=400,
        placeholder="Paste the text you want to check for plagiarism here...",
    )

submitted = st.button(
    "Check for Plagiarism",
    type="primary",
    disabled=not is_ready(source_text, text_to_check, use_web_search),
)

if submitted:
    st.session_state["result"] = None
    st.session_state["error"] = None
    with st.spinner("Analyzing..."):
        outcome = request_check(
            web_settings.api_base_url,
            source_text,
            text_to_check,
            use_web_search,
            timeout=web_settings.request_timeout_seconds,
        )
    if outcome.error is not None:
        st.session_state["error"] = outcome.error.message
    else:
        st.session_state["result"] = outcome.result

if st.session_state["error"]:
    st.error(f"Error: {st.session_state['error']}")

if st.session_state["result"] is not None:
    render_result(st.session_state["result"])

st.caption("Powered by Google Gemini")
