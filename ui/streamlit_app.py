"""ui.streamlit_app

Streamlit demo UI for the portfolio Q&A service:
- Account selector (accounts or household group) and timeframe
- Suggested questions, with {benchmark} placeholder filled from the sidebar
- Renders answer text + KPIs + tables + charts from the answer payload
- Fallback answers show their action label; review questions show the queue message
- Debug mode shows per-step traces (normalized text, per-answer scores)

Run:
    streamlit run ui/streamlit_app.py
"""

from __future__ import annotations

import json

import streamlit as st

from portfolio_qa.env_loader import load_env
from portfolio_qa.config import Settings
from portfolio_qa.catalog.default_catalog import SUGGESTED_QUESTIONS
from portfolio_qa.contracts.models import QuestionContext, QuestionRequest
from portfolio_qa.main import handle_question
from portfolio_qa.viz.answer_frames import build_visuals
from ui.ui_theme import CONFIDENCE_COLORS, css

ACCOUNTS = ["Growth Portfolio", "Conservative Fund", "Retirement IRA", "Education 529"]
GROUPS = ["Smith Household", "Family Trust"]
TIMEFRAMES = ["YTD", "1M", "3M", "1Y", "3Y", "Since Inception"]


def _init_state(settings: Settings):
    if "messages" not in st.session_state:
        st.session_state.messages = []
    if "debug" not in st.session_state:
        st.session_state.debug = settings.default_debug
    if "selection_mode" not in st.session_state:
        st.session_state.selection_mode = "accounts"
    if "benchmark" not in st.session_state:
        st.session_state.benchmark = "S&P 500"


def _render_debug(traces):
    return [{"title": f"{t['step']} ({t.get('elapsedMs', 0)} ms)", "body": json.dumps(t["payload"], indent=2, default=str)} for t in traces or []]


def _render_answer(m):
    env = m["envelope"]
    answer = env.get("answer")
    confidence = env.get("confidence")
    if confidence:
        st.markdown(
            f"<span class='qa-badge' style='background:{CONFIDENCE_COLORS[confidence]}'>{confidence} confidence</span>",
            unsafe_allow_html=True,
        )

    if not answer:
        st.info(env.get("message", ""))
        return

    st.markdown(f"**{answer['title']}**")
    st.markdown(answer["content"])

    data = answer.get("data") or {}
    if data.get("isUnmatched") and data.get("actionText"):
        st.button(data["actionText"], key=f"action_{m['id']}", disabled=True)

    vis = build_visuals(answer)
    if vis.kpis:
        cols = st.columns(len(vis.kpis))
        for col, (label, value) in zip(cols, vis.kpis):
            col.metric(label, f"{value:,.2f}")
    for fig in vis.charts:
        st.plotly_chart(fig, width="stretch")
    for name, df in vis.tables.items():
        with st.expander(name, expanded=False):
            st.dataframe(df, width="stretch")


def main():
    load_env()
    settings = Settings.load()
    _init_state(settings)

    st.set_page_config(page_title="Portfolio Q&A", page_icon="📈", layout="wide")
    st.markdown(css(), unsafe_allow_html=True)
    st.markdown(
        "<div class='qa-header'><b>Portfolio Q&A</b>"
        "<span class='qa-muted'>Answers for the selected accounts</span></div>",
        unsafe_allow_html=True,
    )

    with st.sidebar:
        st.markdown("### Selection")
        st.session_state.selection_mode = st.radio("Select by", options=["accounts", "group"], horizontal=True)
        if st.session_state.selection_mode == "accounts":
            selected = st.multiselect("Accounts", ACCOUNTS, default=ACCOUNTS[:2])
        else:
            selected = [st.selectbox("Group", GROUPS)]
        timeframe = st.selectbox("Timeframe", TIMEFRAMES)
        st.session_state.benchmark = st.text_input("{benchmark}", value=st.session_state.benchmark)
        st.divider()
        st.session_state.debug = st.toggle("Debug mode", value=st.session_state.debug)

    context = QuestionContext(accounts=selected, timeframe=timeframe, selection_mode=st.session_state.selection_mode)

    for m in st.session_state.messages:
        with st.chat_message(m.get("role", "assistant")):
            if m["role"] == "user":
                st.markdown(m["content"])
                continue
            _render_answer(m)
            if st.session_state.debug:
                for panel in _render_debug(m.get("traces")):
                    with st.expander(panel["title"], expanded=False):
                        st.code(panel["body"], language="json")

    st.markdown("### Suggested questions")
    cols = st.columns(4)
    for i, q in enumerate(SUGGESTED_QUESTIONS[: settings.suggested_questions]):
        if cols[i % 4].button(q, width="stretch"):
            _send(q, context)
            st.rerun()

    prompt = st.chat_input("Ask about the selected accounts...")
    if prompt:
        _send(prompt, context)
        st.rerun()


def _send(prompt: str, context: QuestionContext):
    st.session_state.messages.append({"role": "user", "content": prompt})
    req = QuestionRequest(
        question=prompt,
        context=context,
        placeholders={"benchmark": st.session_state.benchmark},
    )
    with st.spinner("Finding an answer..."):
        outcome = handle_question(req)
    st.session_state.messages.append(
        {
            "role": "assistant",
            "id": outcome.envelope["id"],
            "envelope": outcome.envelope,
            "traces": outcome.traces,
        }
    )


if __name__ == "__main__":
    main()
