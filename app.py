# app.py
# Streamlit Query Intent Toolkit

import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from locale_selector import locale_dropdown
from query_intent import InvalidSeedError, config, run_sync
from query_intent.export import TABS, filter_results, to_csv, to_dataframe, to_text
from query_intent.rule_tables import configured_catalog, configured_intent_rules

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO), format="%(asctime)s %(levelname)s %(message)s")


@st.cache_resource
def rule_tables():
    return configured_catalog(), configured_intent_rules()


# ---------------- Streamlit UI ----------------
st.set_page_config(page_title="Query Intent Toolkit", page_icon="🔎", layout="wide")
st.title("🔎 Query Intent Toolkit")

catalog, intent_rules = rule_tables()

seed_text = st.text_area("Seed keyword", height=100, placeholder="e.g. كورس برمجة")
language, region = locale_dropdown(catalog)
generate = st.button("🚀 Generate Queries")

if "results" not in st.session_state:
    st.session_state["results"] = []

if generate:
    try:
        with st.spinner("Generating…"):
            st.session_state["results"] = run_sync(
                seed_text, language, region, catalog=catalog, intent_rules=intent_rules
            )
    except InvalidSeedError:
        st.warning("Please enter a seed keyword.")
        st.stop()

results = st.session_state["results"]
if not results:
    st.info("No queries yet. اضغط Generate عشان تبدأ.")
    st.stop()

tab = st.radio("Show", TABS, horizontal=True)
shown = filter_results(results, tab)

st.success(f"{len(shown)} of {len(results)} queries.")
st.dataframe(to_dataframe(shown), use_container_width=True, height=500)

with st.expander("📋 Copy queries"):
    st.code(to_text(results), language=None)

csv = to_csv(results).encode("utf-8")
st.download_button("⬇️ Download CSV", data=csv, file_name="queries.csv", mime="text/csv")
