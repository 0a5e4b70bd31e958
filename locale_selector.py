# locale_selector.py
import streamlit as st

from query_intent import config
from query_intent.rules_engine import RuleCatalog


def locale_dropdown(catalog: RuleCatalog):
    languages = catalog.languages
    regions = catalog.regions
    c1, c2 = st.columns(2)
    with c1:
        language = st.selectbox(
            "Language (expansion templates, Google hl)",
            languages,
            index=languages.index(config.DEFAULT_LANGUAGE) if config.DEFAULT_LANGUAGE in languages else 0,
        )
    with c2:
        region = st.selectbox(
            "Region (location templates, Google gl)",
            regions,
            index=regions.index(config.DEFAULT_REGION) if config.DEFAULT_REGION in regions else 0,
        )
    return language, region
