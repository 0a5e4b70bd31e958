from __future__ import annotations

from query_intent.models import Locale, Source
from query_intent.rules_engine import (
    ALPHABETS,
    DEFAULT_CATALOG,
    ExpansionRule,
    RuleCatalog,
    generate_queries,
)


def test_empty_seed_returns_nothing():
    assert generate_queries("", "en", "us") == []
    assert generate_queries("   ", "ar", "eg") == []


def test_records_are_tagged():
    out = generate_queries("  coffee ", "EN", "US")
    assert out
    assert all(q.source is Source.RULE_ENGINE for q in out)
    assert all(q.seed == "coffee" for q in out)
    assert all(q.locale == Locale("en", "us") for q in out)


def test_catalog_order_and_content():
    queries = [q.query for q in generate_queries("coffee", "en", "us")]
    assert queries[0] == "how to coffee"
    assert "coffee vs" in queries
    assert "coffee price" in queries
    assert "coffee in usa" in queries
    assert queries.index("how to coffee") < queries.index("coffee for") < queries.index("coffee vs")
    assert queries.index("coffee vs") < queries.index("buy coffee") < queries.index("coffee near me")
    assert queries[-len(ALPHABETS["en"]):] == [f"coffee {ch}" for ch in ALPHABETS["en"]]


def test_arabic_locale_uses_arabic_templates():
    queries = [q.query for q in generate_queries("كورس برمجة", "ar", "eg")]
    assert "ازاي كورس برمجة" in queries
    assert "سعر كورس برمجة" in queries
    assert "كورس برمجة في مصر" in queries
    assert "كورس برمجة ب" in queries


def test_location_rule_skipped_without_region_name():
    queries = [q.query for q in generate_queries("coffee", "en", "zz")]
    assert not any("{region}" in q for q in queries)
    assert "coffee near me" in queries
    assert len(queries) == len(DEFAULT_CATALOG.rules_for("en")) - 1


def test_unknown_language_falls_back_to_english_rules():
    out = generate_queries("kaffee", "de", "de")
    assert out[0].query == "how to kaffee"
    assert out[0].locale == Locale("de", "de")


def test_seed_is_opaque_text():
    out = generate_queries("c++ {x} 100%", "en", "us")
    assert out[0].query == "how to c++ {x} 100%"


def test_no_internal_dedup():
    catalog = RuleCatalog(rules={"en": (ExpansionRule("question", "{seed}"), ExpansionRule("question", "{seed}"))})
    assert [q.query for q in generate_queries("tea", "en", "us", catalog)] == ["tea", "tea"]


def test_deterministic():
    assert generate_queries("coffee", "ar", "eg") == generate_queries("coffee", "ar", "eg")
