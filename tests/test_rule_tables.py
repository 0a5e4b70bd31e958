from __future__ import annotations

from pathlib import Path

import pytest

from query_intent import config, rule_tables
from query_intent.errors import RuleTableError
from query_intent.intent_classifier import DEFAULT_INTENT_RULES, classify_intent
from query_intent.models import Intent
from query_intent.rules_engine import DEFAULT_CATALOG, generate_queries


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_expansion_rules_replace_language_rules(tmp_path: Path):
    p = _write(tmp_path, "rules.csv", "language,kind,pattern\nen,question,how much is {seed}\nen,alphabet,xy\n")

    catalog = rule_tables.load_expansion_catalog(p)

    assert [q.query for q in generate_queries("coffee", "en", "us", catalog)] == [
        "how much is coffee",
        "coffee x",
        "coffee y",
    ]
    assert catalog.rules_for("ar") == DEFAULT_CATALOG.rules_for("ar")
    assert catalog.region_names == DEFAULT_CATALOG.region_names


def test_expansion_rules_add_language(tmp_path: Path):
    p = _write(tmp_path, "rules.csv", "Language, Kind ,Pattern\nfr,question,comment {seed}\nfr,location,{seed} en {region}\n")
    catalog = rule_tables.load_region_names(_write(tmp_path, "regions.csv", "language,region,name\nfr,fr,france\n"),
                                            base=rule_tables.load_expansion_catalog(p))

    assert "fr" in catalog.languages
    assert [q.query for q in generate_queries("café", "fr", "fr", catalog)] == ["comment café", "café en france"]


@pytest.mark.parametrize("text", [
    "language,pattern\nen,{seed} x\n",
    "language,kind,pattern\nen,suffix,{seed} x\n",
    "language,kind,pattern\nen,question,how to\n",
    "language,kind,pattern\n,question,how to {seed}\n",
])
def test_bad_expansion_tables_are_rejected(tmp_path: Path, text: str):
    with pytest.raises(RuleTableError):
        rule_tables.load_expansion_catalog(_write(tmp_path, "rules.csv", text))


def test_missing_file_is_rejected(tmp_path: Path):
    with pytest.raises(RuleTableError):
        rule_tables.load_expansion_catalog(tmp_path / "nope.csv")


def test_intent_rules_keep_file_priority(tmp_path: Path):
    p = _write(
        tmp_path,
        "intents.csv",
        "intent,marker,anchored\nnavigational,amazon,\ncommercial,price,\nquestion,how,true\ncommercial,buy,\n",
    )

    rules = rule_tables.load_intent_rules(p)

    assert [(r.intent, r.anchored) for r in rules] == [
        (Intent.NAVIGATIONAL, False),
        (Intent.COMMERCIAL, False),
        (Intent.QUESTION, True),
    ]
    assert rules[1].markers == ("price", "buy")
    assert classify_intent("amazon coffee price", rules) is Intent.NAVIGATIONAL
    assert classify_intent("coffee how", rules) is Intent.INFORMATIONAL


@pytest.mark.parametrize("text", [
    "intent,marker\nshopping,buy\n",
    "intent,marker\nother,foo\n",
    "intent,marker\ncommercial,\n",
    "marker\nbuy\n",
])
def test_bad_intent_tables_are_rejected(tmp_path: Path, text: str):
    with pytest.raises(RuleTableError):
        rule_tables.load_intent_rules(_write(tmp_path, "intents.csv", text))


def test_configured_tables_default_to_builtins(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "RULES_FILE", None)
    monkeypatch.setattr(config, "REGIONS_FILE", None)
    monkeypatch.setattr(config, "INTENT_RULES_FILE", None)

    assert rule_tables.configured_catalog() is DEFAULT_CATALOG
    assert rule_tables.configured_intent_rules() is DEFAULT_INTENT_RULES


def test_configured_tables_read_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "RULES_FILE", str(_write(tmp_path, "r.csv", "language,kind,pattern\nen,commercial,{seed} sale\n")))
    monkeypatch.setattr(config, "REGIONS_FILE", None)
    monkeypatch.setattr(config, "INTENT_RULES_FILE", str(_write(tmp_path, "i.csv", "intent,marker\ncommercial,sale\n")))

    catalog = rule_tables.configured_catalog()
    rules = rule_tables.configured_intent_rules()

    assert [q.query for q in generate_queries("tea", "en", "us", catalog)] == ["tea sale"]
    assert classify_intent("tea sale", rules) is Intent.COMMERCIAL
