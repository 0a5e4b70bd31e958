# rule_tables.py
# Load expansion rules, region names and intent rules from CSV (file path or URL).
#   expansion rules: language,kind,pattern
#   region names:    language,region,name
#   intent rules:    intent,marker[,anchored]

from __future__ import annotations

import logging

import pandas as pd

from . import config
from .errors import RuleTableError
from .intent_classifier import DEFAULT_INTENT_RULES, IntentRule
from .models import Intent
from .rules_engine import DEFAULT_CATALOG, RULE_KINDS, ExpansionRule, RuleCatalog, alphabet_rules

LOGGER = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "y"}


def _read_table(file_or_url, columns: list[str]) -> pd.DataFrame:
    try:
        df = pd.read_csv(file_or_url, dtype=str, keep_default_na=False, encoding="utf-8")
    except (OSError, ValueError, pd.errors.ParserError) as exc:
        raise RuleTableError(f"could not read rule table {file_or_url}: {exc}") from exc
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise RuleTableError(f"rule table {file_or_url} is missing columns: {', '.join(missing)}")
    return df


def load_expansion_catalog(file_or_url, base: RuleCatalog = DEFAULT_CATALOG) -> RuleCatalog:
    """Languages present in the file replace their built-in rules; others are kept."""
    df = _read_table(file_or_url, ["language", "kind", "pattern"])
    loaded: dict[str, list[ExpansionRule]] = {}
    for i, row in df.iterrows():
        language = row["language"].strip().lower()
        kind = row["kind"].strip().lower()
        pattern = row["pattern"].strip()
        if not language or not pattern:
            raise RuleTableError(f"row {i + 2}: language and pattern must be non-empty")
        if kind not in RULE_KINDS:
            raise RuleTableError(f"row {i + 2}: unknown rule kind {kind!r}")
        if kind == "alphabet":
            loaded.setdefault(language, []).extend(alphabet_rules(pattern))
            continue
        if "{seed}" not in pattern:
            raise RuleTableError(f"row {i + 2}: pattern {pattern!r} has no {{seed}} placeholder")
        loaded.setdefault(language, []).append(ExpansionRule(kind, pattern))

    rules = dict(base.rules)
    for language, lang_rules in loaded.items():
        rules[language] = tuple(lang_rules)
    LOGGER.info("Loaded expansion rules from %s: rows=%s languages=%s", file_or_url, len(df), sorted(loaded))
    return RuleCatalog(rules=rules, region_names=dict(base.region_names))


def load_region_names(file_or_url, base: RuleCatalog = DEFAULT_CATALOG) -> RuleCatalog:
    df = _read_table(file_or_url, ["language", "region", "name"])
    names = dict(base.region_names)
    for i, row in df.iterrows():
        language = row["language"].strip().lower()
        region = row["region"].strip().lower()
        name = row["name"].strip()
        if not (language and region and name):
            raise RuleTableError(f"row {i + 2}: language, region and name must be non-empty")
        names[(language, region)] = name
    LOGGER.info("Loaded region names from %s: rows=%s", file_or_url, len(df))
    return RuleCatalog(rules=dict(base.rules), region_names=names)


def load_intent_rules(file_or_url) -> tuple[IntentRule, ...]:
    """Priority is the order in which each (intent, anchored) group first appears."""
    df = _read_table(file_or_url, ["intent", "marker"])
    has_anchored = "anchored" in df.columns
    groups: dict[tuple[Intent, bool], list[str]] = {}
    for i, row in df.iterrows():
        name = row["intent"].strip().lower()
        marker = row["marker"].strip()
        try:
            intent = Intent(name)
        except ValueError:
            raise RuleTableError(f"row {i + 2}: unknown intent {name!r}") from None
        if intent is Intent.OTHER:
            raise RuleTableError(f"row {i + 2}: 'other' is the fallback and cannot have markers")
        if not marker:
            raise RuleTableError(f"row {i + 2}: marker must be non-empty")
        anchored = has_anchored and row["anchored"].strip().lower() in _TRUE
        groups.setdefault((intent, anchored), []).append(marker)

    rules = tuple(IntentRule(intent, tuple(markers), anchored) for (intent, anchored), markers in groups.items())
    LOGGER.info("Loaded intent rules from %s: rows=%s rules=%s", file_or_url, len(df), len(rules))
    return rules


def configured_catalog() -> RuleCatalog:
    catalog = DEFAULT_CATALOG
    if config.RULES_FILE:
        catalog = load_expansion_catalog(config.RULES_FILE, base=catalog)
    if config.REGIONS_FILE:
        catalog = load_region_names(config.REGIONS_FILE, base=catalog)
    return catalog


def configured_intent_rules() -> tuple[IntentRule, ...]:
    if config.INTENT_RULES_FILE:
        return load_intent_rules(config.INTENT_RULES_FILE)
    return DEFAULT_INTENT_RULES
