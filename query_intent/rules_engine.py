# rules_engine.py
# Rule-based seed expansion (question words, prepositions, vs, buying terms, A-Z soup)

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .models import CandidateQuery, Locale, Source

FALLBACK_LANGUAGE = "en"

# Catalog order; each kind is applied in this order.
RULE_KINDS = ("question", "preposition", "comparison", "commercial", "location", "alphabet")

ALPHABETS = {
    "en": "abcdefghijklmnopqrstuvwxyz",
    "ar": "ابتثجحخدذرزسشصضطظعغفقكلمنهوي",
}


@dataclass(frozen=True)
class ExpansionRule:
    kind: str
    pattern: str  # uses {seed} and optionally {region}

    def apply(self, seed: str, region_name: str | None = None) -> str | None:
        if "{region}" in self.pattern and not region_name:
            return None
        phrase = self.pattern
        if region_name:
            phrase = phrase.replace("{region}", region_name)
        phrase = phrase.replace("{seed}", seed)
        phrase = re.sub(r"\s+", " ", phrase).strip()
        return phrase or None


def _rules(kind: str, patterns: list[str]) -> list[ExpansionRule]:
    return [ExpansionRule(kind, p) for p in patterns]


def alphabet_rules(letters: str) -> list[ExpansionRule]:
    return [ExpansionRule("alphabet", f"{{seed}} {ch}") for ch in letters if not ch.isspace()]


EN_RULES = (
    _rules("question", ["how to {seed}", "what is {seed}", "why {seed}", "where {seed}", "when {seed}",
                        "who {seed}", "which {seed}", "can {seed}", "is {seed}", "are {seed}"])
    + _rules("preposition", ["{seed} for", "{seed} with", "{seed} without", "{seed} near", "{seed} to", "{seed} in"])
    + _rules("comparison", ["{seed} vs", "{seed} versus", "{seed} or", "{seed} alternative", "{seed} compared to"])
    + _rules("commercial", ["buy {seed}", "best {seed}", "cheap {seed}", "{seed} price", "{seed} deals",
                            "{seed} review", "{seed} for sale"])
    + _rules("location", ["{seed} in {region}", "{seed} near me"])
    + alphabet_rules(ALPHABETS["en"])
)

AR_RULES = (
    _rules("question", ["ازاي {seed}", "ايه هو {seed}", "ليه {seed}", "امتى {seed}", "فين {seed}",
                        "مين {seed}", "هل {seed}", "كيف {seed}", "ما هو {seed}", "لماذا {seed}"])
    + _rules("preposition", ["{seed} في", "{seed} من", "{seed} ل", "{seed} مع", "{seed} بدون", "{seed} على"])
    + _rules("comparison", ["{seed} ولا", "{seed} او", "{seed} vs", "مقارنة {seed}", "الفرق بين {seed}"])
    + _rules("commercial", ["سعر {seed}", "اسعار {seed}", "{seed} بكام", "شراء {seed}", "افضل {seed}",
                            "ارخص {seed}", "عروض {seed}", "{seed} اونلاين"])
    + _rules("location", ["{seed} في {region}", "{seed} قريب مني"])
    + alphabet_rules(ALPHABETS["ar"])
)

REGION_NAMES = {
    ("ar", "eg"): "مصر",
    ("ar", "sa"): "السعودية",
    ("ar", "ae"): "الامارات",
    ("ar", "kw"): "الكويت",
    ("ar", "jo"): "الاردن",
    ("ar", "ma"): "المغرب",
    ("en", "eg"): "egypt",
    ("en", "us"): "usa",
    ("en", "uk"): "uk",
    ("en", "gb"): "uk",
    ("en", "ca"): "canada",
    ("en", "au"): "australia",
    ("en", "in"): "india",
    ("en", "ae"): "dubai",
    ("en", "sa"): "saudi arabia",
}


@dataclass(frozen=True)
class RuleCatalog:
    rules: dict[str, tuple[ExpansionRule, ...]]
    region_names: dict[tuple[str, str], str] = field(default_factory=dict)

    def rules_for(self, language: str) -> tuple[ExpansionRule, ...]:
        if language in self.rules:
            return self.rules[language]
        return self.rules.get(FALLBACK_LANGUAGE, ())

    def region_name(self, language: str, region: str) -> str | None:
        return self.region_names.get((language, region))

    @property
    def languages(self) -> list[str]:
        return sorted(self.rules)

    @property
    def regions(self) -> list[str]:
        return sorted({r for _, r in self.region_names})


DEFAULT_CATALOG = RuleCatalog(
    rules={"en": tuple(EN_RULES), "ar": tuple(AR_RULES)},
    region_names=dict(REGION_NAMES),
)


def generate_queries(seed: str, language: str, region: str, catalog: RuleCatalog | None = None) -> list[CandidateQuery]:
    seed = (seed or "").strip()
    if not seed:
        return []
    catalog = catalog or DEFAULT_CATALOG
    locale = Locale.of(language, region)
    region_name = catalog.region_name(locale.language, locale.region)

    out = []
    for rule in catalog.rules_for(locale.language):
        phrase = rule.apply(seed, region_name)
        if phrase:
            out.append(CandidateQuery(query=phrase, source=Source.RULE_ENGINE, seed=seed, locale=locale))
    return out
