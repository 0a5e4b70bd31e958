# intent_classifier.py
# Lexical intent labels. Rules are tried in order; the first match wins.

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from .models import ClassifiedQuery, Intent, NormalizedQuery
from .normalizer import normalization_key


@dataclass(frozen=True)
class IntentRule:
    intent: Intent
    markers: tuple[str, ...]
    anchored: bool = False  # only match at the start of the query

    def matches(self, key: str) -> bool:
        return any(_marker_regex(m, self.anchored).search(key) for m in self.markers if m.strip())


@lru_cache(maxsize=4096)
def _marker_regex(marker: str, anchored: bool) -> re.Pattern:
    m = normalization_key(marker)
    # word boundaries only where the marker edge is a word character ("?", ".com")
    left = r"(?<!\w)" if re.match(r"\w", m) else ""
    right = r"(?!\w)" if re.search(r"\w$", m) else ""
    return re.compile(("^" if anchored else "") + left + re.escape(m) + right)


COMPARISON_MARKERS = (
    "vs", "vs.", "versus", "or", "compared to", "compare", "comparison", "difference between", "better than",
    "ولا", "او", "مقارنة", "مقارنه", "الفرق بين", "افضل من", "احسن من",
)
COMMERCIAL_MARKERS = (
    "buy", "price", "prices", "cost", "cheap", "cheapest", "best", "top", "deal", "deals", "discount",
    "coupon", "for sale", "order", "review", "reviews", "shipping",
    "سعر", "اسعار", "بكام", "شراء", "اشتري", "ارخص", "رخيص", "افضل", "احسن", "عرض", "عروض", "خصم",
    "تقسيط", "اونلاين",
)
QUESTION_WORDS = (
    "how", "what", "why", "when", "where", "who", "which", "can", "does", "do", "is", "are", "should", "will",
    "ازاي", "ايه", "ليه", "امتى", "فين", "مين", "هل", "كيف", "ما", "ماذا", "لماذا", "متى", "اين", "كم",
)
QUESTION_PUNCTUATION = ("?", "؟")
NAVIGATIONAL_MARKERS = (
    "near me", "login", "log in", "sign in", "official site", "website", "app", "download", ".com",
    "youtube", "facebook", "instagram", "tiktok", "twitter", "amazon", "wikipedia", "google", "netflix",
    "jumia", "noon", "souq", "udemy", "coursera",
    "قريب مني", "جنبي", "موقع", "تسجيل دخول", "تحميل", "تطبيق", "يوتيوب", "فيسبوك", "انستجرام",
    "جوميا", "نون", "امازون",
)

# Priority order: comparison > commercial > question > navigational.
# Anything else with a word character is informational; the rest is other.
DEFAULT_INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(Intent.COMPARISON, COMPARISON_MARKERS),
    IntentRule(Intent.COMMERCIAL, COMMERCIAL_MARKERS),
    IntentRule(Intent.QUESTION, QUESTION_WORDS, anchored=True),
    IntentRule(Intent.QUESTION, QUESTION_PUNCTUATION),
    IntentRule(Intent.NAVIGATIONAL, NAVIGATIONAL_MARKERS),
)

_WORD = re.compile(r"\w")


def classify_intent(text: str, rules: Iterable[IntentRule] | None = None) -> Intent:
    key = normalization_key(text)
    for rule in DEFAULT_INTENT_RULES if rules is None else rules:
        if rule.matches(key):
            return rule.intent
    if _WORD.search(key):
        return Intent.INFORMATIONAL
    return Intent.OTHER


def classify_intents(queries: Iterable[NormalizedQuery], rules: Iterable[IntentRule] | None = None) -> list[ClassifiedQuery]:
    rules = DEFAULT_INTENT_RULES if rules is None else tuple(rules)
    return [
        ClassifiedQuery(
            query=q.query,
            source=q.source,
            seed=q.seed,
            locale=q.locale,
            key=q.key,
            intent=classify_intent(q.query, rules),
        )
        for q in queries
    ]
