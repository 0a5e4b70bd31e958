# normalizer.py
# Dedup of the merged candidate stream. First occurrence of a key wins.

from __future__ import annotations

import unicodedata
from typing import Iterable

from .models import CandidateQuery, NormalizedQuery


def normalization_key(text: str) -> str:
    """Equality key: no combining marks, case-folded, single-spaced, trimmed.

    Combining marks cover Latin accents as well as Arabic tashkeel and the
    hamza carried by alef variants (أ/إ/آ all reduce to ا).
    """
    s = unicodedata.normalize("NFKD", text or "")
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = " ".join(s.casefold().split())
    return unicodedata.normalize("NFC", s)


def normalize_and_deduplicate(candidates: Iterable[CandidateQuery]) -> list[NormalizedQuery]:
    seen: set[str] = set()
    out: list[NormalizedQuery] = []
    for c in candidates:
        key = normalization_key(c.query)
        if key in seen:
            continue
        seen.add(key)
        out.append(NormalizedQuery(query=c.query, source=c.source, seed=c.seed, locale=c.locale, key=key))
    return out
