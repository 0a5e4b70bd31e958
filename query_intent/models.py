"""Records passed between the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Source(str, Enum):
    RULE_ENGINE = "rule-engine"
    EXTERNAL_SUGGESTION = "external-suggestion"


class Intent(str, Enum):
    INFORMATIONAL = "informational"
    COMMERCIAL = "commercial"
    NAVIGATIONAL = "navigational"
    COMPARISON = "comparison"
    QUESTION = "question"
    OTHER = "other"


class Locale(NamedTuple):
    language: str
    region: str

    @classmethod
    def of(cls, language: str, region: str) -> "Locale":
        return cls((language or "").strip().lower(), (region or "").strip().lower())


# Field order of exported rows; external formatting depends on it.
OUTPUT_FIELDS = ("query", "intent", "source", "seed", "language", "region")


@dataclass(frozen=True)
class CandidateQuery:
    query: str
    source: Source
    seed: str
    locale: Locale


@dataclass(frozen=True)
class NormalizedQuery(CandidateQuery):
    key: str

    def as_candidate(self) -> CandidateQuery:
        return CandidateQuery(query=self.query, source=self.source, seed=self.seed, locale=self.locale)


@dataclass(frozen=True)
class ClassifiedQuery(NormalizedQuery):
    intent: Intent

    def to_row(self) -> dict[str, str]:
        row = {
            "query": self.query,
            "intent": self.intent.value,
            "source": self.source.value,
            "seed": self.seed,
            "language": self.locale.language,
            "region": self.locale.region,
        }
        return {k: row[k] for k in OUTPUT_FIELDS}
