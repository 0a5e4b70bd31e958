# query_intent
# Seed -> rule expansions + Google Autocomplete -> dedup -> intent labels

from .errors import InvalidSeedError, ProviderError, QueryIntentError, RuleTableError
from .models import CandidateQuery, ClassifiedQuery, Intent, Locale, NormalizedQuery, Source
from .pipeline import run, run_sync

__all__ = [
    "CandidateQuery",
    "ClassifiedQuery",
    "Intent",
    "InvalidSeedError",
    "Locale",
    "NormalizedQuery",
    "ProviderError",
    "QueryIntentError",
    "RuleTableError",
    "Source",
    "run",
    "run_sync",
]
