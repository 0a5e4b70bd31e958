"""Pipeline entry point: seed -> expansions + suggestions -> dedup -> intents."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Awaitable, Callable, Iterable, Sequence

from . import config
from .errors import InvalidSeedError, ProviderError
from .intent_classifier import IntentRule, classify_intents
from .models import CandidateQuery, ClassifiedQuery, Locale, Source
from .normalizer import normalize_and_deduplicate
from .rules_engine import RuleCatalog, generate_queries
from .suggest_provider import fetch_google_suggestions

LOGGER = logging.getLogger(__name__)

Expander = Callable[[str, str, str], Sequence[CandidateQuery]]
Provider = Callable[[str], Awaitable[Sequence[str]]]


def validate_seed(seed: str) -> str:
    cleaned = (seed or "").strip()
    if not cleaned:
        raise InvalidSeedError("seed is empty")
    return cleaned


async def _suggestions_or_empty(provider: Provider, seed: str) -> list[str]:
    try:
        return list(await provider(seed))
    except ProviderError as exc:
        LOGGER.warning("Suggestion provider failed for seed=%r, continuing with rule expansions only: %s", seed, exc)
        return []


async def run(
    seed: str,
    language: str = config.DEFAULT_LANGUAGE,
    region: str = config.DEFAULT_REGION,
    *,
    catalog: RuleCatalog | None = None,
    intent_rules: Iterable[IntentRule] | None = None,
    expander: Expander | None = None,
    provider: Provider | None = None,
) -> list[ClassifiedQuery]:
    """Run one keyword-research pass for `seed`.

    The expander and the suggestion provider run concurrently, but their
    outputs are always merged expander-first, so on duplicate queries the
    rule-engine record is the one kept. A provider failure only costs the
    suggestions; an empty seed raises InvalidSeedError before anything runs.
    """
    seed = validate_seed(seed)
    locale = Locale.of(language, region)
    expander = expander or functools.partial(generate_queries, catalog=catalog)
    provider = provider or functools.partial(fetch_google_suggestions, language=locale.language, region=locale.region)

    expanded, suggestions = await asyncio.gather(
        asyncio.to_thread(expander, seed, locale.language, locale.region),
        _suggestions_or_empty(provider, seed),
    )

    candidates = list(expanded) + [
        CandidateQuery(query=s, source=Source.EXTERNAL_SUGGESTION, seed=seed, locale=locale)
        for s in suggestions
    ]
    normalized = normalize_and_deduplicate(candidates)
    results = classify_intents(normalized, intent_rules)

    LOGGER.info(
        "Generated queries for seed=%r locale=%s-%s: expanded=%s suggested=%s unique=%s",
        seed,
        locale.language,
        locale.region,
        len(expanded),
        len(suggestions),
        len(results),
    )
    return results


def run_sync(seed: str, language: str = config.DEFAULT_LANGUAGE, region: str = config.DEFAULT_REGION, **kwargs) -> list[ClassifiedQuery]:
    return asyncio.run(run(seed, language, region, **kwargs))
