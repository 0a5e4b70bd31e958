# suggest_provider.py
# Google Autocomplete (unofficial endpoint). One request per call, no retries.

from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests

from . import config
from .errors import ProviderError

LOGGER = logging.getLogger(__name__)


def _params(seed: str, language: str | None, region: str | None) -> dict[str, str]:
    params = {"client": config.SUGGEST_CLIENT, "q": seed, "ie": "utf-8", "oe": "utf-8"}
    if language:
        params["hl"] = language.lower()
    if region:
        params["gl"] = region.upper()
    return params


def parse_suggestions(data: Any) -> list[str]:
    """Pull the suggestion list out of a `[query, [s1, s2, ...], ...]` payload."""
    if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
        raise ProviderError(f"unexpected suggest payload shape: {type(data).__name__}", code="malformed_response")
    return [s.strip() for s in data[1] if isinstance(s, str) and s.strip()]


def google_suggest(seed: str, language: str | None = None, region: str | None = None) -> list[str]:
    try:
        r = requests.get(
            config.SUGGEST_URL,
            params=_params(seed, language, region),
            headers=config.HEADERS,
            timeout=config.SUGGEST_TIMEOUT_SECONDS,
        )
        r.raise_for_status()
    except requests.Timeout as exc:
        raise ProviderError(f"suggest request timed out: {exc}", code="timeout") from exc
    except requests.RequestException as exc:
        raise ProviderError(f"suggest request failed: {exc}", code="network_error") from exc

    try:
        data = r.json()
    except ValueError as exc:
        raise ProviderError(f"suggest response is not JSON: {exc}", code="malformed_response") from exc

    suggestions = parse_suggestions(data)
    LOGGER.debug("Google suggest q=%r hl=%s gl=%s returned=%s", seed, language, region, len(suggestions))
    return suggestions


async def fetch_google_suggestions(seed: str, language: str | None = None, region: str | None = None) -> list[str]:
    return await asyncio.to_thread(google_suggest, seed, language, region)
