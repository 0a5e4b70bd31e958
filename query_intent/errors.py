from __future__ import annotations


class QueryIntentError(Exception):
    """Base error: a short machine code plus a human message."""

    code = "query_intent_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidSeedError(QueryIntentError, ValueError):
    code = "invalid_seed"


class ProviderError(QueryIntentError):
    code = "provider_error"


class RuleTableError(QueryIntentError, ValueError):
    code = "rule_table_error"
