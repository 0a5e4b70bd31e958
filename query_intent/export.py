# export.py
# Caller-side helpers: result tabs, copy-as-text, CSV

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .models import OUTPUT_FIELDS, ClassifiedQuery, Intent, Source

EXPORT_COLUMNS = ["query", "intent", "source"]

TABS = ["all"] + [i.value for i in Intent] + [s.value for s in Source]


def filter_results(results: Iterable[ClassifiedQuery], tab: str = "all") -> list[ClassifiedQuery]:
    if tab == "all":
        return list(results)
    return [r for r in results if r.intent.value == tab or r.source.value == tab]


def to_dataframe(results: Iterable[ClassifiedQuery]) -> pd.DataFrame:
    return pd.DataFrame([r.to_row() for r in results], columns=list(OUTPUT_FIELDS))


def to_csv(results: Iterable[ClassifiedQuery]) -> str:
    return to_dataframe(results)[EXPORT_COLUMNS].to_csv(index=False)


def to_text(results: Iterable[ClassifiedQuery]) -> str:
    return "\n".join(r.query for r in results)
