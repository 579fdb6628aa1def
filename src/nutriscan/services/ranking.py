"""Lexical relevance ranking for food search results."""

import re
from dataclasses import replace

from nutriscan.domain.nutrition import NutrientRecord, NutrientSource

EXACT_MATCH = 1000
PREFIX_MATCH = 500
FIRST_TOKEN_MATCH = 400
SUBSTRING_MATCH = 300
SHORT_NAME_BASE = 50
PRIMARY_SOURCE_BONUS = 50

_TOKEN_SPLIT = re.compile(r"[\s,]")


def score(record: NutrientRecord, query: str) -> int:
    """Additive relevance score of a record for a query; higher wins."""
    term = query.strip().lower()
    single_word = len(term.split()) == 1
    name = record.name.lower()

    total = 0
    if name == term:
        total += EXACT_MATCH
    if name.startswith(term):
        total += PREFIX_MATCH
    if single_word and _TOKEN_SPLIT.split(name)[0] == term:
        total += FIRST_TOKEN_MATCH
    if term in name:
        total += SUBSTRING_MATCH
    if single_word:
        total += max(0, SHORT_NAME_BASE - len(name))
    if record.source is NutrientSource.PRIMARY:
        total += PRIMARY_SOURCE_BONUS
    return total


def rank(results: list[NutrientRecord], query: str) -> list[NutrientRecord]:
    """Return results with scores attached, best first, ties in input order."""
    scored = [replace(record, search_score=score(record, query)) for record in results]
    return sorted(scored, key=lambda record: record.search_score or 0, reverse=True)
