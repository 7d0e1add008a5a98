"""
Triage of typeahead candidates into match-quality tiers.

Candidates are opaque; callers pass a projection returning the string to
compare. Tiers, from best to worst:

- entire string exact match (case-insensitive)
- prefix match with the query as typed
- prefix match case-insensitively
- case-insensitive match right after a word boundary
- no match
"""

import logging
import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from .normalizer import clean_query_lowercase, remove_diacritics
from .string_matcher import query_matches_string

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Space, underscore, slash and hyphen. Other punctuation such as "(" is
# not a boundary.
WORD_BOUNDARY_CHARS = " _/-"


@dataclass
class TriageResult(Generic[T]):
    """Five disjoint tiers; their concatenation is a permutation of the input."""

    exact_matches: List[T] = field(default_factory=list)
    begins_with_case_sensitive_matches: List[T] = field(default_factory=list)
    begins_with_case_insensitive_matches: List[T] = field(default_factory=list)
    word_boundary_matches: List[T] = field(default_factory=list)
    no_matches: List[T] = field(default_factory=list)

    def to_dict(self, serialize: Callable[[T], object] = lambda x: x) -> dict:
        return {
            "exact_matches": [serialize(x) for x in self.exact_matches],
            "begins_with_case_sensitive_matches": [
                serialize(x) for x in self.begins_with_case_sensitive_matches
            ],
            "begins_with_case_insensitive_matches": [
                serialize(x) for x in self.begins_with_case_insensitive_matches
            ],
            "word_boundary_matches": [serialize(x) for x in self.word_boundary_matches],
            "no_matches": [serialize(x) for x in self.no_matches],
        }


@dataclass
class TriageSplit(Generic[T]):
    """Matches in display order, followed by the non-matching rest."""

    matches: List[T] = field(default_factory=list)
    rest: List[T] = field(default_factory=list)


def _word_boundary_pattern(lower_query: str) -> "re.Pattern[str]":
    return re.compile(f"[{re.escape(WORD_BOUNDARY_CHARS)}]{re.escape(lower_query)}")


def triage_raw(
    query: str, objs: Sequence[T], get_item: Callable[[T], str]
) -> TriageResult[T]:
    """
    Split objs into match tiers, preserving input order within each tier.

    Args:
        query: Search query as typed
        objs: Candidates
        get_item: Projection returning the string to match against

    Returns:
        TriageResult with every candidate in exactly one tier
    """
    result: TriageResult[T] = TriageResult()
    query = query or ""
    lower_query = query.lower()
    word_boundary = _word_boundary_pattern(lower_query)

    for obj in objs:
        item = get_item(obj)
        lower_item = item.lower()

        if lower_item == lower_query:
            result.exact_matches.append(obj)
        elif item.startswith(query):
            result.begins_with_case_sensitive_matches.append(obj)
        elif lower_item.startswith(lower_query):
            result.begins_with_case_insensitive_matches.append(obj)
        elif word_boundary.search(lower_item):
            result.word_boundary_matches.append(obj)
        else:
            result.no_matches.append(obj)

    logger.debug(
        "Triaged %d items for %r: exact=%d cs=%d ci=%d boundary=%d none=%d",
        len(objs),
        query,
        len(result.exact_matches),
        len(result.begins_with_case_sensitive_matches),
        len(result.begins_with_case_insensitive_matches),
        len(result.word_boundary_matches),
        len(result.no_matches),
    )
    return result


def triage(
    query: str,
    objs: Sequence[T],
    get_item: Callable[[T], str],
    sorting_comparator: Optional[Callable[[T, T], int]] = None,
) -> TriageSplit[T]:
    """
    Order candidates by match tier.

    With a comparator, each tier is sorted with it. Case-sensitive and
    case-insensitive prefix matches are merged into one group before
    sorting, so the comparator may interleave them.
    """
    raw = triage_raw(query, objs, get_item)

    if sorting_comparator is not None:
        key = cmp_to_key(sorting_comparator)
        beginning_matches_sorted = sorted(
            raw.begins_with_case_sensitive_matches
            + raw.begins_with_case_insensitive_matches,
            key=key,
        )
        return TriageSplit(
            matches=[
                *sorted(raw.exact_matches, key=key),
                *beginning_matches_sorted,
                *sorted(raw.word_boundary_matches, key=key),
            ],
            rest=sorted(raw.no_matches, key=key),
        )

    return TriageSplit(
        matches=[
            *raw.exact_matches,
            *raw.begins_with_case_sensitive_matches,
            *raw.begins_with_case_insensitive_matches,
            *raw.word_boundary_matches,
        ],
        rest=raw.no_matches,
    )


def search_strings(
    query: str,
    items: Sequence[str],
    split_char: str = " ",
    limit: Optional[int] = None,
) -> List[str]:
    """
    Filter plain strings with the typeahead matcher and order them by tier.

    Examples:
        search_strings("ham", ["King Hamlet", "Hamlet", "Cordelia"])
            -> ["Hamlet", "King Hamlet"]
    """
    cleaned = clean_query_lowercase(query)
    matched = [item for item in items if query_matches_string(cleaned, item, split_char)]
    split = triage(cleaned, matched, remove_diacritics)
    results = split.matches + split.rest
    if limit is not None:
        results = results[:limit]
    return results
