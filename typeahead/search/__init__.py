"""
Search module for typeahead suggestions.

Provides diacritic-insensitive matching, match-tier triage, and emoji ranking.
"""
from ..config import POPULAR_EMOJIS
from .emoji_ranker import (
    filter_emojis,
    prioritise_realm_emojis,
    rank_emojis,
    search_emojis,
    sort_emojis,
)
from .normalizer import (
    clean_query,
    clean_query_lowercase,
    normalize_diacritics,
    normalize_query,
    remove_diacritics,
)
from .string_matcher import (
    build_emoji_predicate,
    decode_code,
    get_emoji_matcher,
    matches,
    parse_unicode_emoji_code,
    query_matches_string,
)
from .triage import (
    WORD_BOUNDARY_CHARS,
    TriageResult,
    TriageSplit,
    search_strings,
    triage,
    triage_raw,
)

__all__ = [
    "POPULAR_EMOJIS",
    "WORD_BOUNDARY_CHARS",
    "TriageResult",
    "TriageSplit",
    "build_emoji_predicate",
    "clean_query",
    "clean_query_lowercase",
    "decode_code",
    "filter_emojis",
    "get_emoji_matcher",
    "matches",
    "normalize_diacritics",
    "normalize_query",
    "parse_unicode_emoji_code",
    "prioritise_realm_emojis",
    "query_matches_string",
    "rank_emojis",
    "remove_diacritics",
    "search_emojis",
    "search_strings",
    "sort_emojis",
    "triage",
    "triage_raw",
]
