"""
Emoji ranking for typeahead and the emoji picker.

Layers emoji-specific precedence on top of generic triage:

1. Perfect name matches
2. Popular emojis whose name has a piece starting with the query
3. Triage matches, realm emojis first
4. Everything else, realm emojis first

Unicode emojis sharing a code with an earlier result, or shadowed by a
realm emoji of the same name, are dropped.
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from ..config import get_settings
from ..domain.entities import Emoji, UnicodeEmoji
from .string_matcher import get_emoji_matcher
from .triage import triage

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Emoji)


def _partition(
    items: Iterable[E], predicate: Callable[[E], bool]
) -> tuple[List[E], List[E]]:
    """Stable split into (accepted, rejected)."""
    accepted: List[E] = []
    rejected: List[E] = []
    for item in items:
        (accepted if predicate(item) else rejected).append(item)
    return accepted, rejected


def prioritise_realm_emojis(emojis: Sequence[E]) -> List[E]:
    realm, unicode = _partition(emojis, lambda emoji: emoji.is_realm_emoji)
    return realm + unicode


def sort_emojis(
    objs: Sequence[E], query: str, popular_codes: Optional[Iterable[str]] = None
) -> List[E]:
    """
    Rank emojis for a query.

    Args:
        objs: Candidate emojis, usually already filtered by get_emoji_matcher
        query: Raw query; spaces are treated as underscores
        popular_codes: Codes given precedence; defaults to the configured
            popular emojis

    Returns:
        Ranked, de-duplicated emojis
    """
    query = query.replace(" ", "_").lower()

    if popular_codes is None:
        popular_codes = get_settings().TYPEAHEAD_POPULAR_EMOJIS
    popular_set = frozenset(popular_codes)

    def decent_match(name: str) -> bool:
        return any(piece.startswith(query) for piece in name.lower().split("_"))

    def is_popular(emoji: Emoji) -> bool:
        return (
            isinstance(emoji, UnicodeEmoji)
            and emoji.emoji_code in popular_set
            and decent_match(emoji.emoji_name)
        )

    realm_emoji_names = {obj.emoji_name for obj in objs if obj.is_realm_emoji}

    perfect_matches, without_perfect_matches = _partition(
        objs, lambda obj: obj.emoji_name == query
    )
    popular_matches, others = _partition(without_perfect_matches, is_popular)

    triage_results = triage(query, others, lambda emoji: emoji.emoji_name)

    candidates = [
        *perfect_matches,
        *popular_matches,
        *prioritise_realm_emojis(triage_results.matches),
        *prioritise_realm_emojis(triage_results.rest),
    ]

    # Drop unicode emojis with a code already shown under another name, and
    # unicode emojis overridden by a realm emoji of the same name.
    seen_codes = set()
    results: List[E] = []
    for emoji in candidates:
        if not isinstance(emoji, UnicodeEmoji):
            results.append(emoji)
        elif emoji.emoji_code not in seen_codes and emoji.emoji_name not in realm_emoji_names:
            seen_codes.add(emoji.emoji_code)
            results.append(emoji)

    logger.debug(
        "Ranked %d emojis for %r: perfect=%d popular=%d dropped=%d",
        len(objs),
        query,
        len(perfect_matches),
        len(popular_matches),
        len(candidates) - len(results),
    )
    return results


rank_emojis = sort_emojis


def filter_emojis(objs: Iterable[E], query: str) -> List[E]:
    """Keep emojis whose name or glyph matches the query."""
    matcher = get_emoji_matcher(query)
    return [emoji for emoji in objs if matcher(emoji)]


def search_emojis(
    objs: Sequence[E],
    query: str,
    limit: Optional[int] = None,
    popular_codes: Optional[Iterable[str]] = None,
) -> List[E]:
    """
    Filter and rank emojis for a typeahead query.

    Examples:
        search_emojis(all_emojis, "thumbs u") -> [thumbs_up, ...]
    """
    results = sort_emojis(filter_emojis(objs, query), query, popular_codes)
    if limit is not None:
        results = results[:limit]
    return results
