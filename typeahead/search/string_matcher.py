"""
String and emoji literal matching for typeahead.

Decides whether an already-cleaned query matches a source string, and
builds predicates that match emojis by name or by their rendered glyph.
"""

from typing import Callable

from ..domain.entities import Emoji, UnicodeEmoji
from ..domain.exceptions import InvalidCodeFormatException, ValidationException
from .normalizer import clean_query_lowercase, remove_diacritics

MAX_CODE_POINT = 0x10FFFF
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def query_matches_string(query: str, source_str: str, split_char: str) -> bool:
    """
    Check whether a query matches a source text.

    A single-token query matches anywhere in the source ("ing" matches
    "King Hamlet"). A multi-token query requires every query token to be
    a prefix of some source token, in any order: for "ab cd ef" the query
    may be "ab c", "a c e", "ef cd", but not "b cd" or "efg".

    Args:
        query: Cleaned, lower-cased search query
        source_str: Text to match in, e.g. a user's name
        split_char: Token separator for this syntax (e.g. " ")

    Returns:
        True if the query matches

    Raises:
        ValidationException: split_char is not exactly one character
    """
    if len(split_char) != 1:
        raise ValidationException("split_char", split_char, "must be one character")

    source_str = remove_diacritics(source_str.lower())

    if split_char not in query:
        return query in source_str

    queries = query.split(split_char)
    source_tokens = source_str.split(split_char)

    return all(
        any(source.startswith(token) for source in source_tokens) for token in queries
    )


matches = query_matches_string


def parse_unicode_emoji_code(code: str) -> str:
    """
    Decode a hyphen-separated sequence of hex code points.

    Examples:
        "1f44d" -> "\U0001f44d"
        "1f1fa-1f1f8" -> "\U0001f1fa\U0001f1f8"

    Raises:
        InvalidCodeFormatException: A segment is empty, not hexadecimal,
            or outside the unicode code point range
    """
    chars = []
    for segment in code.split("-"):
        if not segment or not HEX_DIGITS.issuperset(segment):
            raise InvalidCodeFormatException(code, segment)
        code_point = int(segment, 16)
        if code_point > MAX_CODE_POINT:
            raise InvalidCodeFormatException(code, segment)
        chars.append(chr(code_point))
    return "".join(chars)


decode_code = parse_unicode_emoji_code


def get_emoji_matcher(query: str) -> Callable[[Emoji], bool]:
    """
    Build a predicate matching emojis against a raw query.

    Spaces in the query become underscores, so "thumbs u" matches
    "thumbs_up". A unicode emoji also matches when the query is its
    literal glyph.
    """
    query = clean_query_lowercase(query.replace(" ", "_"))

    def matcher(emoji: Emoji) -> bool:
        matches_emoji_literal = (
            isinstance(emoji, UnicodeEmoji)
            and parse_unicode_emoji_code(emoji.emoji_code) == query
        )
        return matches_emoji_literal or query_matches_string(query, emoji.emoji_name, "_")

    return matcher


build_emoji_predicate = get_emoji_matcher
