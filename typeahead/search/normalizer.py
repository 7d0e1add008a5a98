"""
Query and source text normalization.

Strips diacritics so accented characters match their unaccented base
letters, and cleans up characters that input widgets emit in place of
plain spaces.
"""

import unicodedata

NO_BREAK_SPACE = "\u00a0"


def remove_diacritics(s: str) -> str:
    """
    Remove combining marks after compatibility decomposition.

    Examples:
        "Éclair" -> "Eclair"
        "naïve" -> "naive"
    """
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


normalize_diacritics = remove_diacritics


def clean_query(query: str) -> str:
    query = remove_diacritics(query)
    # Content-editable widgets can end a typed "abc " with U+00A0 instead of
    # a regular space.
    return query.replace(NO_BREAK_SPACE, " ")


def clean_query_lowercase(query: str) -> str:
    """Lower-case a query, then strip diacritics and no-break spaces."""
    # Compatibility characters such as "\u210c" decompose to capitals, so
    # lower-case again after decomposition.
    return clean_query(query.lower()).lower()


normalize_query = clean_query_lowercase
