"""
Domain layer for typeahead.

Framework-agnostic emoji entities and domain exceptions.
"""
from .entities import Emoji, ReactionType, RealmEmoji, UnicodeEmoji, parse_emoji
from .exceptions import (
    InvalidCodeFormatException,
    InvalidEmojiException,
    TypeaheadException,
    ValidationException,
)

__all__ = [
    "Emoji",
    "ReactionType",
    "RealmEmoji",
    "UnicodeEmoji",
    "parse_emoji",
    "TypeaheadException",
    "InvalidCodeFormatException",
    "InvalidEmojiException",
    "ValidationException",
]
