"""
Domain entities for emoji typeahead.

An emoji is either a realm (custom) emoji or a unicode emoji. Only the
unicode variant carries an ``emoji_code``; code that needs it must narrow
with ``isinstance`` first.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union

from .exceptions import InvalidEmojiException


class ReactionType(str, Enum):
    """Emoji reaction types."""

    UNICODE_EMOJI = "unicode_emoji"
    REALM_EMOJI = "realm_emoji"
    ZULIP_EXTRA_EMOJI = "zulip_extra_emoji"


@dataclass(frozen=True)
class RealmEmoji:
    """
    Organization-specific emoji.

    Realm emojis override unicode emojis of the same name.
    """

    emoji_name: str
    reaction_type: ReactionType = ReactionType.REALM_EMOJI
    is_realm_emoji: Literal[True] = field(default=True, init=False)

    def __post_init__(self):
        if self.reaction_type == ReactionType.UNICODE_EMOJI:
            raise InvalidEmojiException("realm emoji cannot have unicode_emoji type")

    def to_dict(self) -> dict:
        return {
            "emoji_name": self.emoji_name,
            "reaction_type": self.reaction_type.value,
            "is_realm_emoji": True,
        }


@dataclass(frozen=True)
class UnicodeEmoji:
    """
    Standard unicode emoji.

    Attributes:
        emoji_name: Name used for matching (e.g. "thumbs_up")
        emoji_code: Hyphen-separated hex code points (e.g. "1f44d", "1f1fa-1f1f8")
    """

    emoji_name: str
    emoji_code: str
    reaction_type: Literal[ReactionType.UNICODE_EMOJI] = field(
        default=ReactionType.UNICODE_EMOJI, init=False
    )
    is_realm_emoji: Literal[False] = field(default=False, init=False)

    def to_dict(self) -> dict:
        return {
            "emoji_name": self.emoji_name,
            "emoji_code": self.emoji_code,
            "reaction_type": self.reaction_type.value,
            "is_realm_emoji": False,
        }


Emoji = Union[RealmEmoji, UnicodeEmoji]


def parse_emoji(record: dict) -> Emoji:
    """
    Build the emoji variant described by a wire mapping.

    Args:
        record: Mapping with ``emoji_name``, ``reaction_type`` and, for
            unicode emojis, ``emoji_code``

    Returns:
        RealmEmoji or UnicodeEmoji

    Raises:
        InvalidEmojiException: Unknown reaction type or missing fields
    """
    name = record.get("emoji_name")
    if not isinstance(name, str):
        raise InvalidEmojiException("missing emoji_name", record)

    try:
        reaction_type = ReactionType(record.get("reaction_type"))
    except ValueError:
        raise InvalidEmojiException(
            f"unknown reaction_type {record.get('reaction_type')!r}", record
        ) from None

    if reaction_type == ReactionType.UNICODE_EMOJI:
        code = record.get("emoji_code")
        if not isinstance(code, str) or not code:
            raise InvalidEmojiException("unicode emoji requires emoji_code", record)
        return UnicodeEmoji(emoji_name=name, emoji_code=code)

    return RealmEmoji(emoji_name=name, reaction_type=reaction_type)
