"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from typeahead.app import app
from typeahead.domain.entities import RealmEmoji, ReactionType, UnicodeEmoji


@pytest.fixture
def client():
    """Create a test client for the FastAPI app"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def thumbs_up():
    return UnicodeEmoji(emoji_name="thumbs_up", emoji_code="1f44d")


@pytest.fixture
def plus_one():
    """Alias of thumbs_up sharing its code"""
    return UnicodeEmoji(emoji_name="+1", emoji_code="1f44d")


@pytest.fixture
def sample_emojis(thumbs_up, plus_one):
    """Small emoji catalog mixing unicode and realm emojis"""
    return [
        UnicodeEmoji(emoji_name="thermometer", emoji_code="1f321"),
        UnicodeEmoji(emoji_name="thinking", emoji_code="1f914"),
        thumbs_up,
        plus_one,
        RealmEmoji(emoji_name="the_office"),
        UnicodeEmoji(emoji_name="octopus", emoji_code="1f419"),
        UnicodeEmoji(emoji_name="heart", emoji_code="2764"),
        RealmEmoji(emoji_name="zulip", reaction_type=ReactionType.ZULIP_EXTRA_EMOJI),
        UnicodeEmoji(emoji_name="smile", emoji_code="1f642"),
    ]
