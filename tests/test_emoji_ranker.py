"""
Tests for emoji ranking.

Covers perfect-match precedence, popular emojis, realm emoji priority
and de-duplication of unicode emojis.
"""

from typeahead.config import POPULAR_EMOJIS, Settings
from typeahead.domain.entities import RealmEmoji, UnicodeEmoji
from typeahead.search.emoji_ranker import (
    filter_emojis,
    prioritise_realm_emojis,
    rank_emojis,
    search_emojis,
    sort_emojis,
)


def names(emojis):
    return [emoji.emoji_name for emoji in emojis]


class TestSortEmojis:
    """Test the full ranking policy."""

    def test_full_ordering(self, sample_emojis):
        """Test popular, then realm-first matches, then realm-first rest."""
        result = sort_emojis(sample_emojis, "th")

        assert names(result) == [
            "thumbs_up",
            "the_office",
            "thermometer",
            "thinking",
            "zulip",
            "octopus",
            "heart",
            "smile",
        ]

    def test_perfect_match_first(self, sample_emojis):
        """Test an exact name match precedes everything else."""
        result = sort_emojis(sample_emojis, "thinking")
        assert result[0].emoji_name == "thinking"

    def test_perfect_match_beats_popular(self):
        """Test perfect matches rank above popular emojis."""
        emojis = [
            UnicodeEmoji(emoji_name="thumbs_up", emoji_code="1f44d"),
            UnicodeEmoji(emoji_name="thumbs", emoji_code="1f44e"),
        ]
        assert names(sort_emojis(emojis, "thumbs")) == ["thumbs", "thumbs_up"]

    def test_perfect_match_beats_realm(self):
        """Test a unicode perfect match ranks above realm emojis."""
        emojis = [
            RealmEmoji(emoji_name="tada_custom"),
            UnicodeEmoji(emoji_name="tada", emoji_code="1f389"),
        ]
        assert names(sort_emojis(emojis, "tada")) == ["tada", "tada_custom"]

    def test_query_spaces_and_case(self, sample_emojis):
        """Test query is lower-cased with spaces turned into underscores."""
        result = sort_emojis(sample_emojis, "Thumbs Up")
        assert result[0].emoji_name == "thumbs_up"

    def test_popular_requires_decent_match(self, sample_emojis):
        """Test popular emojis only jump ahead when a name piece starts with the query."""
        result = sort_emojis(sample_emojis, "up")
        # "up" starts a piece of thumbs_up, so it leads.
        assert result[0].emoji_name == "thumbs_up"

        result = sort_emojis(sample_emojis, "mbs")
        # Substring only: no popular boost, no triage match.
        assert names(result)[:2] == ["the_office", "zulip"]

    def test_realm_emojis_lead_each_tier(self):
        """Test realm emojis precede unicode emojis within a tier."""
        emojis = [
            UnicodeEmoji(emoji_name="cat", emoji_code="1f408"),
            RealmEmoji(emoji_name="catjam"),
            UnicodeEmoji(emoji_name="dog", emoji_code="1f415"),
            RealmEmoji(emoji_name="doge"),
        ]
        assert names(sort_emojis(emojis, "ca")) == ["catjam", "cat", "doge", "dog"]

    def test_duplicate_code_first_wins(self):
        """Test the first emoji for a code survives, others are dropped."""
        emojis = [
            UnicodeEmoji(emoji_name="+1", emoji_code="1f44d"),
            UnicodeEmoji(emoji_name="thumbs_up", emoji_code="1f44d"),
        ]
        assert names(sort_emojis(emojis, "thumbs")) == ["thumbs_up"]
        assert names(sort_emojis(emojis, "+")) == ["+1"]

    def test_realm_emoji_shadows_unicode(self):
        """Test a realm emoji hides the unicode emoji of the same name."""
        emojis = [
            UnicodeEmoji(emoji_name="octopus", emoji_code="1f419"),
            RealmEmoji(emoji_name="octopus"),
        ]
        result = sort_emojis(emojis, "oct")

        assert len(result) == 1
        assert isinstance(result[0], RealmEmoji)

    def test_realm_emoji_shadows_unicode_everywhere(self):
        """Test shadowing applies even when the unicode emoji ranks first."""
        emojis = [
            UnicodeEmoji(emoji_name="smile", emoji_code="1f642"),
            UnicodeEmoji(emoji_name="grin", emoji_code="1f601"),
            RealmEmoji(emoji_name="smile"),
        ]
        result = sort_emojis(emojis, "smile")
        assert result == [RealmEmoji(emoji_name="smile"), emojis[1]]

    def test_realm_emojis_never_deduplicated(self):
        """Test realm emojis with equal names are all kept."""
        emojis = [RealmEmoji(emoji_name="party"), RealmEmoji(emoji_name="party")]
        assert len(sort_emojis(emojis, "pa")) == 2

    def test_custom_popular_codes(self):
        """Test explicit popular codes replace the configured ones."""
        emojis = [
            UnicodeEmoji(emoji_name="hammer", emoji_code="1f528"),
            UnicodeEmoji(emoji_name="heart", emoji_code="2764"),
        ]
        assert names(sort_emojis(emojis, "h")) == ["heart", "hammer"]
        assert names(sort_emojis(emojis, "h", popular_codes=())) == ["hammer", "heart"]

    def test_configured_popular_codes(self, monkeypatch):
        """Test popular codes come from settings by default."""
        monkeypatch.setattr(
            "typeahead.search.emoji_ranker.get_settings",
            lambda: Settings(TYPEAHEAD_POPULAR_EMOJIS=("1f528",)),
        )
        emojis = [
            UnicodeEmoji(emoji_name="heart", emoji_code="2764"),
            UnicodeEmoji(emoji_name="hammer", emoji_code="1f528"),
        ]
        assert names(sort_emojis(emojis, "h")) == ["hammer", "heart"]

    def test_empty_input(self):
        """Test no candidates."""
        assert sort_emojis([], "smile") == []

    def test_rank_emojis_alias(self):
        """Test rank_emojis is sort_emojis."""
        assert rank_emojis is sort_emojis

    def test_popular_constant(self):
        """Test curated popular codes."""
        assert POPULAR_EMOJIS == ("1f44d", "1f389", "1f642", "2764", "1f6e0", "1f419")


class TestPrioritiseRealmEmojis:
    """Test stable realm-first partition."""

    def test_stable(self):
        """Test relative order is kept in both groups."""
        a = UnicodeEmoji(emoji_name="a", emoji_code="61")
        b = RealmEmoji(emoji_name="b")
        c = UnicodeEmoji(emoji_name="c", emoji_code="63")
        d = RealmEmoji(emoji_name="d")
        assert prioritise_realm_emojis([a, b, c, d]) == [b, d, a, c]


class TestSearchEmojis:
    """Test filtering plus ranking."""

    def test_filter(self, sample_emojis):
        """Test only matching emojis survive the filter."""
        assert names(filter_emojis(sample_emojis, "th")) == [
            "thermometer",
            "thinking",
            "thumbs_up",
            "the_office",
        ]

    def test_search(self, sample_emojis):
        """Test filtered emojis are ranked."""
        assert names(search_emojis(sample_emojis, "th")) == [
            "thumbs_up",
            "the_office",
            "thermometer",
            "thinking",
        ]

    def test_limit(self, sample_emojis):
        """Test limit truncates after ranking."""
        assert names(search_emojis(sample_emojis, "th", limit=2)) == ["thumbs_up", "the_office"]

    def test_literal_glyph(self, sample_emojis):
        """Test searching by glyph returns one emoji per code."""
        assert names(search_emojis(sample_emojis, "\U0001f44d")) == ["thumbs_up"]
