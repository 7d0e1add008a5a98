"""
Typeahead router.

Ranks caller-supplied candidates for a query. The service holds no
candidate data; each request carries the list to rank.
"""

import logging
import time
from typing import Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field, model_validator

from ..config import get_settings
from ..domain.entities import parse_emoji
from ..domain.exceptions import TypeaheadException, ValidationException
from ..metrics import track_typeahead_query
from ..search.emoji_ranker import search_emojis
from ..search.string_matcher import parse_unicode_emoji_code
from ..search.triage import search_strings, triage, triage_raw

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/typeahead", tags=["Typeahead"])


class EmojiPayload(BaseModel):
    """Emoji record as sent by clients."""

    emoji_name: str = Field(description="Emoji name, e.g. thumbs_up")
    reaction_type: Literal["unicode_emoji", "realm_emoji", "zulip_extra_emoji"] = Field(
        description="Emoji variant"
    )
    emoji_code: Optional[str] = Field(None, description="Hex code points (unicode emojis only)")

    @model_validator(mode="after")
    def check_code(self):
        if self.reaction_type == "unicode_emoji" and not self.emoji_code:
            raise ValueError("unicode_emoji requires emoji_code")
        return self


class EmojiSearchRequest(BaseModel):
    query: str = Field(max_length=100, description="Search query")
    emojis: list[EmojiPayload] = Field(description="Candidate emojis")
    limit: Optional[int] = Field(None, ge=1, description="Maximum results")


class EmojiSearchResponse(BaseModel):
    query: str
    results: list[dict]
    total: int
    latency_ms: float


class StringSearchRequest(BaseModel):
    query: str = Field(max_length=100, description="Search query")
    items: list[str] = Field(description="Candidate strings, e.g. user names")
    split_char: str = Field(" ", description="Token separator")
    limit: Optional[int] = Field(None, ge=1, description="Maximum results")


class StringSearchResponse(BaseModel):
    query: str
    results: list[str]
    total: int
    latency_ms: float


class TriageRequest(BaseModel):
    query: str = Field(max_length=100, description="Search query")
    items: list[str] = Field(description="Candidate strings")


class TriageResponse(BaseModel):
    query: str
    exact_matches: list[str]
    begins_with_case_sensitive_matches: list[str]
    begins_with_case_insensitive_matches: list[str]
    word_boundary_matches: list[str]
    no_matches: list[str]
    matches: list[str]
    rest: list[str]


class DecodeRequest(BaseModel):
    code: str = Field(description="Hyphen-separated hex code points, e.g. 1f1fa-1f1f8")


class DecodeResponse(BaseModel):
    code: str
    text: str


def _effective_limit(limit: Optional[int]) -> int:
    max_results = get_settings().TYPEAHEAD_MAX_RESULTS
    return min(limit, max_results) if limit else max_results


@router.post("/emojis", response_model=EmojiSearchResponse, summary="Rank emojis")
async def rank_emoji_candidates(request: EmojiSearchRequest) -> EmojiSearchResponse:
    """
    Filter and rank candidate emojis for a query.

    Perfect name matches come first, then popular emojis, then realm
    emojis ahead of unicode emojis within each match tier.
    """
    start = time.time()
    try:
        emojis = [parse_emoji(payload.model_dump()) for payload in request.emojis]
        ranked = search_emojis(emojis, request.query, limit=_effective_limit(request.limit))
    except TypeaheadException:
        track_typeahead_query("emoji", False, time.time() - start)
        raise
    duration = time.time() - start
    track_typeahead_query("emoji", True, duration, len(ranked))

    logger.info(
        "Emoji query '%s' ranked %d of %d candidates in %.2fms",
        request.query,
        len(ranked),
        len(emojis),
        duration * 1000,
    )

    return EmojiSearchResponse(
        query=request.query,
        results=[emoji.to_dict() for emoji in ranked],
        total=len(ranked),
        latency_ms=duration * 1000,
    )


@router.post("/search", response_model=StringSearchResponse, summary="Search strings")
async def search_string_candidates(request: StringSearchRequest) -> StringSearchResponse:
    """Filter candidate strings by token prefix and order them by match tier."""
    if len(request.split_char) != 1:
        raise ValidationException("split_char", request.split_char, "must be one character")

    start = time.time()
    results = search_strings(
        request.query,
        request.items,
        split_char=request.split_char,
        limit=_effective_limit(request.limit),
    )
    duration = time.time() - start
    track_typeahead_query("string", True, duration, len(results))

    return StringSearchResponse(
        query=request.query,
        results=results,
        total=len(results),
        latency_ms=duration * 1000,
    )


@router.post("/triage", response_model=TriageResponse, summary="Triage strings")
async def triage_candidates(request: TriageRequest) -> TriageResponse:
    """Return every match tier for the candidates, in input order."""
    raw = triage_raw(request.query, request.items, lambda x: x)
    split = triage(request.query, request.items, lambda x: x)
    return TriageResponse(query=request.query, matches=split.matches, rest=split.rest, **raw.to_dict())


@router.post("/decode", response_model=DecodeResponse, summary="Decode emoji code")
async def decode_emoji_code(request: DecodeRequest) -> DecodeResponse:
    """Render a unicode emoji code as its glyph."""
    return DecodeResponse(code=request.code, text=parse_unicode_emoji_code(request.code))
