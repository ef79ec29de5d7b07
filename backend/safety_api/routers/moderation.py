"""
Moderation router exposing the screening engine.

Endpoints:
- POST /content: Classify free text (live preview, every keystroke)
- POST /messages/filter: Reduced result for the chat composer
- POST /profiles: Classify bio + services + rate text as one unit
- POST /messages/screen: Gate an outgoing message (422 when blocked)
- POST /profiles/screen: Gate a profile before publishing
- POST /reviews/screen: Gate a review body
- GET /patterns: List the active violation catalog
- GET /users/{user_id}/violations: Recent violation history for a user
"""

import logging

from fastapi import APIRouter, Depends, Request

from safety_api.core.rate_limit import limiter
from safety_api.models.moderation import (
    FilterMessageRequest,
    MessageFilterResult,
    ModerateContentRequest,
    ModerateProfileRequest,
    ModerationResult,
    PatternListResponse,
    ScreenMessageRequest,
    ScreenProfileRequest,
    ScreenReviewRequest,
    ScreenReviewResponse,
    UserViolationPattern,
)
from safety_api.screening import (
    DEFAULT_CATALOG,
    filter_message_content,
    moderate_content,
    moderate_profile_content,
)
from safety_api.services.moderation_service import ModerationService

logger = logging.getLogger(__name__)
router = APIRouter()


def get_moderation_service() -> ModerationService:
    return ModerationService()


@router.post("/content", response_model=ModerationResult)
@limiter.limit("120/minute")
async def classify_content(request: Request, body: ModerateContentRequest) -> ModerationResult:
    """Classify text without any side effects."""
    return moderate_content(body.text, body.context)


@router.post("/messages/filter", response_model=MessageFilterResult)
@limiter.limit("120/minute")
async def filter_message(request: Request, body: FilterMessageRequest) -> MessageFilterResult:
    """Chat composer preview: matched phrases and redacted text only."""
    return filter_message_content(body.text)


@router.post("/profiles", response_model=ModerationResult)
@limiter.limit("60/minute")
async def classify_profile(request: Request, body: ModerateProfileRequest) -> ModerationResult:
    """Classify profile fields together, without side effects."""
    return moderate_profile_content(body.bio, body.services, body.rate_text)


@router.post("/messages/screen", response_model=ModerationResult)
@limiter.limit("30/minute")
async def screen_message(
    request: Request,
    body: ScreenMessageRequest,
    moderation_service: ModerationService = Depends(get_moderation_service),
) -> ModerationResult:
    """Gate an outgoing message; store filtered_content from the response."""
    return moderation_service.screen_message(
        sender_id=body.sender_id,
        content=body.content,
        message_id=body.message_id,
    )


@router.post("/profiles/screen", response_model=ModerationResult)
@limiter.limit("10/minute")
async def screen_profile(
    request: Request,
    body: ScreenProfileRequest,
    moderation_service: ModerationService = Depends(get_moderation_service),
) -> ModerationResult:
    """Gate a profile before it goes live."""
    return moderation_service.screen_profile(
        user_id=body.user_id,
        bio=body.bio,
        services=body.services,
        rate_text=body.rate_text,
    )


@router.post("/reviews/screen", response_model=ScreenReviewResponse)
@limiter.limit("10/minute")
async def screen_review(
    request: Request,
    body: ScreenReviewRequest,
    moderation_service: ModerationService = Depends(get_moderation_service),
) -> ScreenReviewResponse:
    """Gate a review body for a booking."""
    result = moderation_service.screen_review(
        reviewer_id=body.reviewer_id,
        booking_id=body.booking_id,
        body=body.body,
    )
    return ScreenReviewResponse(accepted=True, result=result)


@router.get("/patterns", response_model=PatternListResponse)
async def list_patterns() -> PatternListResponse:
    """Every phrase the engine screens for, with its category and severity."""
    patterns = list(DEFAULT_CATALOG.patterns)
    return PatternListResponse(patterns=patterns, total=len(patterns))


@router.get("/users/{user_id}/violations", response_model=UserViolationPattern)
async def get_user_violations(
    user_id: str,
    moderation_service: ModerationService = Depends(get_moderation_service),
) -> UserViolationPattern:
    """Recent violation history and the recommended escalation."""
    return moderation_service.check_user_violation_pattern(user_id)
