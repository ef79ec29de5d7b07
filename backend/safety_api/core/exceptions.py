"""
Global exception handlers for FastAPI.

Maps domain exceptions to HTTP responses, eliminating try/except
boilerplate from routers. Register with register_exception_handlers(app).
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# User-facing copy for blocked content, by screening path
BLOCKED_MESSAGES = {
    "message": "Message blocked due to safety violations.",
    "review": "Your review contains content that cannot be submitted.",
}
PROFILE_BLOCKED_MESSAGE = (
    "Your profile contains content that violates our safety guidelines: {phrases}. "
    "Please update your bio or service descriptions and try again."
)
PROFILE_REVIEW_MESSAGE = (
    "Your profile contains content that may need review. Please check your bio and "
    "service descriptions for any language that could be flagged, then try again."
)
DEFAULT_BLOCKED_MESSAGE = "This content cannot be posted because it violates our safety guidelines."


def error_response(status_code: int, detail: str, code: Optional[str] = None) -> JSONResponse:
    """Build a standardized error JSON response."""
    content: dict = {"detail": detail}
    if code:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=content)


def blocked_detail(content_type: str, phrases: list[str]) -> str:
    """Non-technical explanation shown to the author of blocked content."""
    if content_type == "profile":
        return PROFILE_BLOCKED_MESSAGE.format(phrases=", ".join(phrases))
    return BLOCKED_MESSAGES.get(content_type, DEFAULT_BLOCKED_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all domain exception handlers on the FastAPI app."""
    from safety_api.models.moderation import ContentBlockedError, ProfileReviewRequiredError

    # --- Moderation handlers ---

    @app.exception_handler(ContentBlockedError)
    async def _content_blocked(request: Request, exc: ContentBlockedError) -> JSONResponse:
        return error_response(
            422, blocked_detail(exc.content_type, exc.result.phrases), "CONTENT_BLOCKED"
        )

    @app.exception_handler(ProfileReviewRequiredError)
    async def _profile_review(request: Request, exc: ProfileReviewRequiredError) -> JSONResponse:
        return error_response(422, PROFILE_REVIEW_MESSAGE, "PROFILE_REVIEW_REQUIRED")

    # --- Catch-all ---

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error.", "INTERNAL_ERROR")
