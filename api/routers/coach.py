"""
Coach router for the AI coach conversation and its actions.

This router contains endpoints for:
- /coach/chat - Ask the coach and get its reply plus a proposed action
- /coach/parse - Split an already-obtained reply into message and action
- /coach/actions - Apply an action the user confirmed

Actions are never applied during /coach/chat; the client shows the proposal
and calls /coach/actions once the user accepts it.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_current_user,
    get_coach_chat_use_case,
    get_confirm_action_use_case,
)
from api.schemas.coach import (
    ChatRequest,
    ChatResponse,
    ConfirmActionRequest,
    ConfirmActionResponse,
    ParseRequest,
)
from application.exceptions import ActionNotSupportedError
from application.use_cases import CoachChatUseCase, ConfirmActionUseCase
from backend.core.action_parser import parse_ai_response

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/coach",
    tags=["Coach"],
)


# =============================================================================
# Conversation Endpoints
# =============================================================================


@router.post("/chat", response_model=ChatResponse)
def coach_chat(
    request: ChatRequest,
    user_id: str = Depends(get_current_user),
    use_case: CoachChatUseCase = Depends(get_coach_chat_use_case),
):
    """
    Send a message to the AI coach.

    The reply's ``ACTION:`` line, if any, is returned as ``action``; the
    remaining text is ``message``.
    """
    result = use_case.execute(
        user_id=user_id,
        message=request.message,
        history=[turn.model_dump() for turn in request.history],
    )
    if not result.success:
        raise HTTPException(status_code=502, detail=result.error or "AI service error")

    return ChatResponse(
        message=result.message,
        action=result.action,
        confidence=result.confidence,
    )


@router.post("/parse", response_model=ChatResponse)
def coach_parse(
    request: ParseRequest,
    user_id: str = Depends(get_current_user),
):
    """Parse a coach reply without calling the model."""
    parsed = parse_ai_response(request.reply)
    return ChatResponse(
        message=parsed.message,
        action=parsed.action,
        confidence=parsed.confidence,
    )


# =============================================================================
# Action Confirmation
# =============================================================================


@router.post("/actions", response_model=ConfirmActionResponse)
def confirm_action(
    request: ConfirmActionRequest,
    user_id: str = Depends(get_current_user),
    use_case: ConfirmActionUseCase = Depends(get_confirm_action_use_case),
):
    """
    Apply a confirmed coach action.

    - workout: saved as a new workout
    - pr: checked against history, then saved as a single at RPE 10
    - profile: merged into the stored preferences
    - chat: 400, nothing to apply
    """
    try:
        result = use_case.execute(user_id, request.action)
    except ActionNotSupportedError as e:
        logger.warning(f"Rejected {request.action.type} confirmation for user {user_id}")
        raise HTTPException(status_code=400, detail=str(e))

    if not result.success:
        if result.validation_errors:
            raise HTTPException(
                status_code=400,
                detail={"error": result.error, "validation_errors": result.validation_errors},
            )
        raise HTTPException(status_code=502, detail=result.error)

    return ConfirmActionResponse(
        success=True,
        action_type=result.action_type,
        message=result.message,
        workout_id=result.workout_id,
        is_new_pr=result.is_new_pr,
        previous_best=result.previous_best,
        preferences=result.preferences,
    )
