"""
Coach Schemas for the AI coach API.

Schemas for:
- ChatRequest / ChatResponse: POST /coach/chat
- ParseRequest: POST /coach/parse (reply already obtained by the client)
- ConfirmActionRequest / ConfirmActionResponse: POST /coach/actions
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from domain.models import AIAction


class ChatTurn(BaseModel):
    """One previous message in the conversation."""
    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    """Request body for POST /coach/chat."""
    message: str = Field(
        ...,
        description="User's message to the coach",
        min_length=1,
        max_length=2000,
    )
    history: List[ChatTurn] = Field(
        default_factory=list,
        description="Previous turns, oldest first. Only the most recent ones are forwarded.",
    )


class ChatResponse(BaseModel):
    """Coach reply split into display text and a proposed action."""
    message: str
    action: AIAction
    confidence: float


class ParseRequest(BaseModel):
    """Request body for POST /coach/parse."""
    reply: str = Field(..., description="Raw coach reply text", max_length=20000)


class ConfirmActionRequest(BaseModel):
    """Request body for POST /coach/actions."""
    action: AIAction


class ConfirmActionResponse(BaseModel):
    """Outcome of a confirmed action."""
    success: bool = True
    action_type: str
    message: Optional[str] = None
    workout_id: Optional[str] = None
    is_new_pr: Optional[bool] = None
    previous_best: Optional[Union[int, float]] = None
    preferences: Optional[Dict[str, Any]] = None
