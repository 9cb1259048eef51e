"""
Coach reply parser.

Splits a coach reply into the prose shown to the user and the structured
action carried on its ``ACTION: {...}`` line.

Grammar:
    reply   := prose [marker payload rest]
    marker  := "ACTION:" (case-insensitive) followed by optional whitespace (newlines included)
    payload := JSON object, normally ending at the first newline

Only the first marker that is followed by a JSON object is considered.
Parsing never raises: a block that cannot be decoded or validated degrades
the whole reply to a chat action with reduced confidence.
"""
import json
import logging
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from domain.models import (
    DEFAULT_RPE,
    ChatAction,
    ParsedAIResponse,
    PRAction,
    WorkoutAction,
    ai_action_adapter,
)

from backend.core.exercise_names import normalize_exercise_name
from backend.core.rounding import round_half_up

logger = logging.getLogger(__name__)

ACTION_MARKER = "action:"

CONFIDENCE_NO_ACTION = 1.0
CONFIDENCE_PARSED = 0.9
CONFIDENCE_DEGRADED = 0.5

_decoder = json.JSONDecoder()


class ActionBlockError(ValueError):
    """Raised internally when an action block cannot be decoded."""


# =============================================================================
# Block Extraction
# =============================================================================


def _skip_blanks(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t\r\n":
        pos += 1
    return pos


def find_action_block(reply: str) -> Optional[Tuple[int, int]]:
    """
    Locate the first marker that is followed by a JSON object.

    Args:
        reply: Raw coach reply

    Returns:
        (marker_start, payload_start) offsets, or None when there is no block
    """
    lowered = reply.lower()
    search_from = 0
    while True:
        start = lowered.find(ACTION_MARKER, search_from)
        if start == -1:
            return None
        payload_start = _skip_blanks(reply, start + len(ACTION_MARKER))
        if reply.startswith("{", payload_start):
            return start, payload_start
        search_from = start + len(ACTION_MARKER)


def _line_end(text: str, pos: int) -> int:
    newline = text.find("\n", pos)
    return len(text) if newline == -1 else newline


def decode_action_payload(reply: str, payload_start: int) -> Tuple[Any, int]:
    """
    Decode the JSON object that starts at ``payload_start``.

    The payload normally ends at the first newline. When that line alone is
    not valid JSON the object is decoded across lines instead.

    Returns:
        (decoded object, end offset of the block including the rest of its line)

    Raises:
        ActionBlockError: If no JSON object can be decoded
    """
    line_end = _line_end(reply, payload_start)
    line = reply[payload_start:line_end]
    try:
        obj, _ = _decoder.raw_decode(line)
        return obj, line_end
    except json.JSONDecodeError:
        pass
    except RecursionError as e:
        raise ActionBlockError("Action JSON is nested too deeply") from e

    try:
        obj, obj_end = _decoder.raw_decode(reply, payload_start)
    except json.JSONDecodeError as e:
        raise ActionBlockError(f"Malformed action JSON: {e.msg}") from e
    except RecursionError as e:
        raise ActionBlockError("Action JSON is nested too deeply") from e
    return obj, _line_end(reply, obj_end)


def strip_action_block(reply: str, start: int, end: int) -> str:
    """Remove ``reply[start:end]`` plus the newline that terminates it."""
    if end < len(reply) and reply[end] == "\n":
        end += 1
    return reply[:start] + reply[end:]


# =============================================================================
# Normalization
# =============================================================================


def _normalize_workout(action: WorkoutAction) -> WorkoutAction:
    exercises = [
        entry.model_copy(update={
            "exercise": normalize_exercise_name(entry.exercise),
            "completed": True,
            "rpe": entry.rpe or DEFAULT_RPE,
        })
        for entry in action.exercises
    ]
    session_rpe = action.session_rpe
    if not session_rpe and exercises:
        session_rpe = round_half_up(sum(e.rpe for e in exercises) / len(exercises))
    return action.model_copy(update={"exercises": exercises, "session_rpe": session_rpe})


def _normalize_pr(action: PRAction) -> PRAction:
    return action.model_copy(update={
        "exercise": normalize_exercise_name(action.exercise),
        "unit": action.unit or "kg",
    })


def normalize_action(action):
    """
    Canonicalize an action after validation.

    - workout: canonical exercise names, completed sets, RPE defaulted to 7,
      session RPE defaulted to the rounded mean of exercise RPEs
    - pr: canonical exercise name, unit defaulted to kg
    - profile / chat: unchanged
    """
    if isinstance(action, WorkoutAction):
        return _normalize_workout(action)
    if isinstance(action, PRAction):
        return _normalize_pr(action)
    return action


# =============================================================================
# Entry Point
# =============================================================================


def parse_ai_response(reply: str) -> ParsedAIResponse:
    """
    Parse a coach reply into a display message and one structured action.

    Args:
        reply: Raw text returned by the language model

    Returns:
        ParsedAIResponse. Confidence is 1.0 without an action block, 0.9 for
        a parsed block and 0.5 when the block was present but unusable.

    Examples:
        >>> parsed = parse_ai_response('Great job!\\nACTION: {"type":"pr","exercise":"squat","weight":140}')
        >>> parsed.action.exercise, parsed.action.unit, parsed.message
        ('Squat', 'kg', 'Great job!')
    """
    reply = reply or ""
    block = find_action_block(reply)
    if block is None:
        return ParsedAIResponse(
            action=ChatAction(),
            message=reply,
            confidence=CONFIDENCE_NO_ACTION,
            raw_response=reply,
        )

    start, payload_start = block
    try:
        payload, end = decode_action_payload(reply, payload_start)
        action = normalize_action(ai_action_adapter.validate_python(payload))
    except (ActionBlockError, ValidationError) as e:
        logger.warning(f"Unparseable coach action, falling back to chat: {e}")
        return ParsedAIResponse(
            action=ChatAction(),
            message=reply,
            confidence=CONFIDENCE_DEGRADED,
            raw_response=reply,
        )

    message = strip_action_block(reply, start, end).strip()
    return ParsedAIResponse(
        action=action,
        message=message or reply,
        confidence=CONFIDENCE_PARSED,
        raw_response=reply,
    )
