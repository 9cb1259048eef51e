"""
Unit tests for the coach reply parser.

Tests for:
- Replies without an action block
- Each action type, including normalization
- Degraded parsing for malformed or invalid blocks
- Marker placement edge cases
"""

import pytest

from backend.core.action_parser import (
    CONFIDENCE_DEGRADED,
    CONFIDENCE_NO_ACTION,
    CONFIDENCE_PARSED,
    find_action_block,
    parse_ai_response,
)
from domain.models import ChatAction, PRAction, ProfileAction, WorkoutAction


# =============================================================================
# No Action
# =============================================================================


@pytest.mark.unit
class TestPlainReplies:

    def test_reply_without_marker_is_chat(self):
        parsed = parse_ai_response("Rest days matter too.")
        assert isinstance(parsed.action, ChatAction)
        assert parsed.message == "Rest days matter too."
        assert parsed.confidence == CONFIDENCE_NO_ACTION

    def test_empty_reply(self):
        parsed = parse_ai_response("")
        assert parsed.action.type == "chat"
        assert parsed.message == ""
        assert parsed.confidence == 1.0

    def test_marker_without_json_object_is_not_a_block(self):
        reply = "Your next action: rest and hydrate."
        parsed = parse_ai_response(reply)
        assert parsed.confidence == CONFIDENCE_NO_ACTION
        assert parsed.message == reply


# =============================================================================
# Parsed Actions
# =============================================================================


@pytest.mark.unit
class TestParsedActions:

    def test_chat_action_round_trip(self):
        parsed = parse_ai_response('Nice session today.\nACTION: {"type":"chat"}')
        assert parsed.action.type == "chat"
        assert parsed.message == "Nice session today."
        assert parsed.confidence == CONFIDENCE_PARSED

    def test_pr_action(self):
        parsed = parse_ai_response(
            'Great job!\nACTION: {"type":"pr","exercise":"squat","weight":140}'
        )
        assert isinstance(parsed.action, PRAction)
        assert parsed.action.exercise == "Squat"
        assert parsed.action.weight == 140
        assert parsed.action.unit == "kg"
        assert parsed.message == "Great job!"
        assert parsed.confidence == 0.9

    def test_pr_keeps_explicit_unit(self):
        parsed = parse_ai_response(
            'Huge!\nACTION: {"type":"pr","exercise":"bp","weight":225,"unit":"lbs"}'
        )
        assert parsed.action.exercise == "Bench Press"
        assert parsed.action.unit == "lbs"

    def test_workout_action_is_normalized(self):
        reply = (
            "Logged it.\n"
            'ACTION: {"type":"workout","exercises":['
            '{"exercise":"bench","sets":5,"reps":5,"weight":100,"rpe":8},'
            '{"exercise":"barbell row","sets":3,"reps":10,"weight":60,"completed":false}'
            "]}"
        )
        parsed = parse_ai_response(reply)
        action = parsed.action
        assert isinstance(action, WorkoutAction)
        assert [e.exercise for e in action.exercises] == ["Bench Press", "Barbell Row"]
        assert all(e.completed is True for e in action.exercises)
        assert action.exercises[1].rpe == 7
        # mean(8, 7) = 7.5 rounds up
        assert action.session_rpe == 8

    def test_explicit_session_rpe_is_kept(self):
        reply = (
            'ACTION: {"type":"workout","session_rpe":6,'
            '"exercises":[{"exercise":"squat","sets":3,"reps":5,"weight":120,"rpe":9}]}'
        )
        parsed = parse_ai_response(reply)
        assert parsed.action.session_rpe == 6

    def test_profile_action(self):
        parsed = parse_ai_response(
            'Updated.\nACTION: {"type":"profile","updates":{"goal":"strength","focus_area":"legs"}}'
        )
        assert isinstance(parsed.action, ProfileAction)
        assert parsed.action.updates.goal == "strength"
        assert parsed.action.updates.focus_area == "legs"

    def test_marker_is_case_insensitive(self):
        parsed = parse_ai_response('Done.\naction: {"type":"chat"}')
        assert parsed.confidence == CONFIDENCE_PARSED
        assert parsed.message == "Done."

    def test_text_after_the_block_is_kept(self):
        parsed = parse_ai_response('Intro\nACTION: {"type":"chat"}\nOutro')
        assert parsed.message == "Intro\nOutro"

    def test_pretty_printed_payload(self):
        reply = 'Saved!\nACTION: {\n  "type": "pr",\n  "exercise": "deadlift",\n  "weight": 200\n}'
        parsed = parse_ai_response(reply)
        assert parsed.action.type == "pr"
        assert parsed.action.exercise == "Deadlift"
        assert parsed.message == "Saved!"

    def test_reply_that_is_only_a_block_keeps_raw_text_as_message(self):
        reply = 'ACTION: {"type":"chat"}'
        parsed = parse_ai_response(reply)
        assert parsed.message == reply
        assert parsed.raw_response == reply

    def test_payload_on_the_line_after_the_marker(self):
        parsed = parse_ai_response('Logged.\nACTION:\n{"type":"pr","exercise":"squat","weight":150}')
        assert parsed.action.type == "pr"
        assert parsed.action.weight == 150
        assert parsed.message == "Logged."
        assert parsed.confidence == CONFIDENCE_PARSED

    def test_only_first_block_is_used(self):
        reply = (
            'ACTION: {"type":"pr","exercise":"squat","weight":140}\n'
            'ACTION: {"type":"pr","exercise":"bench","weight":100}'
        )
        parsed = parse_ai_response(reply)
        assert parsed.action.exercise == "Squat"


# =============================================================================
# Degraded Parsing
# =============================================================================


@pytest.mark.unit
class TestDegradedParsing:

    def test_malformed_json(self):
        reply = "hello\nACTION: {not json"
        parsed = parse_ai_response(reply)
        assert parsed.action.type == "chat"
        assert parsed.message == reply
        assert parsed.confidence == CONFIDENCE_DEGRADED

    def test_unknown_type(self):
        parsed = parse_ai_response('Hi\nACTION: {"type":"dance"}')
        assert parsed.action.type == "chat"
        assert parsed.confidence == 0.5

    def test_schema_violation(self):
        reply = 'Hi\nACTION: {"type":"workout","exercises":[{"exercise":"squat","sets":0,"reps":5}]}'
        parsed = parse_ai_response(reply)
        assert parsed.action.type == "chat"
        assert parsed.message == reply
        assert parsed.confidence == 0.5

    def test_negative_pr_weight_is_rejected(self):
        parsed = parse_ai_response('ACTION: {"type":"pr","exercise":"squat","weight":-5}')
        assert parsed.confidence == CONFIDENCE_DEGRADED

    def test_deeply_nested_payload_degrades_to_chat(self):
        reply = 'hi\nACTION: {"type":"chat","x":' + "[" * 100_000
        parsed = parse_ai_response(reply)
        assert parsed.action.type == "chat"
        assert parsed.message == reply
        assert parsed.confidence == CONFIDENCE_DEGRADED

    def test_parse_failure_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="backend.core.action_parser"):
            parse_ai_response("ACTION: {broken")
        assert "falling back to chat" in caplog.text


@pytest.mark.unit
class TestFindActionBlock:

    def test_marker_mid_line(self):
        reply = 'All set ACTION: {"type":"chat"}'
        assert find_action_block(reply) == (8, 16)

    def test_skips_markers_not_followed_by_json(self):
        reply = 'Next action: rest.\nACTION: {"type":"chat"}'
        start, payload_start = find_action_block(reply)
        assert reply[start:start + 7] == "ACTION:"
        assert reply[payload_start] == "{"

    def test_none_without_marker(self):
        assert find_action_block("just text") is None
