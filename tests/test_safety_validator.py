"""Tests for the activity safety validator and its replacement tiers."""

from __future__ import annotations

import logging

import pytest

from playspace_reason.core.environment_analyzer import analyze_environment
from playspace_reason.core.safety import enrich_elements_with_safety, is_activity_safe
from playspace_reason.core.safety_validator import (
    ReplacementTier,
    validate_activity,
    validate_and_replace_activities,
)
from playspace_reason.domain.activity import ActivityCandidate
from playspace_reason.domain.enums import TherapeuticFocus as F


def _elements(labels: list[str]):
    return {e.object_label: e for e in enrich_elements_with_safety(analyze_environment(labels))}


def _candidate(element, focus: F) -> ActivityCandidate:
    return ActivityCandidate(object_label=element.object_label, therapeutic_focus=focus, element=element)


class TestValidateActivity:

    def test_safe_pairing_kept(self) -> None:
        els = _elements(["sofa"])
        candidate = _candidate(els["sofa"], F.GROSS_MOTOR)
        result, tier = validate_activity(candidate, list(els.values()), 5, {candidate.key})
        assert tier == ReplacementTier.KEPT
        assert result == candidate

    def test_same_element_replacement(self) -> None:
        els = _elements(["table"])
        candidate = _candidate(els["table"], F.FINE_MOTOR)
        result, tier = validate_activity(candidate, list(els.values()), 5, {candidate.key})
        assert tier == ReplacementTier.SAME_ELEMENT
        assert result.object_label == "table"
        assert result.therapeutic_focus == F.SENSORY_REGULATION

    def test_other_element_replacement(self) -> None:
        els = _elements(["table", "ball"])
        candidate = _candidate(els["table"], F.FINE_MOTOR)
        used = {
            candidate.key,
            ("table", F.SENSORY_REGULATION),
            ("table", F.GROSS_MOTOR),
        }
        result, tier = validate_activity(candidate, list(els.values()), 5, used)
        assert tier == ReplacementTier.OTHER_ELEMENT
        assert result.key == ("ball", F.FINE_MOTOR)

    def test_other_element_skips_safe_only_elements(self) -> None:
        els = _elements(["table", "sofa"])
        candidate = _candidate(els["table"], F.FINE_MOTOR)
        used = {candidate.key, ("table", F.SENSORY_REGULATION), ("table", F.GROSS_MOTOR)}
        result, tier = validate_activity(candidate, list(els.values()), 5, used)
        assert tier == ReplacementTier.UNREPLACEABLE
        assert result.object_label == "table"

    def test_unreplaceable_is_flagged(self) -> None:
        els = _elements(["stairs"])
        candidate = _candidate(els["stairs"], F.GROSS_MOTOR)
        used = {candidate.key, ("stairs", F.SENSORY_REGULATION)}
        result, tier = validate_activity(candidate, list(els.values()), 2, used)
        assert tier == ReplacementTier.UNREPLACEABLE
        assert result.unsafe_fallback
        assert result.key == candidate.key


class TestValidateAndReplace:

    def test_length_preserved_for_heavy_only_scene(self) -> None:
        els = _elements(["table"])
        table = els["table"]
        candidates = [_candidate(table, f) for f in (F.FINE_MOTOR, F.BILATERAL_COORDINATION, F.EXECUTIVE_FUNCTION)]

        result = validate_and_replace_activities(candidates, list(els.values()), 5)

        assert len(result) == 3
        assert [a.therapeutic_focus for a in result[:2]] == [F.SENSORY_REGULATION, F.GROSS_MOTOR]
        assert result[2].unsafe_fallback
        assert len({a.key for a in result}) == 3

    def test_replacements_avoid_later_inputs(self) -> None:
        els = _elements(["table"])
        table = els["table"]
        candidates = [_candidate(table, F.FINE_MOTOR), _candidate(table, F.SENSORY_REGULATION)]

        result = validate_and_replace_activities(candidates, list(els.values()), 5)

        assert [a.therapeutic_focus for a in result] == [F.GROSS_MOTOR, F.SENSORY_REGULATION]

    @pytest.mark.parametrize("age", [2, 4, 6, 9])
    def test_every_unflagged_result_is_safe(self, age: int) -> None:
        els = _elements(["stairs", "table", "ball", "lamp"])
        candidates = [
            _candidate(e, f) for e in els.values() for f in e.motor
        ]
        for activity in validate_and_replace_activities(candidates, list(els.values()), age):
            if activity.unsafe_fallback:
                continue
            assert is_activity_safe(
                activity.object_label, activity.therapeutic_focus,
                activity.element, age, activity.element.safety,
            )

    def test_unreplaceable_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        els = _elements(["stairs"])
        stairs = els["stairs"]
        candidates = [_candidate(stairs, F.GROSS_MOTOR), _candidate(stairs, F.MOTOR_PLANNING)]

        with caplog.at_level(logging.WARNING, logger="playspace_reason.core.safety_validator"):
            result = validate_and_replace_activities(candidates, [stairs], 2)

        assert [a.unsafe_fallback for a in result] == [False, True]
        assert result[0].therapeutic_focus == F.SENSORY_REGULATION
        assert "No safe replacement" in caplog.text

    def test_empty(self) -> None:
        assert validate_and_replace_activities([], [], 5) == []
