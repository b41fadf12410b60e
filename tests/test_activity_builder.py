"""Tests for the activity builder."""

from __future__ import annotations

import random

import pytest

from playspace_reason.core.activity_builder import (
    build_activities_from_environment,
    target_activity_count,
)
from playspace_reason.core.environment_analyzer import DEFAULT_MOTOR, analyze_environment
from playspace_reason.core.safety import enrich_elements_with_safety

SMALL_OBJECTS = ["remote control", "cellular telephone", "plate", "plant", "vase"]


def _elements(labels: list[str]):
    return enrich_elements_with_safety(analyze_environment(labels))


class TestTargetCount:

    @pytest.mark.parametrize("elements,expected", [(1, 3), (2, 4), (3, 5), (5, 5)])
    def test_clamped_by_element_count(self, elements: int, expected: int) -> None:
        assert target_activity_count(elements) == expected

    def test_requested_count_is_clamped(self) -> None:
        assert target_activity_count(5, count=10) == 5
        assert target_activity_count(5, count=1) == 3


class TestBuild:

    def test_empty_environment(self) -> None:
        assert build_activities_from_environment([], 5) == []

    def test_single_element_runs_out_of_pairs(self) -> None:
        activities = build_activities_from_environment(_elements(["sofa"]), 5, rng=random.Random(0))
        assert len(activities) == 2
        assert {a.object_label for a in activities} == {"sofa"}

    @pytest.mark.parametrize("seed", range(10))
    def test_no_duplicate_pairs(self, seed: int) -> None:
        elements = _elements(["ball", "sofa", "table", "book"])
        activities = build_activities_from_environment(elements, 6, rng=random.Random(seed))
        keys = [a.key for a in activities]
        assert len(keys) == len(set(keys))
        assert 3 <= len(activities) <= 5

    @pytest.mark.parametrize("seed", range(5))
    def test_focus_comes_from_affordances(self, seed: int) -> None:
        elements = _elements(["ball", "sofa", "table"])
        for activity in build_activities_from_environment(elements, 6, rng=random.Random(seed)):
            assert activity.therapeutic_focus in activity.element.motor

    def test_small_objects_with_default_affordances(self) -> None:
        elements = _elements(SMALL_OBJECTS)
        assert all(e.motor == list(DEFAULT_MOTOR) for e in elements)

        activities = build_activities_from_environment(elements, 6, rng=random.Random(3))
        assert len(activities) == 5
        assert {a.therapeutic_focus for a in activities} == set(DEFAULT_MOTOR)
        assert len({a.key for a in activities}) == 5

    def test_new_focuses_before_reuse(self) -> None:
        elements = _elements(SMALL_OBJECTS)
        activities = build_activities_from_environment(elements, 6, rng=random.Random(7))
        first_three = {a.therapeutic_focus for a in activities[:3]}
        assert first_three == set(DEFAULT_MOTOR)

    def test_same_seed_same_output(self) -> None:
        elements = _elements(["ball", "sofa", "table", "book"])
        a = build_activities_from_environment(elements, 6, rng=random.Random(42))
        b = build_activities_from_environment(elements, 6, rng=random.Random(42))
        assert [x.key for x in a] == [x.key for x in b]

    def test_candidates_are_not_flagged(self) -> None:
        activities = build_activities_from_environment(_elements(["ball"]), 6, rng=random.Random(0))
        assert not any(a.unsafe_fallback for a in activities)
