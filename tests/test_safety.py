"""Tests for safety classification, age feasibility and the per-activity check."""

from __future__ import annotations

import pytest

from playspace_reason.core.environment_analyzer import analyze_environment
from playspace_reason.core.safety import (
    HEAVY_HINTS,
    classify_element_for_safety,
    enrich_elements_with_safety,
    get_age_feasibility,
    is_activity_safe,
    safety_of,
)
from playspace_reason.domain.enums import (
    BALANCE_ORDER,
    PLANNING_ORDER,
    STRENGTH_ORDER,
    ForbiddenAction,
    ObjectSafetyClass as C,
    SafeActionHint,
    TherapeuticFocus as F,
)
from playspace_reason.domain.environment import EnvironmentElement


def _element(label: str) -> EnvironmentElement:
    return analyze_environment([label])[0]


def _safe(label: str, focus: F, age: int) -> bool:
    element = _element(label)
    return is_activity_safe(label, focus, element, age, classify_element_for_safety(element))


# ── Classification ───────────────────────────────────────────────────────────

class TestClassification:

    def test_sofa_is_heavy_furniture(self) -> None:
        meta = classify_element_for_safety(_element("sofa"))
        assert meta.classes == [C.FIXED_HEAVY_FURNITURE]
        assert meta.use_safe_alternatives_only
        for action in (ForbiddenAction.LIFT, ForbiddenAction.DRAG, ForbiddenAction.PUSH, ForbiddenAction.HIGH_FORCE):
            assert meta.forbids(action)
        assert meta.safe_action_hints == list(HEAVY_HINTS)

    def test_stairs_are_heavy_and_elevated(self) -> None:
        meta = classify_element_for_safety(_element("stairs"))
        assert meta.has_class(C.FIXED_HEAVY_FURNITURE)
        assert meta.has_class(C.ELEVATED_UNSTABLE)
        assert meta.forbids(ForbiddenAction.CLIMB_UNSTABLE)
        assert meta.forbids(ForbiddenAction.JUMP_FROM_HEIGHT)
        assert meta.safe_action_hints == list(HEAVY_HINTS)

    def test_bench_is_large_movable(self) -> None:
        meta = classify_element_for_safety(_element("bench"))
        assert meta.classes == [C.LARGE_MOVABLE]
        assert meta.use_safe_alternatives_only

    def test_ball_is_small_and_floor_safe(self) -> None:
        meta = classify_element_for_safety(_element("ball"))
        assert meta.classes == [C.SMALL_MANIPULABLE, C.FLOOR_SAFE]
        assert not meta.use_safe_alternatives_only
        assert meta.forbidden_actions == []

    def test_lamp_gets_elevated_hints(self) -> None:
        meta = classify_element_for_safety(_element("lamp"))
        assert meta.has_class(C.ELEVATED_UNSTABLE)
        assert SafeActionHint.CRAWL_AROUND not in meta.safe_action_hints
        assert SafeActionHint.REACH_OVER in meta.safe_action_hints

    def test_unknown_object_defaults_to_small(self) -> None:
        meta = classify_element_for_safety(_element("toaster"))
        assert meta.classes == [C.SMALL_MANIPULABLE]

    def test_classification_is_idempotent(self) -> None:
        element = _element("stairs")
        assert classify_element_for_safety(element) == classify_element_for_safety(element)

    def test_enrich_is_idempotent(self) -> None:
        elements = analyze_environment(["sofa", "ball", "lamp"])
        once = enrich_elements_with_safety(elements)
        assert enrich_elements_with_safety(once) == once
        assert all(e.safety is not None for e in once)

    def test_enrich_leaves_input_untouched(self) -> None:
        elements = analyze_environment(["sofa"])
        enrich_elements_with_safety(elements)
        assert elements[0].safety is None

    def test_safety_of_classifies_on_demand(self) -> None:
        element = _element("sofa")
        assert safety_of(element) == classify_element_for_safety(element)


# ── Age feasibility ──────────────────────────────────────────────────────────

class TestAgeFeasibility:

    @pytest.mark.parametrize("age,allowed", [(2, False), (4, False), (7, False), (8, True), (12, True)])
    def test_elevated_surfaces(self, age: int, allowed: bool) -> None:
        assert get_age_feasibility(age).allow_elevated_surfaces is allowed

    def test_unstable_surfaces_never_allowed(self) -> None:
        assert not any(get_age_feasibility(a).allow_unstable_surfaces for a in range(1, 15))

    def test_capabilities_never_decrease_with_age(self) -> None:
        previous = None
        for age in range(1, 15):
            f = get_age_feasibility(age)
            current = (
                STRENGTH_ORDER.index(f.max_strength_demand),
                BALANCE_ORDER.index(f.max_balance_complexity),
                PLANNING_ORDER.index(f.max_motor_planning_load),
            )
            if previous is not None:
                assert all(c >= p for c, p in zip(current, previous))
            previous = current


# ── Activity check ───────────────────────────────────────────────────────────

class TestIsActivitySafe:

    def test_force_focus_on_heavy_furniture(self) -> None:
        assert not _safe("sofa", F.FINE_MOTOR, 6)
        assert not _safe("table", F.EXECUTIVE_FUNCTION, 6)

    def test_safe_alternative_focus_on_heavy_furniture(self) -> None:
        assert _safe("sofa", F.SENSORY_REGULATION, 6)
        assert _safe("sofa", F.GROSS_MOTOR, 6)

    def test_gross_motor_on_stairs_is_never_safe(self) -> None:
        assert not _safe("stairs", F.GROSS_MOTOR, 2)
        assert not _safe("stairs", F.GROSS_MOTOR, 10)

    def test_sensory_on_stairs_is_safe(self) -> None:
        assert _safe("stairs", F.SENSORY_REGULATION, 2)

    def test_elevated_planning_depends_on_age(self) -> None:
        assert not _safe("lamp", F.MOTOR_PLANNING, 4)
        assert _safe("lamp", F.MOTOR_PLANNING, 9)

    def test_small_object_is_safe_for_any_focus(self) -> None:
        assert all(_safe("ball", focus, 3) for focus in F)
