"""Safety classifier, age feasibility and the per-activity safety check.

Classification precedence (an element may hold several classes):
    1. fixed_heavy_furniture  heavy-furniture label, or fixed stability
                              on a heavy-furniture label
    2. large_movable          bench / ottoman / mattress / coffee table
    3. small_manipulable      handheld objects
    4. elevated_unstable      elevated height or climbable/tippable label
    5. floor_safe             floor height or floor-level label
    6. small_manipulable      when nothing above applied

Heavy and large-movable elements forbid lift/drag/push/high-force and
set ``use_safe_alternatives_only``.  Everything here is a pure function
of the element's label, stability and height.
"""

from __future__ import annotations

import logging

from playspace_reason.domain.activity import AgeFeasibility
from playspace_reason.domain.enums import (
    BalanceComplexity,
    ForbiddenAction,
    Height,
    MotorPlanningLoad,
    ObjectSafetyClass,
    SafeActionHint,
    Stability,
    StrengthDemand,
    TherapeuticFocus,
)
from playspace_reason.domain.environment import EnvironmentElement, SafetyMetadata
from playspace_reason.foundation.labels import compact_key, overlaps_any

logger = logging.getLogger(__name__)


FIXED_HEAVY_LABELS: tuple[str, ...] = (
    "sofa", "couch", "bed", "wardrobe", "bookcase", "cabinet", "dining table",
    "table", "desk", "stairs", "door", "wall", "refrigerator", "bathtub", "tub",
)
LARGE_MOVABLE_LABELS: tuple[str, ...] = ("bench", "ottoman", "mattress", "coffee table")
SMALL_MANIPULABLE_LABELS: tuple[str, ...] = (
    "pillow", "blanket", "ball", "book", "lamp", "cushion", "box", "basket",
    "toy", "doll", "block", "cube", "remote", "phone", "cup", "plate", "bowl",
)
ELEVATED_UNSTABLE_LABELS: tuple[str, ...] = ("stairs", "step", "stool", "window", "lamp")
FLOOR_SAFE_LABELS: tuple[str, ...] = ("carpet", "rug", "floor", "ball")

HEAVY_FORBIDDEN: tuple[ForbiddenAction, ...] = (
    ForbiddenAction.LIFT,
    ForbiddenAction.DRAG,
    ForbiddenAction.PUSH,
    ForbiddenAction.HIGH_FORCE,
)
HEAVY_HINTS: tuple[SafeActionHint, ...] = (
    SafeActionHint.CRAWL_AROUND,
    SafeActionHint.NAVIGATE_BETWEEN,
    SafeActionHint.REACH_OVER,
    SafeActionHint.USE_CUSHIONS_OR_FLOOR,
    SafeActionHint.SUPPORTED_WEIGHT_BEARING,
)
ELEVATED_FORBIDDEN: tuple[ForbiddenAction, ...] = (
    ForbiddenAction.CLIMB_UNSTABLE,
    ForbiddenAction.JUMP_FROM_HEIGHT,
)
ELEVATED_HINTS: tuple[SafeActionHint, ...] = (
    SafeActionHint.NAVIGATE_BETWEEN,
    SafeActionHint.REACH_OVER,
    SafeActionHint.SUPPORTED_WEIGHT_BEARING,
)

# Focuses whose usual phrasing moves the object ("lift X", "transfer",
# "arrange in order").  Gross motor and sensory regulation can be
# phrased as walk toward / look at / touch.
FORCE_IMPLYING_FOCUSES: frozenset[TherapeuticFocus] = frozenset({
    TherapeuticFocus.MOTOR_PLANNING,
    TherapeuticFocus.FINE_MOTOR,
    TherapeuticFocus.BILATERAL_COORDINATION,
    TherapeuticFocus.EXECUTIVE_FUNCTION,
})

SAFE_ALTERNATIVE_FOCUSES: tuple[TherapeuticFocus, ...] = (
    TherapeuticFocus.SENSORY_REGULATION,
    TherapeuticFocus.GROSS_MOTOR,
)


def _unique(items: list) -> list:
    return list(dict.fromkeys(items))


def _is_heavy_furniture(element: EnvironmentElement) -> bool:
    if not (overlaps_any(element.object_label, FIXED_HEAVY_LABELS)
            or element.stability == Stability.FIXED):
        return False
    key = compact_key(element.object_label)
    return any(term.replace(" ", "") in key for term in FIXED_HEAVY_LABELS)


# ── Classification ───────────────────────────────────────────────────────────

def classify_element_for_safety(element: EnvironmentElement) -> SafetyMetadata:
    """Classify *element* and derive forbidden actions and safe hints."""
    label = element.object_label
    classes: list[ObjectSafetyClass] = []
    forbidden: list[ForbiddenAction] = []
    hints: list[SafeActionHint] = []

    if _is_heavy_furniture(element):
        classes.append(ObjectSafetyClass.FIXED_HEAVY_FURNITURE)
        forbidden += HEAVY_FORBIDDEN
        hints += HEAVY_HINTS

    if (overlaps_any(label, LARGE_MOVABLE_LABELS)
            and ObjectSafetyClass.FIXED_HEAVY_FURNITURE not in classes):
        classes.append(ObjectSafetyClass.LARGE_MOVABLE)
        forbidden += HEAVY_FORBIDDEN
        hints += HEAVY_HINTS

    if overlaps_any(label, SMALL_MANIPULABLE_LABELS):
        classes.append(ObjectSafetyClass.SMALL_MANIPULABLE)

    if element.height == Height.ELEVATED or overlaps_any(label, ELEVATED_UNSTABLE_LABELS):
        classes.append(ObjectSafetyClass.ELEVATED_UNSTABLE)
        forbidden += ELEVATED_FORBIDDEN
        if not hints:
            hints += ELEVATED_HINTS

    if element.height == Height.FLOOR or overlaps_any(label, FLOOR_SAFE_LABELS):
        classes.append(ObjectSafetyClass.FLOOR_SAFE)

    if not classes:
        classes.append(ObjectSafetyClass.SMALL_MANIPULABLE)

    return SafetyMetadata(
        classes=_unique(classes),
        forbidden_actions=_unique(forbidden),
        safe_action_hints=_unique(hints),
        use_safe_alternatives_only=(
            ObjectSafetyClass.FIXED_HEAVY_FURNITURE in classes
            or ObjectSafetyClass.LARGE_MOVABLE in classes
        ),
    )


def enrich_elements_with_safety(elements: list[EnvironmentElement]) -> list[EnvironmentElement]:
    """Return copies of *elements* carrying their safety metadata."""
    enriched = []
    for element in elements:
        meta = classify_element_for_safety(element)
        logger.debug(
            "Safety %s: classes=%s safe_only=%s",
            element.object_label,
            [c.value for c in meta.classes],
            meta.use_safe_alternatives_only,
        )
        enriched.append(element.with_safety(meta))
    return enriched


def safety_of(element: EnvironmentElement) -> SafetyMetadata:
    """Attached metadata, or a fresh classification if none is attached."""
    return element.safety or classify_element_for_safety(element)


# ── Age feasibility ──────────────────────────────────────────────────────────

_AGE_BANDS: tuple[tuple[int, AgeFeasibility], ...] = (
    (3, AgeFeasibility(
        max_strength_demand=StrengthDemand.MINIMAL,
        max_balance_complexity=BalanceComplexity.STATIC_ONLY,
        max_motor_planning_load=MotorPlanningLoad.SINGLE_STEP,
        allow_elevated_surfaces=False,
    )),
    (5, AgeFeasibility(
        max_strength_demand=StrengthDemand.LIGHT,
        max_balance_complexity=BalanceComplexity.SIMPLE_DYNAMIC,
        max_motor_planning_load=MotorPlanningLoad.TWO_STEPS,
        allow_elevated_surfaces=False,
    )),
    (8, AgeFeasibility(
        max_strength_demand=StrengthDemand.MODERATE,
        max_balance_complexity=BalanceComplexity.MODERATE_DYNAMIC,
        max_motor_planning_load=MotorPlanningLoad.THREE_STEPS,
        allow_elevated_surfaces=False,
    )),
)

_OLDEST_BAND = AgeFeasibility(
    max_strength_demand=StrengthDemand.FULL,
    max_balance_complexity=BalanceComplexity.COMPLEX,
    max_motor_planning_load=MotorPlanningLoad.MULTI_STEP,
    allow_elevated_surfaces=True,
)


def get_age_feasibility(age: int) -> AgeFeasibility:
    """Capability ceiling for *age*: bands <3, 3–4, 5–7 and 8+."""
    for upper, feasibility in _AGE_BANDS:
        if age < upper:
            return feasibility
    return _OLDEST_BAND


# ── Activity check ───────────────────────────────────────────────────────────

def is_activity_safe(
    object_label: str,
    focus: TherapeuticFocus,
    element: EnvironmentElement,
    age: int,
    safety: SafetyMetadata,
) -> bool:
    """Whether pairing *focus* with *element* is physically safe at *age*."""
    if safety.use_safe_alternatives_only and focus in FORCE_IMPLYING_FOCUSES:
        return False

    if safety.has_class(ObjectSafetyClass.ELEVATED_UNSTABLE):
        feasibility = get_age_feasibility(age)
        if (not feasibility.allow_elevated_surfaces
                and focus in (TherapeuticFocus.GROSS_MOTOR, TherapeuticFocus.MOTOR_PLANNING)):
            return False
        if (safety.forbids(ForbiddenAction.CLIMB_UNSTABLE)
                and focus == TherapeuticFocus.GROSS_MOTOR):
            return False

    return True
