"""Activity refiner — last adjustment pass before formatting.

Per activity, in order:
    1. constrained space + a focus that needs room (gross motor, motor
       planning) -> first affordance that does not need room
    2. age under 4 + a cognitively demanding focus (executive function,
       motor planning) -> first developmentally preferred affordance
Then deterministic text-variant seeds are attached and the list is
reordered so neighbouring activities differ in category or demand.

A substitution is only taken when the new pairing is still safe and
not already in the list; otherwise the validated focus stays.  The
output always has the same length as the input.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from playspace_reason.core.safety import is_activity_safe, safety_of
from playspace_reason.domain.activity import ActivityCandidate, RefinedActivity
from playspace_reason.domain.enums import (
    FOCUS_CATEGORY,
    FOCUS_DEMAND,
    Space,
    TherapeuticFocus,
)
from playspace_reason.domain.environment import EnvironmentElement

logger = logging.getLogger(__name__)

SPACE_DEMANDING_FOCUSES: frozenset[TherapeuticFocus] = frozenset({
    TherapeuticFocus.GROSS_MOTOR,
    TherapeuticFocus.MOTOR_PLANNING,
})

COGNITIVELY_DEMANDING_FOCUSES: frozenset[TherapeuticFocus] = frozenset({
    TherapeuticFocus.EXECUTIVE_FUNCTION,
    TherapeuticFocus.MOTOR_PLANNING,
})

DEVELOPMENTALLY_PREFERRED: tuple[TherapeuticFocus, ...] = (
    TherapeuticFocus.SENSORY_REGULATION,
    TherapeuticFocus.FINE_MOTOR,
    TherapeuticFocus.GROSS_MOTOR,
    TherapeuticFocus.BILATERAL_COORDINATION,
)

COGNITIVE_AGE_LIMIT = 4


# ── Seeds ────────────────────────────────────────────────────────────────────

def specific_skill_seed(index: int, age: int, object_label: str) -> int:
    return index + age + (len(object_label) % 5)


def humanize_offset(index: int, focus: TherapeuticFocus) -> int:
    return (index * 7 + len(focus.value)) % 3


# ── Substitution ─────────────────────────────────────────────────────────────

def _substitute(
    candidate: ActivityCandidate,
    age: int,
    taken: set[tuple[str, TherapeuticFocus]],
    accept: Callable[[TherapeuticFocus], bool],
) -> ActivityCandidate:
    meta = safety_of(candidate.element)
    for focus in candidate.element.motor:
        if focus == candidate.therapeutic_focus or not accept(focus):
            continue
        if (candidate.object_label, focus) in taken:
            continue
        if not is_activity_safe(candidate.object_label, focus, candidate.element, age, meta):
            continue
        return candidate.with_focus(focus)
    return candidate


def refine_candidate(
    candidate: ActivityCandidate,
    age: int,
    taken: Optional[set[tuple[str, TherapeuticFocus]]] = None,
) -> ActivityCandidate:
    """Apply the space rule, then the age rule, to one candidate."""
    taken = taken if taken is not None else set()
    refined = candidate

    if (refined.element.space == Space.CONSTRAINED
            and refined.therapeutic_focus in SPACE_DEMANDING_FOCUSES):
        refined = _substitute(
            refined, age, taken, lambda f: f not in SPACE_DEMANDING_FOCUSES,
        )

    if age < COGNITIVE_AGE_LIMIT and refined.therapeutic_focus in COGNITIVELY_DEMANDING_FOCUSES:
        preferred = [f for f in refined.element.motor if f in DEVELOPMENTALLY_PREFERRED]
        refined = _substitute(refined, age, taken, lambda f: f in preferred)

    if refined.therapeutic_focus != candidate.therapeutic_focus:
        logger.debug(
            "Refined %s: %s -> %s",
            candidate.object_label,
            candidate.therapeutic_focus.value,
            refined.therapeutic_focus.value,
        )
    return refined


# ── Diversity ordering ───────────────────────────────────────────────────────

def are_structurally_similar(a: ActivityCandidate, b: ActivityCandidate) -> bool:
    """Same coarse category and same performance demand."""
    return (
        FOCUS_CATEGORY[a.therapeutic_focus] == FOCUS_CATEGORY[b.therapeutic_focus]
        and FOCUS_DEMAND[a.therapeutic_focus] == FOCUS_DEMAND[b.therapeutic_focus]
    )


def enforce_diversity_order(activities: Iterable[RefinedActivity]) -> list[RefinedActivity]:
    remaining = list(activities)
    ordered: list[RefinedActivity] = []
    while remaining:
        pick = 0
        if ordered:
            last = ordered[-1]
            for i, item in enumerate(remaining):
                if not are_structurally_similar(last, item):
                    pick = i
                    break
        ordered.append(remaining.pop(pick))
    return ordered


# ── Entry point ──────────────────────────────────────────────────────────────

def refine_activities(
    activities: list[ActivityCandidate],
    elements: list[EnvironmentElement],
    age: int,
) -> list[RefinedActivity]:
    """Substitute infeasible focuses, attach seeds and reorder for variety.

    Each candidate is re-bound to the element of the same label in
    *elements*, so the refined activity carries the enriched element.
    """
    by_label = {e.object_label: e for e in elements}
    taken = {a.key for a in activities}
    refined: list[RefinedActivity] = []

    for index, candidate in enumerate(activities):
        element = by_label.get(candidate.object_label)
        if element is not None and element is not candidate.element:
            candidate = candidate.model_copy(update={"element": element})
        taken.discard(candidate.key)
        adjusted = refine_candidate(candidate, age, taken)
        taken.add(adjusted.key)
        refined.append(RefinedActivity(
            **adjusted.model_dump(exclude={"element"}),
            element=adjusted.element,
            specific_skill_seed=specific_skill_seed(index, age, adjusted.object_label),
            humanize_offset=humanize_offset(index, adjusted.therapeutic_focus),
        ))

    return enforce_diversity_order(refined)
