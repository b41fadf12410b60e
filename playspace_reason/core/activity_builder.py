"""Activity builder — pairs environment elements with therapeutic focuses.

Each output slot is filled greedily:
    1. the first (element, focus) pair whose focus has not been used yet,
       walking a shuffled diversity order over the element's affordances;
    2. otherwise a focus that is already used, paired with the element
       that has been used least so far.
A (label, focus) pair never appears twice.

Both the diversity order and the element order are shuffled so the first
detected label is not always paired with the same focus.  The random
source is injected; pass ``random.Random(seed)`` for reproducible output.
Shuffling changes which pairs are chosen, never whether they are valid.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Optional

from playspace_reason.domain.activity import ActivityCandidate
from playspace_reason.domain.enums import ALL_FOCUSES, TherapeuticFocus
from playspace_reason.domain.environment import EnvironmentElement

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_COUNT = 5
MIN_ACTIVITY_COUNT = 3
MAX_ACTIVITY_COUNT = 5

# Spread order before shuffling: one of each kind of activity first.
DIVERSITY_PRIORITY: tuple[TherapeuticFocus, ...] = (
    TherapeuticFocus.GROSS_MOTOR,
    TherapeuticFocus.FINE_MOTOR,
    TherapeuticFocus.SENSORY_REGULATION,
    TherapeuticFocus.EXECUTIVE_FUNCTION,
    TherapeuticFocus.MOTOR_PLANNING,
    TherapeuticFocus.BILATERAL_COORDINATION,
)


def target_activity_count(element_count: int, count: int = DEFAULT_ACTIVITY_COUNT) -> int:
    ceiling = min(count, MAX_ACTIVITY_COUNT, element_count * 2, len(ALL_FOCUSES))
    return max(MIN_ACTIVITY_COUNT, ceiling)


def _affordances(element: EnvironmentElement) -> list[TherapeuticFocus]:
    return list(element.motor) if element.motor else list(ALL_FOCUSES)


def build_activities_from_environment(
    elements: list[EnvironmentElement],
    age: int,
    count: int = DEFAULT_ACTIVITY_COUNT,
    rng: Optional[random.Random] = None,
) -> list[ActivityCandidate]:
    """Build a diverse, duplicate-free candidate list for *elements*.

    *age* does not influence pairing here; age-dependent substitutions
    happen in the safety validator and the refiner.
    """
    if not elements:
        return []

    rng = rng or random.Random()
    target = target_activity_count(len(elements), count)

    preferred = list(DIVERSITY_PRIORITY)
    rng.shuffle(preferred)
    shuffled = list(elements)
    rng.shuffle(shuffled)

    activities: list[ActivityCandidate] = []
    used_keys: set[tuple[str, TherapeuticFocus]] = set()
    used_focuses: set[TherapeuticFocus] = set()
    element_uses: Counter[str] = Counter()

    def take(element: EnvironmentElement, focus: TherapeuticFocus) -> None:
        activities.append(ActivityCandidate(
            object_label=element.object_label,
            therapeutic_focus=focus,
            element=element,
        ))
        used_keys.add((element.object_label, focus))
        used_focuses.add(focus)
        element_uses[element.object_label] += 1

    def pick_new_focus() -> Optional[tuple[EnvironmentElement, TherapeuticFocus]]:
        for element in shuffled:
            allowed = _affordances(element)
            for focus in preferred:
                if focus not in allowed or focus in used_focuses:
                    continue
                if (element.object_label, focus) in used_keys:
                    continue
                return element, focus
        return None

    def pick_reused_focus() -> Optional[tuple[EnvironmentElement, TherapeuticFocus]]:
        # sorted() is stable, so ties keep the shuffled order
        for element in sorted(shuffled, key=lambda e: element_uses[e.object_label]):
            allowed = _affordances(element)
            for focus in preferred:
                if focus in allowed and (element.object_label, focus) not in used_keys:
                    return element, focus
        return None

    while len(activities) < target:
        choice = pick_new_focus() or pick_reused_focus()
        if choice is None:
            break
        take(*choice)

    logger.debug(
        "Built %d/%d activities for age %d: %s",
        len(activities), target, age,
        [(a.object_label, a.therapeutic_focus.value) for a in activities],
    )
    return activities
