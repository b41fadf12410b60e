"""Activity safety validator — replaces unsafe pairings without shrinking the list.

For each candidate that fails ``is_activity_safe`` the validator tries:
    1. the same element with a safe focus (sensory regulation or gross
       motor when the element needs safe alternatives, otherwise any),
    2. the original focus on a different element that does not need
       safe alternatives,
    3. the original pairing unchanged.
Every replacement is re-checked for safety and for duplicate
(label, focus) keys.  Tier 3 keeps the list length stable; the pairing
is marked ``unsafe_fallback`` and the formatter must use
safe-alternative phrasing for it.
"""

from __future__ import annotations

import logging
from enum import Enum

from playspace_reason.core.safety import (
    FORCE_IMPLYING_FOCUSES,
    SAFE_ALTERNATIVE_FOCUSES,
    is_activity_safe,
    safety_of,
)
from playspace_reason.domain.activity import ActivityCandidate
from playspace_reason.domain.enums import ALL_FOCUSES, TherapeuticFocus
from playspace_reason.domain.environment import EnvironmentElement

logger = logging.getLogger(__name__)


class ReplacementTier(str, Enum):
    """How a candidate left the validator."""

    KEPT = "kept"
    SAME_ELEMENT = "same_element"
    OTHER_ELEMENT = "other_element"
    UNREPLACEABLE = "unreplaceable"


def _replace_on_same_element(
    candidate: ActivityCandidate,
    age: int,
    used: set[tuple[str, TherapeuticFocus]],
) -> ActivityCandidate | None:
    meta = safety_of(candidate.element)
    options = SAFE_ALTERNATIVE_FOCUSES if meta.use_safe_alternatives_only else ALL_FOCUSES
    for focus in options:
        if meta.use_safe_alternatives_only and focus in FORCE_IMPLYING_FOCUSES:
            continue
        if (candidate.object_label, focus) in used:
            continue
        if not is_activity_safe(candidate.object_label, focus, candidate.element, age, meta):
            continue
        return candidate.with_focus(focus)
    return None


def _replace_on_other_element(
    candidate: ActivityCandidate,
    elements: list[EnvironmentElement],
    age: int,
    used: set[tuple[str, TherapeuticFocus]],
) -> ActivityCandidate | None:
    focus = candidate.therapeutic_focus
    for element in elements:
        if element.object_label == candidate.object_label:
            continue
        meta = safety_of(element)
        if meta.use_safe_alternatives_only:
            continue
        if (element.object_label, focus) in used:
            continue
        if not is_activity_safe(element.object_label, focus, element, age, meta):
            continue
        return ActivityCandidate(
            object_label=element.object_label,
            therapeutic_focus=focus,
            element=element,
        )
    return None


def validate_activity(
    candidate: ActivityCandidate,
    elements: list[EnvironmentElement],
    age: int,
    used: set[tuple[str, TherapeuticFocus]],
) -> tuple[ActivityCandidate, ReplacementTier]:
    """Validate one candidate against the keys already in *used*."""
    meta = safety_of(candidate.element)
    if is_activity_safe(candidate.object_label, candidate.therapeutic_focus, candidate.element, age, meta):
        return candidate, ReplacementTier.KEPT

    replacement = _replace_on_same_element(candidate, age, used)
    if replacement is not None:
        return replacement, ReplacementTier.SAME_ELEMENT

    replacement = _replace_on_other_element(candidate, elements, age, used)
    if replacement is not None:
        return replacement, ReplacementTier.OTHER_ELEMENT

    return candidate.model_copy(update={"unsafe_fallback": True}), ReplacementTier.UNREPLACEABLE


def validate_and_replace_activities(
    activities: list[ActivityCandidate],
    elements: list[EnvironmentElement],
    age: int,
) -> list[ActivityCandidate]:
    """Return a same-length list where unsafe pairings are replaced when possible."""
    result: list[ActivityCandidate] = []
    # Replacements must not collide with any input pairing, kept or not yet seen.
    used: set[tuple[str, TherapeuticFocus]] = {a.key for a in activities}

    for candidate in activities:
        validated, tier = validate_activity(candidate, elements, age, used)
        if tier == ReplacementTier.UNREPLACEABLE:
            logger.warning(
                "No safe replacement for %s/%s (age %d); keeping pairing for safe phrasing",
                candidate.object_label, candidate.therapeutic_focus.value, age,
            )
        elif tier != ReplacementTier.KEPT:
            logger.debug(
                "Replaced %s/%s with %s/%s (%s)",
                candidate.object_label, candidate.therapeutic_focus.value,
                validated.object_label, validated.therapeutic_focus.value, tier.value,
            )
        result.append(validated)
        used.add(validated.key)

    return result
