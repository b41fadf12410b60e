"""Element validator — keeps only realistic, tangible objects for a child's space.

Runs after the semantic reasoner and before environment analysis.  A
label survives only if it:
    - matches no blocklist keyword (blocklist overrides the reasoner),
    - matches at least one allowlist keyword,
    - is not excluded for the child's age,
    - has a reasoned element at or above ``min_confidence``.

Survivors are re-ordered by interaction priority and capped at
``max_labels``.  The reasoned elements are restricted to, and ordered
like, the surviving labels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel, Field

from playspace_reason.core.semantic_reasoner import interaction_priority
from playspace_reason.domain.detection import ReasonedElement
from playspace_reason.foundation.labels import compact_key, normalize_label

logger = logging.getLogger(__name__)


ALLOWLIST_KEYWORDS: tuple[str, ...] = (
    "couch", "sofa", "chair", "table", "desk", "bed", "pillow", "blanket", "quilt",
    "carpet", "rug", "floor", "ball", "stairs", "step", "stool", "bench", "ottoman",
    "lamp", "door", "window", "wall", "book", "bookcase", "shelf", "wardrobe", "cabinet",
    "drawer", "box", "basket", "bike", "bicycle", "toy", "doll", "teddy", "block", "cube",
    "puzzle", "lego", "tv", "television", "monitor", "laptop", "computer", "phone", "remote",
    "keyboard", "cushion", "mattress", "plant", "vase", "mirror", "towel", "bowl", "plate",
    "cup", "dining", "coffee", "highchair", "bathtub", "tub", "sink", "toilet", "refrigerator",
    "oven", "microwave", "swing", "board", "card", "notebook", "backpack", "screen",
    "printer", "toaster", "envelope", "filing", "copier", "modem", "cellular", "telephone",
    "furniture", "furnishing", "seat", "mat", "cot", "crib", "scissors", "crayon", "pencil",
)

BLOCKLIST_KEYWORDS: tuple[str, ...] = (
    "menu", "scoreboard", "website", "web site", "prom", "book jacket", "comic book",
    "comic", "cartoon", "snow", "lakeside", "landscape", "gondola", "barber", "grocery",
    "bakery", "prison", "jail", "nightclub", "confederate", "swastika", "weapon", "gun",
    "rifle", "grenade", "restaurant", "dome", "spot", "mask",
)

EXCLUDE_FOR_YOUNG: tuple[str, ...] = ("scissors", "scissor")


@dataclass(frozen=True)
class ValidatorConfig:
    """Tunables for the element validator."""

    min_confidence: float = 0.4
    max_labels: int = 5
    young_child_age: int = 3


class ValidationResult(BaseModel):
    """Surviving labels and their reasoned elements, in the same order."""

    labels: list[str] = Field(default_factory=list)
    reasoned_elements: list[ReasonedElement] = Field(default_factory=list)

    model_config = {"frozen": True}

    def display_names(self) -> dict[str, str]:
        """Label → display-name map for the formatter."""
        return {r.raw_label: r.element_name_ar for r in self.reasoned_elements}


def matches_blocklist(label: str) -> bool:
    normalized = normalize_label(label)
    return any(kw in normalized for kw in BLOCKLIST_KEYWORDS)


def matches_allowlist(label: str) -> bool:
    normalized = normalize_label(label)
    key = compact_key(label)
    return any(kw in normalized or kw.replace(" ", "") in key for kw in ALLOWLIST_KEYWORDS)


def excluded_for_age(label: str, age: int, young_child_age: int = 3) -> bool:
    if age >= young_child_age:
        return False
    normalized = normalize_label(label)
    return any(kw in normalized for kw in EXCLUDE_FOR_YOUNG)


def validate_detected_elements(
    labels: list[str],
    reasoned_elements: list[ReasonedElement],
    age: int,
    config: ValidatorConfig | None = None,
) -> ValidationResult:
    """Filter labels for contextual appropriateness and cap the result."""
    cfg = config or ValidatorConfig()
    reasoned_by_label = {r.raw_label: r for r in reasoned_elements}

    allowed: list[str] = []
    seen_keys: set[str] = set()
    for label in labels:
        key = compact_key(label)
        if key in seen_keys:
            continue
        if matches_blocklist(label):
            logger.debug("Blocked label: %s", label)
            continue
        if not matches_allowlist(label):
            logger.debug("Label not on allowlist: %s", label)
            continue
        if excluded_for_age(label, age, cfg.young_child_age):
            logger.debug("Label excluded for age %d: %s", age, label)
            continue
        reasoned = reasoned_by_label.get(label)
        if reasoned is None or reasoned.confidence_after_processing < cfg.min_confidence:
            logger.debug("Label lacks a confident interpretation: %s", label)
            continue
        seen_keys.add(key)
        allowed.append(label)

    allowed.sort(
        key=lambda l: (interaction_priority(l), reasoned_by_label[l].confidence_after_processing),
        reverse=True,
    )
    final = allowed[: cfg.max_labels]

    return ValidationResult(
        labels=final,
        reasoned_elements=[reasoned_by_label[label] for label in final],
    )
