"""Scene summary — infers the room type from co-occurring labels.

Runs on the validated labels and never changes them.  Returns an
Arabic scene name only when a known combination is present.
"""

from __future__ import annotations

from typing import Iterable, Optional

from playspace_reason.foundation.labels import normalize_label, overlaps_any

BEDROOM = "غرفة نوم"
LEARNING_CORNER = "زاوية تعلم"
LIVING_ROOM = "غرفة جلوس"
CHILDRENS_ROOM = "غرفة أطفال"

BED_TERMS = ("bed",)
BEDDING_TERMS = ("pillow", "blanket", "quilt", "mattress")
WORK_SURFACE_TERMS = ("table", "desk")
SEATING_TERMS = ("chair", "stool", "bench")
SOFA_TERMS = ("sofa", "couch", "settee")
SCREEN_TERMS = ("television", "tv", "monitor", "screen")
TOY_TERMS = ("toy", "doll", "teddy", "ball", "block", "puzzle", "lego", "game")
SMALL_FURNITURE_TERMS = ("stool", "bench", "ottoman", "chair")

# Checked in order; the first rule whose groups are all present wins.
SCENE_RULES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    (BEDROOM, (BED_TERMS, BEDDING_TERMS)),
    (LEARNING_CORNER, (WORK_SURFACE_TERMS, SEATING_TERMS)),
    (LIVING_ROOM, (SOFA_TERMS, SCREEN_TERMS)),
    (CHILDRENS_ROOM, (TOY_TERMS, SMALL_FURNITURE_TERMS)),
)


def _has_any(labels: set[str], terms: tuple[str, ...]) -> bool:
    return any(overlaps_any(label, terms) for label in labels)


def infer_scene_from_objects(labels: Iterable[str]) -> Optional[str]:
    normalized = {normalize_label(l) for l in labels}
    normalized.discard("")
    if not normalized:
        return None

    for scene, groups in SCENE_RULES:
        if all(_has_any(normalized, group) for group in groups):
            return scene

    # A sofa on its own is weaker evidence, but not in a room with a bed.
    if _has_any(normalized, SOFA_TERMS) and not _has_any(normalized, BED_TERMS):
        return LIVING_ROOM

    return None
