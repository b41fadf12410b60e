"""Detection filter — first narrowing pass over raw detector output.

Rules, applied in order:
    1. Drop any label that names a person or body part.
    2. Drop generic labels ("object", "thing", ...).
    3. Keep detections at or above the confidence threshold.
    4. If fewer than ``min_count`` pass, backfill with the best
       below-threshold detections (highest probability first).
    5. Cap the result at ``max_count``.

Output is sorted by probability, highest first.  The filter never
raises; the worst case is an empty list.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from playspace_reason.domain.detection import RawDetection
from playspace_reason.foundation.labels import normalize_label

logger = logging.getLogger(__name__)


# Matched as substrings anywhere in the full label (all synonym segments).
PERSON_SUBSTRINGS: frozenset[str] = frozenset({
    "person", "people", "human", "woman", "women",
})

# Matched as whole words only, so "mantel" or "handkerchief" survive.
PERSON_WORDS: frozenset[str] = frozenset({
    "man", "men", "boy", "girl", "child", "baby", "kid", "toddler",
    "hand", "foot", "feet", "leg", "arm", "head", "finger", "body", "face",
})

GENERIC_WORDS: frozenset[str] = frozenset({
    "object", "entity", "thing", "item", "something",
})

_TOKEN = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class DetectionFilterConfig:
    """Tunables for the detection filter."""

    confidence_threshold: float = 0.25
    min_count: int = 3
    max_count: int = 50


def is_person_label(label: str) -> bool:
    lowered = label.lower()
    if any(kw in lowered for kw in PERSON_SUBSTRINGS):
        return True
    return any(tok in PERSON_WORDS for tok in _TOKEN.findall(lowered))


def is_generic_label(label: str) -> bool:
    normalized = normalize_label(label)
    if not normalized:
        return True
    first_word = normalized.split(" ")[0]
    return first_word in GENERIC_WORDS or first_word.rstrip("s") in GENERIC_WORDS


def filter_detections(
    detections: list[RawDetection],
    config: DetectionFilterConfig | None = None,
) -> list[RawDetection]:
    """Filter raw detections down to plausible, non-person objects."""
    cfg = config or DetectionFilterConfig()

    candidates: list[RawDetection] = []
    for det in detections:
        if is_person_label(det.class_name):
            logger.debug("Dropped person/body label: %s", det.class_name)
            continue
        if is_generic_label(det.class_name):
            logger.debug("Dropped generic label: %s", det.class_name)
            continue
        candidates.append(det)

    # sorted() is stable, so equal probabilities keep detector order
    ranked = sorted(candidates, key=lambda d: d.probability, reverse=True)
    kept = [d for d in ranked if d.probability >= cfg.confidence_threshold]

    if len(kept) < cfg.min_count:
        below = [d for d in ranked if d.probability < cfg.confidence_threshold]
        backfill = below[: cfg.min_count - len(kept)]
        if backfill:
            logger.debug(
                "Backfilled %d below-threshold detections: %s",
                len(backfill), [d.class_name for d in backfill],
            )
        kept.extend(backfill)

    return kept[: cfg.max_count]
