"""Semantic reasoner — reads raw detector labels as real household objects.

For each unique normalised label the reasoner tries, in order:
    1. The curated interpretation table.
    2. Environment-like terms (room, furniture, seat, ...) with a
       best-guess specific name instead of a generic placeholder.
    3. A hedged name at reduced confidence, when the label is at least
       moderately plausible in a home.
Labels on the exclusion list (weapons, hate symbols, adult venues, ...)
produce nothing.

Confidence formula:
    confidence = min(1, round(probability * 0.6 + relevance * 0.4, 2))

The environment-like and hedged paths scale that by 0.85 and 0.6.
Elements below ``min_confidence`` are dropped.  Output is sorted by
interaction priority (tangible 2, neutral 1, structural 0) and then by
confidence, both descending.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playspace_reason.core.interpretations import Category, lookup_interpretation
from playspace_reason.domain.detection import RawDetection, ReasonedElement
from playspace_reason.foundation.labels import contains_any, normalize_label

logger = logging.getLogger(__name__)


# ── Keyword sets ─────────────────────────────────────────────────────────────

EXCLUDED_TERMS: tuple[str, ...] = (
    "swastika", "confederate", "cartoon", "comic", "mask", "weapon", "gun",
    "rifle", "revolver", "grenade", "missile", "cannon", "knife", "dagger",
    "nightclub", "casino", "brewery", "liquor", "wine bottle", "beer",
    "cigarette", "prison", "jail", "guillotine",
)

GENERIC_WORDS: tuple[str, ...] = ("object", "entity", "thing", "item", "something")

LOW_RELEVANCE_TERMS: tuple[str, ...] = (
    "spot", "gondola", "restaurant", "barber", "grocery", "bakery", "library",
    "shop", "store", "stadium", "volcano", "seashore", "lakeside", "valley",
)

HIGH_RELEVANCE_TERMS: tuple[str, ...] = (
    "couch", "sofa", "chair", "table", "desk", "bed", "pillow", "blanket",
    "carpet", "rug", "ball", "stairs", "door", "window", "lamp", "book", "toy",
    "shelf", "stool", "bench",
)

INTERACTION_FIRST: tuple[str, ...] = (
    "ball", "toy", "doll", "teddy", "block", "cube", "puzzle", "lego", "book",
    "pillow", "blanket", "quilt", "cushion", "basket", "box", "bowl", "plate",
    "cup", "towel", "carpet", "rug", "chair", "stool", "bench", "ottoman",
    "table", "desk", "couch", "sofa", "bed", "shelf", "drawer", "bookcase",
    "wardrobe", "cabinet", "bike", "bicycle", "swing", "lamp", "mirror",
    "plant", "vase",
)

STRUCTURAL_BACKGROUND: tuple[str, ...] = ("wall", "floor", "door", "window", "stairs", "step")

ENVIRONMENT_LIKE_TERMS: tuple[str, ...] = (
    "furniture", "furnishing", "room", "indoor", "floor", "wall", "table",
    "chair", "seat", "cushion", "mat", "rug", "carpet", "shelf", "desk", "bed",
    "lamp", "door", "window",
)

# Ordered: first matching term names the element.
_ENVIRONMENT_NAMES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("table",), "طاولة"),
    (("chair", "seat"), "كرسي"),
    (("floor", "mat"), "أرضية أو فرش"),
    (("shelf",), "رف"),
    (("desk",), "مكتب"),
    (("bed",), "سرير"),
    (("lamp",), "مصباح"),
    (("door",), "باب"),
    (("window",), "نافذة"),
    (("furnishing",), "فرش أو أثاث"),
    (("furniture",), "أثاث"),
    (("wall",), "جدار"),
    (("room",), "عناصر الغرفة"),
    (("indoor",), "عنصر داخلي"),
)

ENVIRONMENT_CONTEXT = (
    "يمكن دمج العنصر في أنشطة علاجية (جلوس، نقل، لعب، تنظيم) "
    "بعد تقييم السلامة والوظيفة والملاءمة العمرية."
)
HEDGE_CONTEXT = (
    "تصنيف أولي من الصورة؛ يُنصح بمراعاة السياق الفعلي للغرفة "
    "وملاءمة العمر قبل تصميم النشاط."
)

ENVIRONMENT_CONFIDENCE_FACTOR = 0.85
HEDGE_CONFIDENCE_FACTOR = 0.6
HEDGE_MIN_RELEVANCE = 0.5


@dataclass(frozen=True)
class ReasonerConfig:
    """Tunables for the semantic reasoner."""

    min_confidence: float = 0.35
    probability_weight: float = 0.6
    relevance_weight: float = 0.4


# ── Scoring ──────────────────────────────────────────────────────────────────

def relevance_weight(normalized: str) -> float:
    """Static plausibility of a label in a child's home environment."""
    if contains_any(normalized, LOW_RELEVANCE_TERMS):
        return 0.4
    if contains_any(normalized, HIGH_RELEVANCE_TERMS):
        return 1.0
    return 0.75


def interaction_priority(label: str) -> int:
    """2 = tangible/manipulable, 1 = neutral, 0 = structural background."""
    normalized = normalize_label(label)
    if contains_any(normalized, INTERACTION_FIRST):
        return 2
    if contains_any(normalized, STRUCTURAL_BACKGROUND):
        return 0
    return 1


def blended_confidence(
    probability: float,
    relevance: float,
    config: ReasonerConfig | None = None,
) -> float:
    cfg = config or ReasonerConfig()
    raw = probability * cfg.probability_weight + relevance * cfg.relevance_weight
    return min(1.0, round(raw, 2))


def is_excluded(normalized: str) -> bool:
    if contains_any(normalized, EXCLUDED_TERMS):
        return True
    first_word = normalized.split(" ")[0] if normalized else ""
    return first_word in GENERIC_WORDS or first_word.rstrip("s") in GENERIC_WORDS


# ── Interpretation ───────────────────────────────────────────────────────────

def _environment_name(normalized: str) -> str:
    for terms, name in _ENVIRONMENT_NAMES:
        if contains_any(normalized, terms):
            return name
    first = normalized.split(" ")[0].replace("_", " ")
    return f"عنصر مشابه لـ {first}" if first else "عنصر في بيئة الغرفة"


def interpret_detection(
    detection: RawDetection,
    config: ReasonerConfig | None = None,
) -> ReasonedElement | None:
    """Interpret a single detection, or return None if it is irrelevant."""
    cfg = config or ReasonerConfig()
    normalized = normalize_label(detection.class_name)
    if not normalized or is_excluded(normalized):
        return None

    relevance = relevance_weight(normalized)
    confidence = blended_confidence(detection.probability, relevance, cfg)

    entry = lookup_interpretation(detection.class_name)
    if entry is not None:
        return ReasonedElement(
            raw_label=detection.class_name,
            element_name_ar=entry.name_ar,
            functional_category=entry.category,
            contextual_interpretation=entry.context,
            confidence_after_processing=confidence,
        )

    if contains_any(normalized, ENVIRONMENT_LIKE_TERMS):
        return ReasonedElement(
            raw_label=detection.class_name,
            element_name_ar=_environment_name(normalized),
            functional_category=Category.DAILY_USE,
            contextual_interpretation=ENVIRONMENT_CONTEXT,
            confidence_after_processing=round(confidence * ENVIRONMENT_CONFIDENCE_FACTOR, 2),
        )

    if relevance >= HEDGE_MIN_RELEVANCE:
        first = normalized.split(" ")[0].replace("_", " ")
        return ReasonedElement(
            raw_label=detection.class_name,
            element_name_ar=f"عنصر ({first}) يُفضّل التأكد من السياق",
            functional_category=Category.DAILY_USE,
            contextual_interpretation=HEDGE_CONTEXT,
            confidence_after_processing=round(confidence * HEDGE_CONFIDENCE_FACTOR, 2),
        )

    return None


def reason_over_detections(
    detections: list[RawDetection],
    config: ReasonerConfig | None = None,
) -> list[ReasonedElement]:
    """Interpret, deduplicate and order filtered detections."""
    cfg = config or ReasonerConfig()
    seen: set[str] = set()
    out: list[ReasonedElement] = []

    for det in detections:
        normalized = normalize_label(det.class_name)
        if normalized in seen:
            continue
        element = interpret_detection(det, cfg)
        if element is None:
            logger.debug("No interpretation for label: %s", det.class_name)
            continue
        if element.confidence_after_processing < cfg.min_confidence:
            logger.debug(
                "Dropped low-confidence element %s (%.2f)",
                det.class_name, element.confidence_after_processing,
            )
            continue
        seen.add(normalized)
        out.append(element)

    out.sort(
        key=lambda e: (interaction_priority(e.raw_label), e.confidence_after_processing),
        reverse=True,
    )
    return out
