"""Environment analyzer — turns validated labels into EnvironmentElements.

Physical attributes come from keyword-indexed tables (first matching key
wins, tables list specific keys before their substrings).  Unmapped
labels fall back to static defaults, so every label yields an element
and every element affords at least one therapeutic focus.

Two attributes describe the *scene slot* rather than the object:
    space     first two elements spacious, next two moderate, rest constrained
    position  cycles central → against_wall → corner → edge → open
Both depend on processing order, so identical objects can receive
different values when the input order changes.
"""

from __future__ import annotations

import logging

from playspace_reason.domain.enums import (
    Height,
    Position,
    SensoryChannel,
    Space,
    Stability,
    Texture,
    TherapeuticFocus as F,
)
from playspace_reason.domain.environment import EnvironmentElement
from playspace_reason.foundation.labels import compact_key, contains_any, first_match, normalize_label

logger = logging.getLogger(__name__)

MAX_ENVIRONMENT_ELEMENTS = 5

HEIGHT_TABLE: dict[str, Height] = {
    "highchair": Height.TABLE,
    "bookcase": Height.ELEVATED,
    "stair": Height.ELEVATED,
    "step": Height.MID,
    "couch": Height.LOW,
    "sofa": Height.LOW,
    "ottoman": Height.LOW,
    "bed": Height.LOW,
    "pillow": Height.LOW,
    "cushion": Height.LOW,
    "blanket": Height.LOW,
    "quilt": Height.LOW,
    "mattress": Height.FLOOR,
    "chair": Height.MID,
    "bench": Height.MID,
    "stool": Height.MID,
    "table": Height.TABLE,
    "desk": Height.TABLE,
    "lamp": Height.TABLE,
    "book": Height.TABLE,
    "shelf": Height.TABLE,
    "ball": Height.FLOOR,
    "carpet": Height.FLOOR,
    "rug": Height.FLOOR,
    "floor": Height.FLOOR,
    "mat": Height.FLOOR,
    "door": Height.ELEVATED,
    "window": Height.ELEVATED,
    "wall": Height.ELEVATED,
}

# Unmapped labels containing one of these default to floor height.
SMALL_PLAY_TERMS: tuple[str, ...] = ("ball", "block", "toy", "doll", "teddy", "lego", "puzzle", "cube")

STABILITY_TABLE: dict[str, Stability] = {
    "stair": Stability.FIXED,
    "floor": Stability.FIXED,
    "wall": Stability.FIXED,
    "couch": Stability.STABLE,
    "sofa": Stability.STABLE,
    "chair": Stability.STABLE,
    "table": Stability.STABLE,
    "desk": Stability.STABLE,
    "bed": Stability.STABLE,
    "bench": Stability.STABLE,
    "carpet": Stability.STABLE,
    "rug": Stability.STABLE,
    "ball": Stability.MOBILE,
    "pillow": Stability.MOBILE,
    "cushion": Stability.MOBILE,
    "blanket": Stability.MOBILE,
    "bicycle": Stability.MOBILE,
    "bike": Stability.MOBILE,
    "swing": Stability.MOBILE,
    "toy": Stability.MOBILE,
}

TEXTURE_TABLE: dict[str, Texture] = {
    "couch": Texture.SOFT,
    "sofa": Texture.SOFT,
    "pillow": Texture.SOFT,
    "cushion": Texture.SOFT,
    "blanket": Texture.SOFT,
    "quilt": Texture.SOFT,
    "teddy": Texture.SOFT,
    "carpet": Texture.SOFT,
    "rug": Texture.SOFT,
    "ball": Texture.SMOOTH,
    "table": Texture.HARD,
    "chair": Texture.HARD,
    "desk": Texture.HARD,
    "floor": Texture.HARD,
    "wall": Texture.HARD,
    "book": Texture.MIXED,
}

MOTOR_TABLE: dict[str, list[F]] = {
    "couch": [F.GROSS_MOTOR, F.SENSORY_REGULATION],
    "sofa": [F.GROSS_MOTOR, F.SENSORY_REGULATION],
    "highchair": [F.FINE_MOTOR, F.BILATERAL_COORDINATION],
    "chair": [F.GROSS_MOTOR, F.FINE_MOTOR, F.BILATERAL_COORDINATION],
    "table": [F.FINE_MOTOR, F.BILATERAL_COORDINATION, F.EXECUTIVE_FUNCTION],
    "desk": [F.FINE_MOTOR, F.EXECUTIVE_FUNCTION],
    "ball": [F.GROSS_MOTOR, F.BILATERAL_COORDINATION, F.MOTOR_PLANNING],
    "stair": [F.GROSS_MOTOR, F.MOTOR_PLANNING],
    "carpet": [F.GROSS_MOTOR, F.SENSORY_REGULATION, F.MOTOR_PLANNING],
    "rug": [F.GROSS_MOTOR, F.SENSORY_REGULATION],
    "bed": [F.GROSS_MOTOR, F.SENSORY_REGULATION],
    "pillow": [F.FINE_MOTOR, F.SENSORY_REGULATION, F.BILATERAL_COORDINATION],
    "cushion": [F.FINE_MOTOR, F.SENSORY_REGULATION, F.BILATERAL_COORDINATION],
    "blanket": [F.BILATERAL_COORDINATION, F.FINE_MOTOR, F.SENSORY_REGULATION],
    "block": [F.FINE_MOTOR, F.EXECUTIVE_FUNCTION, F.BILATERAL_COORDINATION],
    "lego": [F.FINE_MOTOR, F.EXECUTIVE_FUNCTION, F.BILATERAL_COORDINATION],
    "puzzle": [F.EXECUTIVE_FUNCTION, F.FINE_MOTOR],
    "bookcase": [F.EXECUTIVE_FUNCTION, F.GROSS_MOTOR],
    "book": [F.FINE_MOTOR, F.EXECUTIVE_FUNCTION, F.SENSORY_REGULATION],
    "basket": [F.BILATERAL_COORDINATION, F.EXECUTIVE_FUNCTION, F.FINE_MOTOR],
    "box": [F.BILATERAL_COORDINATION, F.EXECUTIVE_FUNCTION, F.FINE_MOTOR],
    "teddy": [F.SENSORY_REGULATION, F.FINE_MOTOR, F.BILATERAL_COORDINATION],
    "doll": [F.FINE_MOTOR, F.SENSORY_REGULATION, F.BILATERAL_COORDINATION],
    "toy": [F.FINE_MOTOR, F.GROSS_MOTOR, F.SENSORY_REGULATION],
    "bench": [F.GROSS_MOTOR, F.MOTOR_PLANNING],
    "ottoman": [F.GROSS_MOTOR, F.SENSORY_REGULATION],
    "stool": [F.GROSS_MOTOR, F.MOTOR_PLANNING, F.FINE_MOTOR],
    "towel": [F.SENSORY_REGULATION, F.BILATERAL_COORDINATION, F.FINE_MOTOR],
    "cup": [F.FINE_MOTOR, F.BILATERAL_COORDINATION],
    "bowl": [F.FINE_MOTOR, F.BILATERAL_COORDINATION, F.EXECUTIVE_FUNCTION],
}

DEFAULT_MOTOR: tuple[F, ...] = (F.FINE_MOTOR, F.GROSS_MOTOR, F.BILATERAL_COORDINATION)

RISK_TABLE: dict[str, list[str]] = {
    "stair": ["خطر السقوط على الدرج"],
    "step": ["احتمال التعثر"],
    "bicycle": ["حركة الدراجة"],
    "bike": ["حركة الدراجة"],
    "lamp": ["الحرارة أو السلك"],
    "window": ["القرب من النافذة"],
    "door": ["حركة الباب"],
    "oven": ["سطح ساخن"],
    "scissors": ["حواف حادة"],
    "swing": ["السقوط من الأرجوحة"],
}

POSITION_ROTATION: tuple[Position, ...] = (
    Position.CENTRAL,
    Position.AGAINST_WALL,
    Position.CORNER,
    Position.EDGE,
    Position.OPEN,
)


def height_for(label: str) -> Height:
    height = first_match(label, HEIGHT_TABLE)
    if height is not None:
        return height
    if contains_any(normalize_label(label), SMALL_PLAY_TERMS):
        return Height.FLOOR
    return Height.MID


def stability_for(label: str) -> Stability:
    return first_match(label, STABILITY_TABLE) or Stability.STABLE


def texture_for(label: str) -> Texture:
    return first_match(label, TEXTURE_TABLE) or Texture.UNKNOWN


def motor_for(label: str) -> list[F]:
    motor = first_match(label, MOTOR_TABLE)
    return list(motor) if motor else list(DEFAULT_MOTOR)


def risks_for(label: str) -> list[str]:
    return list(first_match(label, RISK_TABLE) or [])


def sensory_for(label: str, height: Height) -> list[SensoryChannel]:
    channels = [SensoryChannel.TACTILE, SensoryChannel.VISUAL]
    normalized = normalize_label(label)
    if height == Height.ELEVATED or contains_any(normalized, ("stair", "step")):
        channels += [SensoryChannel.VESTIBULAR, SensoryChannel.PROPRIOCEPTIVE]
    return channels


def space_for_slot(index: int) -> Space:
    if index < 2:
        return Space.SPACIOUS
    if index < 4:
        return Space.MODERATE
    return Space.CONSTRAINED


def analyze_environment(
    labels: list[str],
    max_elements: int = MAX_ENVIRONMENT_ELEMENTS,
) -> list[EnvironmentElement]:
    """Build at most *max_elements* elements, one per unique label."""
    seen: set[str] = set()
    elements: list[EnvironmentElement] = []

    for label in labels:
        if len(elements) >= max_elements:
            break
        key = compact_key(label)
        if not key or key in seen:
            continue
        seen.add(key)

        index = len(elements)
        height = height_for(label)
        elements.append(EnvironmentElement(
            object_label=label,
            position=POSITION_ROTATION[index % len(POSITION_ROTATION)],
            height=height,
            stability=stability_for(label),
            space=space_for_slot(index),
            texture=texture_for(label),
            motor=motor_for(label),
            sensory=sensory_for(label, height),
            risks=risks_for(label),
        ))

    logger.debug("Analyzed %d elements from %d labels", len(elements), len(labels))
    return elements
