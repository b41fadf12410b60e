"""Controlled enumerations for the playspace-reason domain.

Every categorical field in the domain references an enum defined here.
Free-form strings are reserved for labels and display text.
"""

from __future__ import annotations

from enum import Enum


class TherapeuticFocus(str, Enum):
    """The six skill areas an activity can target."""

    SENSORY_REGULATION = "sensory_regulation"
    MOTOR_PLANNING = "motor_planning"
    EXECUTIVE_FUNCTION = "executive_function"
    FINE_MOTOR = "fine_motor"
    GROSS_MOTOR = "gross_motor"
    BILATERAL_COORDINATION = "bilateral_coordination"


class Position(str, Enum):
    CENTRAL = "central"
    AGAINST_WALL = "against_wall"
    CORNER = "corner"
    EDGE = "edge"
    OPEN = "open"


class Height(str, Enum):
    """Floor, low (ankle-knee), mid (knee-hip), table (hip-shoulder), elevated."""

    FLOOR = "floor"
    LOW = "low"
    MID = "mid"
    TABLE = "table"
    ELEVATED = "elevated"


class Stability(str, Enum):
    STABLE = "stable"
    MOBILE = "mobile"
    FIXED = "fixed"


class Space(str, Enum):
    SPACIOUS = "spacious"
    MODERATE = "moderate"
    CONSTRAINED = "constrained"


class Texture(str, Enum):
    SOFT = "soft"
    HARD = "hard"
    MIXED = "mixed"
    SMOOTH = "smooth"
    UNKNOWN = "unknown"


class SensoryChannel(str, Enum):
    TACTILE = "tactile"
    VISUAL = "visual"
    PROPRIOCEPTIVE = "proprioceptive"
    VESTIBULAR = "vestibular"


class ObjectSafetyClass(str, Enum):
    FIXED_HEAVY_FURNITURE = "fixed_heavy_furniture"
    LARGE_MOVABLE = "large_movable"
    SMALL_MANIPULABLE = "small_manipulable"
    ELEVATED_UNSTABLE = "elevated_unstable"
    FLOOR_SAFE = "floor_safe"


class ForbiddenAction(str, Enum):
    LIFT = "lift"
    DRAG = "drag"
    PUSH = "push"
    CLIMB_UNSTABLE = "climb_unstable"
    JUMP_FROM_HEIGHT = "jump_from_height"
    HIGH_FORCE = "high_force"


class SafeActionHint(str, Enum):
    CRAWL_AROUND = "crawl_around"
    NAVIGATE_BETWEEN = "navigate_between"
    REACH_OVER = "reach_over"
    USE_CUSHIONS_OR_FLOOR = "use_cushions_or_floor"
    SUPPORTED_WEIGHT_BEARING = "supported_weight_bearing"


class FocusCategory(str, Enum):
    """Coarse category used when spreading activities out."""

    MOTOR = "motor"
    SENSORY = "sensory"
    EXECUTIVE = "executive"
    ADL = "adl"


class PerformanceDemand(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    BILATERAL = "bilateral"
    SEQUENCING = "sequencing"


class StrengthDemand(str, Enum):
    MINIMAL = "minimal"
    LIGHT = "light"
    MODERATE = "moderate"
    FULL = "full"


class BalanceComplexity(str, Enum):
    STATIC_ONLY = "static_only"
    SIMPLE_DYNAMIC = "simple_dynamic"
    MODERATE_DYNAMIC = "moderate_dynamic"
    COMPLEX = "complex"


class MotorPlanningLoad(str, Enum):
    SINGLE_STEP = "single_step"
    TWO_STEPS = "two_steps"
    THREE_STEPS = "three_steps"
    MULTI_STEP = "multi_step"


class UserMode(str, Enum):
    """Audience the final text is written for."""

    PARENT = "parent"
    THERAPIST = "therapist"


# Ordered tiers, lowest capability first.  Used for monotonicity checks.
STRENGTH_ORDER: tuple[StrengthDemand, ...] = tuple(StrengthDemand)
BALANCE_ORDER: tuple[BalanceComplexity, ...] = tuple(BalanceComplexity)
PLANNING_ORDER: tuple[MotorPlanningLoad, ...] = tuple(MotorPlanningLoad)

ALL_FOCUSES: tuple[TherapeuticFocus, ...] = tuple(TherapeuticFocus)

FOCUS_CATEGORY: dict[TherapeuticFocus, FocusCategory] = {
    TherapeuticFocus.SENSORY_REGULATION: FocusCategory.SENSORY,
    TherapeuticFocus.MOTOR_PLANNING: FocusCategory.MOTOR,
    TherapeuticFocus.EXECUTIVE_FUNCTION: FocusCategory.EXECUTIVE,
    TherapeuticFocus.FINE_MOTOR: FocusCategory.MOTOR,
    TherapeuticFocus.GROSS_MOTOR: FocusCategory.MOTOR,
    TherapeuticFocus.BILATERAL_COORDINATION: FocusCategory.ADL,
}

FOCUS_DEMAND: dict[TherapeuticFocus, PerformanceDemand] = {
    TherapeuticFocus.SENSORY_REGULATION: PerformanceDemand.STATIC,
    TherapeuticFocus.MOTOR_PLANNING: PerformanceDemand.SEQUENCING,
    TherapeuticFocus.EXECUTIVE_FUNCTION: PerformanceDemand.SEQUENCING,
    TherapeuticFocus.FINE_MOTOR: PerformanceDemand.STATIC,
    TherapeuticFocus.GROSS_MOTOR: PerformanceDemand.DYNAMIC,
    TherapeuticFocus.BILATERAL_COORDINATION: PerformanceDemand.BILATERAL,
}
