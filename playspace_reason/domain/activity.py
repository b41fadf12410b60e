"""Activity models — proposed and refined (element, focus) pairings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from playspace_reason.domain.enums import (
    BalanceComplexity,
    MotorPlanningLoad,
    StrengthDemand,
    TherapeuticFocus,
)
from playspace_reason.domain.environment import EnvironmentElement


class AgeFeasibility(BaseModel):
    """Physical capability ceiling for an age band."""

    max_strength_demand: StrengthDemand
    max_balance_complexity: BalanceComplexity
    max_motor_planning_load: MotorPlanningLoad
    allow_elevated_surfaces: bool
    allow_unstable_surfaces: bool = False

    model_config = {"frozen": True}


class ActivityCandidate(BaseModel):
    """A proposed pairing of an element with a therapeutic focus.

    therapeutic_focus is normally one of element.motor.  The safety
    validator's replacement path may pair a focus with an element that
    does not list it.  unsafe_fallback marks a pairing that failed the
    safety check and could not be replaced; the text formatter must
    describe it with safe-alternative phrasing only.
    """

    object_label: str
    therapeutic_focus: TherapeuticFocus
    element: EnvironmentElement
    unsafe_fallback: bool = Field(
        default=False,
        description="Kept although unsafe because no safe replacement existed",
    )

    model_config = {"frozen": True}

    @property
    def key(self) -> tuple[str, TherapeuticFocus]:
        """Identity used to forbid duplicate pairings within a request."""
        return (self.object_label, self.therapeutic_focus)

    def with_focus(self, focus: TherapeuticFocus) -> ActivityCandidate:
        return self.model_copy(update={"therapeutic_focus": focus})


class RefinedActivity(ActivityCandidate):
    """A candidate plus the deterministic seeds the formatter needs.

    Both seeds are pure functions of (index, age, label, focus), so the
    same request always selects the same text variants.
    """

    specific_skill_seed: int = Field(..., ge=0)
    humanize_offset: int = Field(..., ge=0, le=2)
